import pytest

from resequencer.models.domain import AttributeConfig, Order
from resequencer.services.sequencing.costs import (
    OverrideLookup,
    resolve_overrides,
    sequence_totals,
    total_downtime,
    transition_cost,
)


def _order(oid: str, **values: str) -> Order:
    return Order(id=oid, original_index=0, values=dict(values))


def test_same_parallel_group_takes_max_for_downtime():
    attributes = [AttributeConfig("Color", 15, "A"), AttributeConfig("Finish", 10, "A")]

    cost = transition_cost(
        _order("1", Color="Red", Finish="Matte"),
        _order("2", Color="Blue", Finish="Gloss"),
        attributes,
    )

    assert cost.work_time == 25
    assert cost.downtime == 15
    assert cost.reasons == ("Color", "Finish")


def test_different_parallel_groups_sum_for_downtime():
    attributes = [AttributeConfig("Color", 15, "A"), AttributeConfig("Material", 20, "B")]

    cost = transition_cost(
        _order("1", Color="Red", Material="Steel"),
        _order("2", Color="Blue", Material="Aluminum"),
        attributes,
    )

    assert cost.work_time == 35
    assert cost.downtime == 35


def test_unchanged_attributes_cost_nothing():
    attributes = [AttributeConfig("Color", 15), AttributeConfig("Size", 10)]

    cost = transition_cost(_order("1", Color="Red", Size="S"), _order("2", Color="Red", Size="S"), attributes)

    assert cost.work_time == 0
    assert cost.downtime == 0
    assert cost.reasons == ()


def test_only_changed_attributes_are_reported():
    attributes = [AttributeConfig("Color", 15), AttributeConfig("Size", 10)]

    cost = transition_cost(_order("1", Color="Red", Size="S"), _order("2", Color="Red", Size="L"), attributes)

    assert cost.reasons == ("Size",)
    assert cost.work_time == 10


def test_missing_value_counts_as_empty_category():
    attributes = [AttributeConfig("Color", 15)]

    assert transition_cost(_order("1"), _order("2", Color=""), attributes).work_time == 0
    assert transition_cost(_order("1"), _order("2", Color="Red"), attributes).work_time == 15


def test_grouping_uses_exact_string_equality():
    attributes = [AttributeConfig("Size", 10)]

    cost = transition_cost(_order("1", Size="10"), _order("2", Size="10.0"), attributes)

    assert cost.reasons == ("Size",)


def test_override_used_when_enabled():
    attributes = [AttributeConfig("Color", 15)]
    lookup = resolve_overrides(True, {"Color:Red:Blue": 20})

    cost = transition_cost(_order("1", Color="Red"), _order("2", Color="Blue"), attributes, lookup)

    assert cost.work_time == 20
    assert cost.downtime == 20


def test_override_ignored_when_disabled():
    attributes = [AttributeConfig("Color", 15)]
    lookup = resolve_overrides(False, {"Color:Red:Blue": 20})

    cost = transition_cost(_order("1", Color="Red"), _order("2", Color="Blue"), attributes, lookup)

    assert lookup is None
    assert cost.work_time == 15


def test_overrides_are_directional():
    attributes = [AttributeConfig("Color", 15)]
    lookup = OverrideLookup.from_mapping({"Color:Red:White": 25, "Color:White:Red": 8})
    red, white = _order("1", Color="Red"), _order("2", Color="White")

    assert transition_cost(red, white, attributes, lookup).work_time == 25
    assert transition_cost(white, red, attributes, lookup).work_time == 8


def test_one_directional_override_does_not_apply_in_reverse():
    attributes = [AttributeConfig("Color", 15)]
    lookup = OverrideLookup.from_mapping({("Color", "Red", "Blue"): 20})

    cost = transition_cost(_order("1", Color="Blue"), _order("2", Color="Red"), attributes, lookup)

    assert cost.work_time == 15


def test_zero_and_decimal_overrides_are_exact():
    attributes = [AttributeConfig("Color", 15, "A"), AttributeConfig("Size", 10, "B")]
    lookup = OverrideLookup.from_mapping({"Color:Red:Blue": 0, "Size:S:L": 7.5})

    cost = transition_cost(_order("1", Color="Red", Size="S"), _order("2", Color="Blue", Size="L"), attributes, lookup)

    assert cost.work_time == 7.5
    assert cost.downtime == 7.5
    assert cost.reasons == ("Color", "Size")


def test_override_can_change_the_group_maximum():
    attributes = [AttributeConfig("Color", 15, "A"), AttributeConfig("Finish", 10, "A")]
    lookup = OverrideLookup.from_mapping({"Finish:Matte:Gloss": 30})

    cost = transition_cost(
        _order("1", Color="Red", Finish="Matte"),
        _order("2", Color="Blue", Finish="Gloss"),
        attributes,
        lookup,
    )

    assert cost.work_time == 45
    assert cost.downtime == 30


def test_negative_times_are_used_as_given():
    attributes = [AttributeConfig("Color", -5)]

    cost = transition_cost(_order("1", Color="Red"), _order("2", Color="Blue"), attributes)

    assert cost.work_time == -5
    assert cost.downtime == -5


def test_sequence_totals_sum_adjacent_pairs():
    attributes = [AttributeConfig("Color", 15), AttributeConfig("Material", 10)]
    orders = [
        _order("1", Color="Red", Material="Steel"),
        _order("2", Color="Blue", Material="Steel"),
        _order("3", Color="Red", Material="Aluminum"),
        _order("4", Color="Blue", Material="Steel"),
    ]

    work, downtime = sequence_totals(orders, attributes)

    assert work == 65
    assert downtime == 45
    assert total_downtime(orders, attributes) == 45
    assert sequence_totals(orders[:1], attributes) == (0, 0)


def test_override_key_parsing():
    assert OverrideLookup.parse_key("Color:Red:Blue") == ("Color", "Red", "Blue")
    assert OverrideLookup.parse_key(("Thread", "12", "30:1")) == ("Thread", "12", "30:1")
    with pytest.raises(ValueError):
        OverrideLookup.parse_key("Color:Red")


def test_flat_keys_with_extra_colons_are_rejected():
    with pytest.raises(ValueError, match="Thread:12:30:1"):
        OverrideLookup.parse_key("Thread:12:30:1")

    lookup = OverrideLookup.from_mapping({("Time:Slot", "08:00", "12:00"): 7})
    early = Order(id="1", original_index=0, values={"Time:Slot": "08:00"})
    late = Order(id="2", original_index=1, values={"Time:Slot": "12:00"})

    cost = transition_cost(early, late, [AttributeConfig("Time:Slot", 30)], lookup)

    assert cost.work_time == 7


def test_from_entries_keeps_only_values_in_batch():
    entries = [
        ("Color", "Red", "Blue", 20),
        ("Color", "Red", "Green", 30),
        ("Size", "S", "L", 5),
    ]

    lookup = OverrideLookup.from_entries(entries, {"Color": {"Red", "Blue"}})

    assert dict(lookup) == {("Color", "Red", "Blue"): 20}
    assert len(OverrideLookup.from_entries(entries)) == 3


def test_resolve_overrides_with_empty_data():
    assert resolve_overrides(True, None) is None
    assert resolve_overrides(True, {}) is None
    lookup = OverrideLookup.from_mapping({"Color:Red:Blue": 1})
    assert resolve_overrides(True, lookup) is lookup
