"""Changeover cost model.

Work time is the labour spent on a changeover: the sum of the resolved time of every
attribute whose value changes. Downtime is how long the line stands still: attributes in
the same parallel group are handled concurrently, so a group costs the maximum of its
changed attributes, and the groups themselves run one after another.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from ...models.domain import ZERO_COST, AttributeConfig, Order, TransitionCost

OverrideKey = Tuple[str, str, str]


class OverrideLookup(Mapping):
    """Directional changeover times keyed by ``(attribute, from_value, to_value)``."""

    __slots__ = ("_times",)

    def __init__(self, times: Optional[Mapping] = None) -> None:
        self._times: Dict[OverrideKey, float] = dict(times or {})

    def __getitem__(self, key: OverrideKey) -> float:
        return self._times[key]

    def __iter__(self) -> Iterator[OverrideKey]:
        return iter(self._times)

    def __len__(self) -> int:
        return len(self._times)

    def __repr__(self) -> str:
        return f"OverrideLookup({self._times!r})"

    @staticmethod
    def parse_key(key: Union[str, Sequence[str]]) -> OverrideKey:
        """Accept either a tuple key or the flat ``"attribute:from:to"`` form.

        The flat form cannot say where a name or value containing ``:`` ends, so such keys
        are rejected; pass a tuple for them.
        """
        if isinstance(key, str):
            parts = key.split(":")
            if len(parts) != 3:
                raise ValueError(f"Override key '{key}' is not of the form 'attribute:from:to'.")
            return parts[0], parts[1], parts[2]
        attribute, from_value, to_value = key
        return attribute, from_value, to_value

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "OverrideLookup":
        return cls({cls.parse_key(key): time for key, time in mapping.items()})

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[str, str, str, float]],
        values_by_attribute: Optional[Mapping[str, set]] = None,
    ) -> "OverrideLookup":
        """Build a lookup from ``(attribute, from_value, to_value, minutes)`` records.

        When ``values_by_attribute`` is given, entries for attributes outside it, or whose
        values never occur in the batch, are dropped.
        """
        times: Dict[OverrideKey, float] = {}
        for attribute, from_value, to_value, minutes in entries:
            if values_by_attribute is not None:
                present = values_by_attribute.get(attribute)
                if not present or from_value not in present or to_value not in present:
                    continue
            times[(attribute, from_value, to_value)] = minutes
        return cls(times)


def resolve_overrides(
    use_override_lookup: bool,
    overrides: Optional[Mapping],
) -> Optional[OverrideLookup]:
    """Return the lookup to consult, or ``None`` when overrides are off or empty."""
    if not use_override_lookup or not overrides:
        return None
    if isinstance(overrides, OverrideLookup):
        return overrides
    return OverrideLookup.from_mapping(overrides)


def transition_cost(
    prev: Order,
    curr: Order,
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
) -> TransitionCost:
    work_time = 0
    reasons: list[str] = []
    group_max: Dict[str, float] = {}

    for attribute in attributes:
        prev_value = prev.values.get(attribute.column, "")
        curr_value = curr.values.get(attribute.column, "")
        if prev_value == curr_value:
            continue

        time = attribute.changeover_time
        if lookup is not None:
            time = lookup.get((attribute.column, prev_value, curr_value), time)

        work_time += time
        reasons.append(attribute.column)
        group = attribute.parallel_group
        if group not in group_max or time > group_max[group]:
            group_max[group] = time

    if not reasons:
        return ZERO_COST
    return TransitionCost(work_time=work_time, downtime=sum(group_max.values()), reasons=tuple(reasons))


def sequence_totals(
    sequence: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
) -> Tuple[float, float]:
    """Total (work time, downtime) over every adjacent pair of ``sequence``."""
    total_work = 0
    total_downtime = 0
    for index in range(1, len(sequence)):
        cost = transition_cost(sequence[index - 1], sequence[index], attributes, lookup)
        total_work += cost.work_time
        total_downtime += cost.downtime
    return total_work, total_downtime


def total_downtime(
    sequence: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
) -> float:
    return sequence_totals(sequence, attributes, lookup)[1]
