from resequencer.models.domain import AttributeConfig, Order
from resequencer.services.orders import collect_values_by_attribute, orders_from_rows


ATTRIBUTES = [AttributeConfig("Color", 20), AttributeConfig("Size", 10)]


def test_orders_from_rows_keeps_configured_columns():
    rows = [
        {"ID": "ORD-1", "Color": "Red", "Size": "Large", "Customer": "ACME"},
        {"ID": "ORD-2", "Color": "Blue", "Size": None},
    ]

    orders = orders_from_rows(rows, ATTRIBUTES, id_column="ID")

    assert orders == [
        Order(id="ORD-1", original_index=0, values={"Color": "Red", "Size": "Large"}),
        Order(id="ORD-2", original_index=1, values={"Color": "Blue", "Size": ""}),
    ]


def test_orders_from_rows_stringifies_cells():
    orders = orders_from_rows([{"ID": 17, "Color": 3, "Size": 12.5}], ATTRIBUTES, id_column="ID")

    assert orders[0].id == "17"
    assert orders[0].values == {"Color": "3", "Size": "12.5"}


def test_orders_from_rows_falls_back_to_row_ids():
    rows = [{"Color": "Red"}, {"ID": "", "Color": "Blue"}, {"ID": "X", "Color": "Blue"}]

    orders = orders_from_rows(rows, ATTRIBUTES, id_column="ID")

    assert [order.id for order in orders] == ["row-0", "row-1", "X"]
    assert [order.id for order in orders_from_rows(rows, ATTRIBUTES)] == ["row-0", "row-1", "row-2"]


def test_collect_values_by_attribute():
    orders = orders_from_rows(
        [{"Color": "Red", "Size": "S"}, {"Color": "Blue"}, {"Color": "Red", "Size": "L"}],
        ATTRIBUTES,
    )

    values = collect_values_by_attribute(orders, ATTRIBUTES)

    assert values == {"Color": {"Red", "Blue"}, "Size": {"S", "", "L"}}
