"""Map tabular rows from an importer into orders."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from ...models.domain import AttributeConfig, Order


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def orders_from_rows(
    rows: Iterable[Mapping[str, Any]],
    attributes: Sequence[AttributeConfig],
    *,
    id_column: Optional[str] = None,
) -> List[Order]:
    """Build one order per row, keeping only the configured attribute columns.

    Rows without a usable id fall back to ``row-<index>``.
    """
    orders: List[Order] = []
    for index, row in enumerate(rows):
        order_id = _cell_text(row.get(id_column)) if id_column else ""
        orders.append(
            Order(
                id=order_id or f"row-{index}",
                original_index=index,
                values={attribute.column: _cell_text(row.get(attribute.column)) for attribute in attributes},
            )
        )
    return orders


def collect_values_by_attribute(
    orders: Iterable[Order],
    attributes: Sequence[AttributeConfig],
) -> Dict[str, Set[str]]:
    values: Dict[str, Set[str]] = {attribute.column: set() for attribute in attributes}
    for order in orders:
        for column, seen in values.items():
            seen.add(order.values.get(column, ""))
    return values
