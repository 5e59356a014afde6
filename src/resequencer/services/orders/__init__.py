"""Order record helpers."""

from .records import collect_values_by_attribute, orders_from_rows

__all__ = [
    "orders_from_rows",
    "collect_values_by_attribute",
]
