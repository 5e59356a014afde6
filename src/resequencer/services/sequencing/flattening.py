"""Flatten a grouping tree into a candidate sequence."""

from __future__ import annotations

from typing import List, Sequence

from ...models.domain import Order
from .grouping import GroupLeaf, OrderGroup


def flatten_groups(groups: Sequence[OrderGroup]) -> List[Order]:
    """Emit orders largest group first at every level.

    ``sorted`` is stable, so equally sized siblings keep their first-encountered order.
    """
    result: List[Order] = []
    for group in sorted(groups, key=lambda item: item.size, reverse=True):
        if isinstance(group, GroupLeaf):
            result.extend(group.orders)
        else:
            result.extend(flatten_groups(group.children))
    return result
