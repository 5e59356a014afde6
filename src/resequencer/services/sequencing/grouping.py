"""Hierarchical partitioning of orders by attribute value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Union

from ...models.domain import AttributeConfig, Order


@dataclass(slots=True)
class GroupLeaf:
    """Orders sharing every attribute value down to the last level."""

    key: str
    orders: List[Order]

    @property
    def size(self) -> int:
        return len(self.orders)


@dataclass(slots=True)
class GroupNode:
    """Orders sharing a value at this level, split further by the next attribute."""

    key: str
    children: List["OrderGroup"]
    size: int


OrderGroup = Union[GroupLeaf, GroupNode]


def build_groups(
    orders: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    depth: int = 0,
) -> List[OrderGroup]:
    """Partition ``orders`` by ``attributes[depth]`` and recurse into each partition.

    Partitions appear in first-encountered order and keep the relative order of their
    members. Returns an empty list once the attributes are exhausted.
    """
    if depth >= len(attributes):
        return []

    column = attributes[depth].column
    partitions: Dict[str, List[Order]] = {}
    for order in orders:
        partitions.setdefault(order.values.get(column, ""), []).append(order)

    last_level = depth == len(attributes) - 1
    groups: List[OrderGroup] = []
    for key, members in partitions.items():
        if last_level:
            groups.append(GroupLeaf(key=key, orders=members))
        else:
            groups.append(
                GroupNode(key=key, children=build_groups(members, attributes, depth + 1), size=len(members))
            )
    return groups
