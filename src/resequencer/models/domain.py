"""Domain models for production orders and changeover results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

DEFAULT_PARALLEL_GROUP = "default"
PARALLEL_GROUPS: Tuple[str, ...] = (DEFAULT_PARALLEL_GROUP, "A", "B", "C", "D")


def parallel_group_name(group: str) -> str:
    """Display label for a parallel group."""
    if group == DEFAULT_PARALLEL_GROUP:
        return "Default"
    return f"Group {group}"


@dataclass(slots=True)
class Order:
    """A production order with its categorical attribute values."""

    id: str
    original_index: int
    values: Dict[str, str]


@dataclass(slots=True)
class AttributeConfig:
    """A changeover attribute. Its position in the attribute list is its priority."""

    column: str
    changeover_time: float
    parallel_group: str = DEFAULT_PARALLEL_GROUP


@dataclass(slots=True, frozen=True)
class TransitionCost:
    work_time: float
    downtime: float
    reasons: Tuple[str, ...]


ZERO_COST = TransitionCost(work_time=0, downtime=0, reasons=())


@dataclass(slots=True)
class OptimizedOrder:
    """An order placed in the optimized sequence with the cost of reaching it."""

    order: Order
    sequence_number: int
    reasons: Tuple[str, ...]
    work_time: float
    downtime: float

    @property
    def id(self) -> str:
        return self.order.id

    @property
    def original_index(self) -> int:
        return self.order.original_index

    @property
    def values(self) -> Dict[str, str]:
        return self.order.values

    @property
    def changeover_time(self) -> float:
        return self.work_time


@dataclass(slots=True)
class AttributeStat:
    column: str
    changeover_count: int
    total_time: float
    parallel_group: str


@dataclass(slots=True)
class OptimizationResult:
    sequence: List[OptimizedOrder] = field(default_factory=list)
    total_before: float = 0
    total_after: float = 0
    savings: float = 0
    savings_percent: int = 0
    total_downtime_before: float = 0
    total_downtime_after: float = 0
    downtime_savings: float = 0
    downtime_savings_percent: int = 0
    attribute_stats: List[AttributeStat] = field(default_factory=list)
    passes: int = 0
    swaps: int = 0
    overrides_applied: bool = False
