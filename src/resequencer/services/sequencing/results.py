"""Before/after totals and per-attribute statistics for an optimized sequence."""

from __future__ import annotations

import math
from typing import List, Mapping, Optional, Sequence

from ...models.domain import (
    AttributeConfig,
    AttributeStat,
    OptimizationResult,
    OptimizedOrder,
    Order,
)
from .costs import OverrideKey, sequence_totals, transition_cost


def _percent(part: float, whole: float) -> int:
    # half-up rounding, so 12.5 -> 13 rather than banker's 12
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)


def empty_result() -> OptimizationResult:
    return OptimizationResult()


def single_order_result(order: Order) -> OptimizationResult:
    return OptimizationResult(
        sequence=[OptimizedOrder(order=order, sequence_number=1, reasons=(), work_time=0, downtime=0)]
    )


def build_sequence(
    orders: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
) -> List[OptimizedOrder]:
    """Attach sequence numbers and the cost of reaching each order from its predecessor."""
    sequence: List[OptimizedOrder] = []
    for index, order in enumerate(orders):
        if index == 0:
            sequence.append(OptimizedOrder(order=order, sequence_number=1, reasons=(), work_time=0, downtime=0))
            continue
        cost = transition_cost(orders[index - 1], order, attributes, lookup)
        sequence.append(
            OptimizedOrder(
                order=order,
                sequence_number=index + 1,
                reasons=cost.reasons,
                work_time=cost.work_time,
                downtime=cost.downtime,
            )
        )
    return sequence


def attribute_stats(sequence: Sequence[OptimizedOrder], attributes: Sequence[AttributeConfig]) -> List[AttributeStat]:
    """Count changes per attribute.

    ``total_time`` is the count times the attribute's default time, even where an override
    priced the actual transition.
    """
    stats: List[AttributeStat] = []
    for attribute in attributes:
        count = sum(1 for item in sequence if attribute.column in item.reasons)
        stats.append(
            AttributeStat(
                column=attribute.column,
                changeover_count=count,
                total_time=count * attribute.changeover_time,
                parallel_group=attribute.parallel_group,
            )
        )
    return stats


def build_result(
    original: Sequence[Order],
    refined: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
) -> OptimizationResult:
    if not refined:
        return empty_result()
    if len(refined) == 1:
        return single_order_result(refined[0])

    total_before, total_downtime_before = sequence_totals(original, attributes, lookup)
    sequence = build_sequence(refined, attributes, lookup)
    total_after = sum(item.work_time for item in sequence)
    total_downtime_after = sum(item.downtime for item in sequence)

    savings = total_before - total_after
    downtime_savings = total_downtime_before - total_downtime_after

    return OptimizationResult(
        sequence=sequence,
        total_before=total_before,
        total_after=total_after,
        savings=savings,
        savings_percent=_percent(savings, total_before),
        total_downtime_before=total_downtime_before,
        total_downtime_after=total_downtime_after,
        downtime_savings=downtime_savings,
        downtime_savings_percent=_percent(downtime_savings, total_downtime_before),
        attribute_stats=attribute_stats(sequence, attributes),
    )
