"""Sequencing orchestration service."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ...config import settings
from ...models.domain import AttributeConfig, OptimizationResult, Order
from ...schemas.sequencing import (
    AttributeStatModel,
    OptimizedOrderModel,
    SequencingRequest,
    SequencingResponse,
)
from ..orders.records import collect_values_by_attribute
from .costs import OverrideLookup
from .optimizer import optimize

logger = logging.getLogger(__name__)


def _build_attributes(payload: SequencingRequest) -> List[AttributeConfig]:
    if not payload.attributes:
        raise ValueError("At least one changeover attribute is required.")

    attributes: List[AttributeConfig] = []
    seen: set[str] = set()
    for item in payload.attributes:
        if item.column in seen:
            raise ValueError(f"Attribute '{item.column}' is configured more than once.")
        seen.add(item.column)
        attributes.append(
            AttributeConfig(
                column=item.column,
                changeover_time=item.changeover_time,
                parallel_group=item.parallel_group or settings.default_parallel_group,
            )
        )
    return attributes


def _build_orders(payload: SequencingRequest, attributes: Sequence[AttributeConfig]) -> List[Order]:
    if len(payload.orders) > settings.max_orders_per_request:
        raise ValueError(
            f"Received {len(payload.orders)} orders; at most {settings.max_orders_per_request} are accepted per request."
        )

    orders: List[Order] = []
    seen: set[str] = set()
    for index, item in enumerate(payload.orders):
        if item.id in seen:
            raise ValueError(f"Order id '{item.id}' appears more than once.")
        seen.add(item.id)
        orders.append(
            Order(
                id=item.id,
                original_index=item.original_index if item.original_index is not None else index,
                values={attribute.column: item.values.get(attribute.column) or "" for attribute in attributes},
            )
        )
    return orders


def _build_overrides(
    payload: SequencingRequest,
    orders: Sequence[Order],
    attributes: Sequence[AttributeConfig],
) -> OverrideLookup | None:
    if not payload.use_override_lookup or not payload.overrides:
        return None

    known = {attribute.column for attribute in attributes}
    unknown = sorted({entry.attribute for entry in payload.overrides if entry.attribute not in known})
    if unknown:
        raise ValueError(f"Overrides reference unknown attributes: {', '.join(unknown)}.")

    return OverrideLookup.from_entries(
        ((entry.attribute, entry.from_value, entry.to_value, entry.minutes) for entry in payload.overrides),
        collect_values_by_attribute(orders, attributes),
    )


def result_to_response(result: OptimizationResult, metadata: dict) -> SequencingResponse:
    return SequencingResponse(
        sequence=[
            OptimizedOrderModel(
                id=item.id,
                original_index=item.original_index,
                sequence_number=item.sequence_number,
                values=dict(item.values),
                changeover_reasons=list(item.reasons),
                changeover_time=item.changeover_time,
                work_time=item.work_time,
                downtime=item.downtime,
            )
            for item in result.sequence
        ],
        total_before=result.total_before,
        total_after=result.total_after,
        savings=result.savings,
        savings_percent=result.savings_percent,
        total_downtime_before=result.total_downtime_before,
        total_downtime_after=result.total_downtime_after,
        downtime_savings=result.downtime_savings,
        downtime_savings_percent=result.downtime_savings_percent,
        attribute_stats=[
            AttributeStatModel(
                column=stat.column,
                changeover_count=stat.changeover_count,
                total_time=stat.total_time,
                parallel_group=stat.parallel_group,
            )
            for stat in result.attribute_stats
        ],
        metadata=metadata,
    )


def run_optimization(payload: SequencingRequest) -> OptimizationResult:
    attributes = _build_attributes(payload)
    orders = _build_orders(payload, attributes)
    lookup = _build_overrides(payload, orders, attributes)
    if lookup:
        logger.info(f"Using {len(lookup)} override entries for {len(orders)} orders")
    return optimize(
        orders,
        attributes,
        use_override_lookup=lookup is not None,
        overrides=lookup,
        max_passes=payload.max_passes,
    )


def optimize_sequence(payload: SequencingRequest) -> SequencingResponse:
    result = run_optimization(payload)
    metadata = {
        "order_count": len(payload.orders),
        "attribute_count": len(payload.attributes),
        "refinement_passes": result.passes,
        "refinement_swaps": result.swaps,
        "overrides_applied": result.overrides_applied,
        "objective": "downtime",
    }
    return result_to_response(result, metadata)
