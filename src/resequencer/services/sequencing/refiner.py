"""Adjacent-swap hill climbing over a candidate sequence.

Each pass walks the sequence left to right and swaps positions ``i`` and ``i + 1``
whenever that strictly lowers total downtime. Only the edges around the swapped pair
change, so a swap is judged on those edges alone:

    before: prev -> a -> b -> next
    after:  prev -> b -> a -> next

The middle edge is re-evaluated too because override times are directional.
Edge sums within ``TIE_TOLERANCE`` of each other count as ties, so float rounding of
decimal minutes never decides a swap.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from ...config import settings
from ...models.domain import AttributeConfig, Order
from .costs import OverrideKey, transition_cost

logger = logging.getLogger(__name__)

TIE_TOLERANCE = 1e-9


@dataclass(slots=True)
class RefinementOutcome:
    sequence: List[Order]
    downtime: float
    passes: int
    swaps: int


def _downtime(prev: Order, curr: Order, attributes: Sequence[AttributeConfig], lookup) -> float:
    return transition_cost(prev, curr, attributes, lookup).downtime


def _is_tie(after: float, before: float) -> bool:
    return math.isclose(after, before, rel_tol=TIE_TOLERANCE, abs_tol=TIE_TOLERANCE)


def refine_sequence(
    sequence: Sequence[Order],
    attributes: Sequence[AttributeConfig],
    lookup: Optional[Mapping[OverrideKey, float]] = None,
    *,
    max_passes: int | None = None,
    should_stop: Callable[[], bool] | None = None,
) -> RefinementOutcome:
    current = list(sequence)
    count = len(current)
    edges = [_downtime(current[k], current[k + 1], attributes, lookup) for k in range(count - 1)]

    if count <= 2:
        return RefinementOutcome(sequence=current, downtime=sum(edges), passes=0, swaps=0)

    max_passes = settings.max_refinement_passes if max_passes is None else max_passes
    passes = 0
    swaps = 0
    improved = True

    while improved and passes < max_passes:
        if should_stop is not None and should_stop():
            logger.info(f"Refinement stopped by caller after {passes} passes")
            break
        improved = False
        passes += 1

        for i in range(count - 1):
            a, b = current[i], current[i + 1]
            before = edges[i]
            middle_after = _downtime(b, a, attributes, lookup)
            after = middle_after
            if i > 0:
                prev_after = _downtime(current[i - 1], b, attributes, lookup)
                before += edges[i - 1]
                after += prev_after
            if i + 2 < count:
                next_after = _downtime(a, current[i + 2], attributes, lookup)
                before += edges[i + 1]
                after += next_after

            if after < before and not _is_tie(after, before):
                current[i], current[i + 1] = b, a
                edges[i] = middle_after
                if i > 0:
                    edges[i - 1] = prev_after
                if i + 2 < count:
                    edges[i + 1] = next_after
                swaps += 1
                improved = True

        logger.debug(f"Refinement pass {passes} finished, {swaps} swaps so far")

    return RefinementOutcome(sequence=current, downtime=sum(edges), passes=passes, swaps=swaps)
