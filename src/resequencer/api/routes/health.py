"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...models.domain import PARALLEL_GROUPS

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/settings", status_code=status.HTTP_200_OK)
def health_settings() -> dict:
    """Expose the optimizer limits the service is running with."""
    return {
        "max_refinement_passes": settings.max_refinement_passes,
        "max_orders_per_request": settings.max_orders_per_request,
        "default_parallel_group": settings.default_parallel_group,
        "parallel_groups": list(PARALLEL_GROUPS),
    }
