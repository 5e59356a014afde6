"""Sequencing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.sequencing import SequencingRequest, SequencingResponse
from ...services.outputs.formatter import result_to_csv, summary_to_csv
from ...services.sequencing.service import optimize_sequence, run_optimization

router = APIRouter(prefix="/sequences", tags=["sequences"])


@router.post("/optimize", response_model=SequencingResponse, status_code=status.HTTP_200_OK)
def optimize(payload: SequencingRequest) -> SequencingResponse:
    try:
        return optimize_sequence(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing sequence: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize sequence: {str(exc)}"
        ) from exc


@router.post("/export.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_csv(payload: SequencingRequest) -> PlainTextResponse:
    """Optimize and return the sequence as CSV."""
    try:
        result = run_optimization(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting sequence: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export sequence: {str(exc)}"
        ) from exc
    return PlainTextResponse(
        result_to_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="optimized_sequence.csv"'},
    )


@router.post("/summary.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_summary_csv(payload: SequencingRequest) -> PlainTextResponse:
    """Optimize and return the before/after summary with the attribute breakdown as CSV."""
    try:
        result = run_optimization(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting summary: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export summary: {str(exc)}"
        ) from exc
    return PlainTextResponse(
        summary_to_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="optimization_summary.csv"'},
    )
