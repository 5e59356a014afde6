"""Sequencing request/response schemas."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class OrderModel(BaseModel):
    id: str
    original_index: Optional[int] = Field(
        default=None, description="Position in the source batch. Defaults to the list position."
    )
    values: Dict[str, Optional[str]] = Field(default_factory=dict)

    @field_validator("values", mode="before")
    @classmethod
    def _stringify_values(cls, value: dict) -> dict:
        """Attribute values are categories; numbers from spreadsheets compare as text."""
        if not isinstance(value, dict):
            return value
        return {key: None if item is None else str(item) for key, item in value.items()}


class AttributeModel(BaseModel):
    column: str = Field(..., min_length=1)
    changeover_time: float = Field(..., ge=0, description="Default changeover time in minutes.")
    parallel_group: Optional[str] = Field(
        default=None, description="Attributes sharing a group are changed over concurrently."
    )


class OverrideEntryModel(BaseModel):
    """A specific value-to-value changeover time for one attribute."""
    attribute: str
    from_value: str
    to_value: str
    minutes: float = Field(..., ge=0)


class SequencingRequest(BaseModel):
    orders: List[OrderModel]
    attributes: List[AttributeModel] = Field(..., description="Changeover attributes, highest priority first.")
    use_override_lookup: bool = False
    overrides: Optional[List[OverrideEntryModel]] = None
    max_passes: Optional[int] = Field(default=None, ge=0)


class OptimizedOrderModel(BaseModel):
    id: str
    original_index: int
    sequence_number: int
    values: Dict[str, str]
    changeover_reasons: List[str]
    changeover_time: float
    work_time: float
    downtime: float


class AttributeStatModel(BaseModel):
    column: str
    changeover_count: int
    total_time: float
    parallel_group: str


class SequencingResponse(BaseModel):
    sequence: List[OptimizedOrderModel]
    total_before: float
    total_after: float
    savings: float
    savings_percent: int
    total_downtime_before: float
    total_downtime_after: float
    downtime_savings: float
    downtime_savings_percent: int
    attribute_stats: List[AttributeStatModel]
    metadata: dict
