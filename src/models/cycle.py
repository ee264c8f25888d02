"""
Cycle record model definitions.
"""
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FlowLevel(str, Enum):
    """Flow intensity reported for a cycle."""
    LIGHT = "Light"
    MODERATE = "Moderate"
    STRONG = "Strong"


class CycleRecord(BaseModel):
    """
    One observed menstrual cycle, keyed by the first day of flow.

    Records are immutable once stored. The derived date fields are advisory
    and are never written by the prediction path.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)

    id: Optional[str] = None
    start_date: date = Field(..., alias="startDate")
    duration: int = Field(..., ge=1, le=15)
    symptoms: Optional[str] = None
    mood: Optional[str] = None
    flow: Optional[FlowLevel] = None
    ovulation_date: Optional[date] = Field(None, alias="ovulationDate")
    fertile_window_start: Optional[date] = Field(None, alias="fertileWindowStart")
    fertile_window_end: Optional[date] = Field(None, alias="fertileWindowEnd")
    next_period_prediction: Optional[date] = Field(None, alias="nextPeriodPrediction")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    def to_response(self) -> Dict[str, Any]:
        """Serialize with camelCase keys and ISO formatted dates."""
        return self.model_dump(mode="json", by_alias=True)


class CycleCreateRequest(BaseModel):
    """Body accepted when registering a new cycle."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    start_date: date = Field(..., alias="startDate")
    duration: int = Field(..., ge=1, le=15)
    symptoms: Optional[str] = None
    mood: Optional[str] = None
    flow: Optional[FlowLevel] = None

    @field_validator("start_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, value: Any) -> Any:
        # Clients may send full ISO timestamps; only the calendar day is kept
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value
