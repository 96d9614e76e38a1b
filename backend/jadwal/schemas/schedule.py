"""Schedule Schemas — create/update bodies, schedule payload and per-day counts.

Invariants:
    - DayCounts always has the five weekday fields, each >= 0
    - ScheduleTitleUpdate only carries a title: day is not editable through PATCH
"""

from pydantic import BaseModel, ConfigDict, Field


class ScheduleCreate(BaseModel):
    title: str | None = None
    day: str | None = None


class ScheduleTitleUpdate(BaseModel):
    title: str | None = None


class ScheduleResponse(BaseModel):
    """Public-facing schedule data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    title: str
    day: str


class DayCounts(BaseModel):
    """Number of schedules per weekday for one user."""
    monday: int = Field(0, ge=0)
    tuesday: int = Field(0, ge=0)
    wednesday: int = Field(0, ge=0)
    thursday: int = Field(0, ge=0)
    friday: int = Field(0, ge=0)
