"""Reference recording and library schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class RecordingCreate(BaseModel):
    """Schema for adding a labeled record to the reference library."""
    record: str = Field(..., description="Record line: numeric tokens followed by the label (lift or sweep)")
    note: Optional[str] = None

    @field_validator("record")
    @classmethod
    def validate_record(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("record must not be empty")
        return v


class RecordingResponse(BaseModel):
    """Schema for a stored reference recording."""
    id: str
    label: str
    sample_count: int
    source: str
    note: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class LibrarySummary(BaseModel):
    """Size of the live reference library."""
    lifts: int
    sweeps: int
    total: int
    max_bins: int
    joints_per_bin: int
