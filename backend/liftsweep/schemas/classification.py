"""Classification schemas."""

from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel, Field, field_validator


class ClassifyRequest(BaseModel):
    """Schema for classifying one record. Any label in the record is ignored."""
    record: str = Field(..., description="Record line with the unknown action's numeric tokens")

    @field_validator("record")
    @classmethod
    def validate_record(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("record must not be empty")
        return v


class ClassificationResponse(BaseModel):
    """Schema for a classification result."""
    id: Optional[str] = None  # Set when the result was stored
    label: str
    votes: Dict[str, int]
    coordinates: int
    sample_count: int
    line: str  # The action rendered with its guessed label


class ClassificationHistoryItem(BaseModel):
    """Schema for a stored classification."""
    id: str
    label: str
    votes: Dict[str, int]
    coordinates: int
    sample_count: int
    created_at: datetime

    class Config:
        from_attributes = True


class ClassificationListResponse(BaseModel):
    """Schema for paginated classification history."""
    items: List[ClassificationHistoryItem]
    total: int
    page: int
    page_size: int
    has_more: bool
