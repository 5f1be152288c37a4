"""Pydantic schemas for API request/response models."""

from liftsweep.schemas.recording import (
    RecordingCreate,
    RecordingResponse,
    LibrarySummary,
)
from liftsweep.schemas.classification import (
    ClassifyRequest,
    ClassificationResponse,
    ClassificationHistoryItem,
    ClassificationListResponse,
)

__all__ = [
    "RecordingCreate",
    "RecordingResponse",
    "LibrarySummary",
    "ClassifyRequest",
    "ClassificationResponse",
    "ClassificationHistoryItem",
    "ClassificationListResponse",
]
