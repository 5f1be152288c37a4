"""Database models."""

from liftsweep.models.base import Base
from liftsweep.models.recording import ReferenceRecording, RecordingSource
from liftsweep.models.classification import ClassificationRecord

__all__ = [
    "Base",
    "ReferenceRecording",
    "RecordingSource",
    "ClassificationRecord",
]
