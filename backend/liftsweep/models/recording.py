"""Stored reference recording."""

import uuid
import json
from typing import List, Optional
from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from liftsweep.knn import Action, Category
from liftsweep.models.base import Base, TimestampMixin


class RecordingSource:
    """Where a reference recording came from."""
    API = "api"
    IMPORT = "import"


class ReferenceRecording(Base, TimestampMixin):
    """
    A labeled action kept in the reference library.

    Samples are stored as a flat JSON list of velocity, position, effort
    values, three per sample, in bin-major order.
    """

    __tablename__ = "reference_recordings"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    label: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    sample_count: Mapped[int] = mapped_column(Integer, nullable=False)
    source: Mapped[str] = mapped_column(String(20), default=RecordingSource.API, nullable=False)
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    _values: Mapped[str] = mapped_column("sample_values", Text, nullable=False)

    @property
    def values(self) -> List[float]:
        return json.loads(self._values)

    @values.setter
    def values(self, value: List[float]):
        self._values = json.dumps([float(v) for v in value])

    @classmethod
    def from_action(cls, action: Action, label: str, **kwargs) -> "ReferenceRecording":
        if label not in Category.all():
            raise ValueError(f"label must be one of: {Category.all()}")
        recording = cls(label=label, sample_count=len(action), **kwargs)
        recording.values = action.samples.ravel().tolist()
        return recording

    def to_action(self) -> Action:
        return Action.from_values(self.values)

    def __repr__(self) -> str:
        return f"<ReferenceRecording(id={self.id}, label={self.label}, samples={self.sample_count})>"
