"""Stored classification result."""

import uuid
import json
from typing import Dict, Optional
from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from liftsweep.models.base import Base, TimestampMixin


class ClassificationRecord(Base, TimestampMixin):
    """
    One classified action.

    Invariant: coordinates == sum(votes.values())
    """

    __tablename__ = "classifications"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    label: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    sample_count: Mapped[int] = mapped_column(Integer, nullable=False)
    coordinates: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Vote tally (stored as JSON string, first-vote order preserved)
    _votes: Mapped[Optional[str]] = mapped_column("votes", Text, nullable=True)

    @property
    def votes(self) -> Dict[str, int]:
        if self._votes:
            return json.loads(self._votes)
        return {}

    @votes.setter
    def votes(self, value: Optional[Dict[str, int]]):
        if value is not None:
            self._votes = json.dumps(value)
        else:
            self._votes = None

    def validate_votes(self) -> bool:
        """Validate that the tally accounts for every walked coordinate."""
        return self.coordinates == sum(self.votes.values())

    def __repr__(self) -> str:
        return (
            f"<ClassificationRecord(id={self.id}, label={self.label}, "
            f"coordinates={self.coordinates})>"
        )
