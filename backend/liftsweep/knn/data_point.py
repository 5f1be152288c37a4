"""
Single sensor sample and the distance metric between samples.

A DataPoint is one joint's reading in one time bin: velocity, position and
effort. The three quantities are compared as-is (no scaling), so a large
effort range dominates the distance. That is the accepted behavior.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class DataPoint:
    """A (velocity, position, effort) sample for one joint in one bin."""
    velocity: float
    position: float
    effort: float

    @property
    def vector(self) -> np.ndarray:
        return np.array([self.velocity, self.position, self.effort], dtype=np.float64)

    def __iter__(self):
        yield self.velocity
        yield self.position
        yield self.effort

    @classmethod
    def from_triple(cls, triple: Sequence[float]) -> "DataPoint":
        velocity, position, effort = triple
        return cls(float(velocity), float(position), float(effort))


def distance(a: DataPoint, b: DataPoint) -> float:
    """Unweighted Euclidean distance over the raw measured quantities."""
    delta = a.vector - b.vector
    return float(np.sqrt(np.sum(delta ** 2)))


def column_distances(point: DataPoint, column: Iterable[DataPoint]) -> np.ndarray:
    """
    Distance from ``point`` to every sample of a column.

    Uses the same arithmetic as :func:`distance`, row by row, so a minimum
    taken here equals the minimum of individual ``distance`` calls.
    """
    rows = [p.vector for p in column]
    if not rows:
        return np.empty(0, dtype=np.float64)
    delta = np.vstack(rows) - point.vector
    return np.sqrt(np.sum(delta ** 2, axis=1))
