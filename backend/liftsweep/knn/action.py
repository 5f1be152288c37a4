"""
Recorded motion as a fixed-stride (bin, joint) grid.

An Action stores its samples as one flat, read-only array of shape
``(n_samples, 3)``. Sample ``(bin, joint)`` (both 1-based) lives at flat
offset ``(bin - 1) * JOINTS_PER_BIN + (joint - 1)``. All offset arithmetic
and bounds checking happens in :meth:`Action.index`.
"""

import math
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from liftsweep.knn.data_point import DataPoint

JOINTS_PER_BIN = 8


class BinIndexError(IndexError):
    """A (joint, bin) coordinate lies beyond an action's recorded samples."""

    def __init__(self, joint: int, bin: int, sample_count: int):
        self.joint = joint
        self.bin = bin
        self.sample_count = sample_count
        super().__init__(
            f"joint {joint} of bin {bin} needs {Action.offset(joint, bin) + 1} samples, "
            f"action has {sample_count}"
        )


class Action:
    """
    One recorded motion.

    Built once from (velocity, position, effort) triples and never mutated.
    The sample count does not have to be a multiple of JOINTS_PER_BIN; a
    partial last bin simply has fewer joints.
    """

    def __init__(self, samples: np.ndarray):
        samples = np.asarray(samples, dtype=np.float64).reshape(-1, 3)
        samples = samples.copy()
        samples.setflags(write=False)
        self._samples = samples

    @classmethod
    def from_points(cls, points: Iterable[DataPoint]) -> "Action":
        return cls(np.array([tuple(p) for p in points], dtype=np.float64).reshape(-1, 3))

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Action":
        """Group flat values into triples; a trailing partial triple is dropped."""
        usable = len(values) - len(values) % 3
        return cls(np.array(values[:usable], dtype=np.float64))

    @staticmethod
    def offset(joint: int, bin: int) -> int:
        return (bin - 1) * JOINTS_PER_BIN + (joint - 1)

    @property
    def samples(self) -> np.ndarray:
        return self._samples

    @property
    def bin_count(self) -> int:
        """Number of bins, counting a partial last bin."""
        return math.ceil(len(self) / JOINTS_PER_BIN)

    @property
    def is_complete(self) -> bool:
        """True when every bin holds all JOINTS_PER_BIN samples."""
        return len(self) % JOINTS_PER_BIN == 0

    def index(self, joint: int, bin: int) -> int:
        """Flat offset of (joint, bin), checked against this action's length."""
        if not 1 <= joint <= JOINTS_PER_BIN:
            raise ValueError(f"joint must be in 1..{JOINTS_PER_BIN}, got {joint}")
        if bin < 1:
            raise ValueError(f"bin must be >= 1, got {bin}")
        idx = self.offset(joint, bin)
        if idx >= len(self):
            raise BinIndexError(joint, bin, len(self))
        return idx

    def point(self, joint: int, bin: int) -> DataPoint:
        return DataPoint.from_triple(self._samples[self.index(joint, bin)])

    def coordinates(self) -> Iterator[Tuple[int, int, DataPoint]]:
        """Yield (bin, joint, sample) in storage order, bin-major."""
        for idx, row in enumerate(self._samples):
            bin, joint = divmod(idx, JOINTS_PER_BIN)
            yield bin + 1, joint + 1, DataPoint.from_triple(row)

    def points(self) -> List[DataPoint]:
        return [DataPoint.from_triple(row) for row in self._samples]

    def __iter__(self) -> Iterator[DataPoint]:
        for row in self._samples:
            yield DataPoint.from_triple(row)

    def __len__(self) -> int:
        return self._samples.shape[0]

    def __repr__(self) -> str:
        return f"<Action(samples={len(self)}, bins={self.bin_count})>"
