"""
Reference library of labeled actions.

Two append-only collections, one per category. Membership is decided once,
from the record label, when an action is added; unknown labels are
discarded. Column extraction rescans the collection on every call.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from liftsweep.knn.action import Action, JOINTS_PER_BIN
from liftsweep.knn.data_point import DataPoint
from liftsweep.knn.records import iter_records

logger = logging.getLogger(__name__)


class Category:
    """Known gesture categories, in declaration order."""
    LIFT = "lift"
    SWEEP = "sweep"

    @classmethod
    def all(cls) -> List[str]:
        return [cls.LIFT, cls.SWEEP]


def extract_column(joint: int, bin: int, collection: Sequence[Action]) -> List[DataPoint]:
    """
    The (joint, bin) sample of every action in ``collection``, in order.

    Raises BinIndexError if any action is too short for the coordinate.
    """
    return [action.point(joint, bin) for action in collection]


class ReferenceLibrary:
    """
    Labeled actions used as the nearest-neighbor comparison set.

    Build it explicitly and hand it to a classifier; several independent
    libraries can coexist.
    """

    def __init__(self, require_complete_bins: bool = False):
        self.lifts: List[Action] = []
        self.sweeps: List[Action] = []
        self.require_complete_bins = require_complete_bins

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[Action, str]],
        require_complete_bins: bool = False,
    ) -> "ReferenceLibrary":
        library = cls(require_complete_bins=require_complete_bins)
        library.extend(pairs)
        return library

    @classmethod
    def from_lines(cls, lines: Iterable[str], require_complete_bins: bool = False) -> "ReferenceLibrary":
        return cls.from_pairs(iter_records(lines), require_complete_bins=require_complete_bins)

    @classmethod
    def from_file(cls, path: Union[str, Path], require_complete_bins: bool = False) -> "ReferenceLibrary":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dataset file not found: {path}")
        with path.open("r", encoding="utf-8") as fh:
            library = cls.from_lines(fh, require_complete_bins=require_complete_bins)
        logger.info(f"Loaded {path}: {len(library.lifts)} lifts, {len(library.sweeps)} sweeps")
        return library

    def collection(self, label: str) -> List[Action]:
        if label == Category.LIFT:
            return self.lifts
        if label == Category.SWEEP:
            return self.sweeps
        raise ValueError(f"Unknown category: {label!r}. Must be one of: {Category.all()}")

    def add(self, action: Action, label: str) -> Optional[str]:
        """
        File ``action`` under ``label``.

        Returns the category it was stored in, or None when it was discarded
        (unknown label, or an incomplete last bin while require_complete_bins
        is set).
        """
        if label not in Category.all():
            logger.debug(f"Discarding action with label {label!r}")
            return None
        if self.require_complete_bins and not action.is_complete:
            logger.warning(
                f"Discarding {label} action with {len(action)} samples "
                f"(not a multiple of {JOINTS_PER_BIN})"
            )
            return None
        self.collection(label).append(action)
        return label

    def extend(self, pairs: Iterable[Tuple[Action, str]]) -> int:
        """Add every pair; returns how many were stored."""
        return sum(1 for action, label in pairs if self.add(action, label) is not None)

    def column(self, label: str, joint: int, bin: int) -> List[DataPoint]:
        return extract_column(joint, bin, self.collection(label))

    def items(self) -> List[Tuple[str, Action]]:
        """(label, action) for all lifts, then all sweeps."""
        return [(Category.LIFT, a) for a in self.lifts] + [(Category.SWEEP, a) for a in self.sweeps]

    @property
    def max_bins(self) -> int:
        return max((a.bin_count for _, a in self.items()), default=0)

    def __len__(self) -> int:
        return len(self.lifts) + len(self.sweeps)

    def __repr__(self) -> str:
        return f"<ReferenceLibrary(lifts={len(self.lifts)}, sweeps={len(self.sweeps)})>"
