"""
Nearest-neighbor voting classifier.

For every (joint, bin) sample of the unknown action:
1. Extract the matching column from the lift and the sweep collections
2. Find the nearest reference sample on each side
3. Vote for the closer side (ties vote "lift")

The label with the most votes wins. Equal counts go to the label that
received its first vote earliest.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Sequence

import numpy as np

from liftsweep.knn.action import Action
from liftsweep.knn.data_point import DataPoint, column_distances
from liftsweep.knn.library import Category, ReferenceLibrary

logger = logging.getLogger(__name__)

# Starting minimum for a column; an empty column never wins
NO_DISTANCE = float("inf")


def nearest_distance(point: DataPoint, column: Sequence[DataPoint]) -> float:
    """Distance from ``point`` to its nearest neighbor in ``column``."""
    nearest = NO_DISTANCE
    distances = column_distances(point, column)
    if distances.size:
        nearest = min(nearest, float(np.min(distances)))
    return nearest


def classify_point(
    point: DataPoint,
    lift_column: Sequence[DataPoint],
    sweep_column: Sequence[DataPoint],
) -> str:
    """1-NN label of one sample; an exact tie (or two empty columns) is "lift"."""
    min_lift = nearest_distance(point, lift_column)
    min_sweep = nearest_distance(point, sweep_column)
    if min_lift > min_sweep:
        return Category.SWEEP
    return Category.LIFT


@dataclass
class VoteTally:
    """Per-call vote counts, kept in first-vote order."""
    counts: Dict[str, int] = field(default_factory=dict)

    def add(self, label: str) -> None:
        self.counts[label] = self.counts.get(label, 0) + 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def winner(self) -> str:
        """Strictly highest count; "" when nothing was voted."""
        best_label = ""
        best_count = 0
        for label, count in self.counts.items():
            if count > best_count:
                best_label = label
                best_count = count
        return best_label


@dataclass
class Classification:
    """Result of classifying one action."""
    label: str
    tally: VoteTally

    @property
    def votes(self) -> Dict[str, int]:
        return dict(self.tally.counts)

    @property
    def coordinates(self) -> int:
        return self.tally.total


class ActionClassifier:
    """Classifies actions against one reference library."""

    def __init__(self, library: ReferenceLibrary):
        self.library = library

    def classify_point_at(self, point: DataPoint, joint: int, bin: int) -> str:
        lift_column = self.library.column(Category.LIFT, joint, bin)
        sweep_column = self.library.column(Category.SWEEP, joint, bin)
        return classify_point(point, lift_column, sweep_column)

    def evaluate(self, action: Action) -> Classification:
        """Walk the action bin by bin, joint by joint, and tally the votes."""
        tally = VoteTally()
        for bin, joint, point in action.coordinates():
            tally.add(self.classify_point_at(point, joint, bin))

        result = Classification(label=tally.winner(), tally=tally)
        logger.debug(f"Classified {action!r} as {result.label!r}, votes: {result.votes}")
        return result

    def classify(self, action: Action) -> str:
        return self.evaluate(action).label


def classify_action(action: Action, library: ReferenceLibrary) -> str:
    """Convenience function to classify one action."""
    return ActionClassifier(library).classify(action)
