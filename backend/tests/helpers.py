"""Builders for test records and actions."""

from typing import Iterable, List, Sequence, Tuple

from liftsweep.knn import Action, DataPoint

Triple = Tuple[float, float, float]


def make_record(points: Iterable[Triple], label: str = "", delim: str = ",") -> str:
    """Record line for ``points`` followed by ``label``."""
    tokens = [repr(float(v)) for p in points for v in p]
    return delim.join(tokens + [label])


def repeat(point: Triple, n: int = 8) -> List[Triple]:
    return [point] * n


def build_action(points: Sequence[Triple]) -> Action:
    return Action.from_points(DataPoint(*p) for p in points)
