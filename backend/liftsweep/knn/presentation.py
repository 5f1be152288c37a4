"""Render actions back to record-style text lines."""

import sys
from typing import Iterator, Optional, TextIO

from liftsweep.knn.action import Action
from liftsweep.knn.library import ReferenceLibrary


def format_value(value: float) -> str:
    # %g keeps six significant digits, the way the records are usually written
    return f"{value:g}"


def format_action(action: Action, label: str) -> str:
    """``vel pos eff `` for every sample, then the label (no newline)."""
    parts = []
    for point in action:
        for value in point:
            parts.append(format_value(value) + " ")
    return "".join(parts) + label


def iter_dataset_lines(library: ReferenceLibrary) -> Iterator[str]:
    """All lift lines, then all sweep lines, each ending in a newline."""
    for label, action in library.items():
        yield format_action(action, label) + "\n"


def print_dataset(library: ReferenceLibrary, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    for line in iter_dataset_lines(library):
        stream.write(line)
