"""
Text record parsing.

A record is one line: numeric tokens separated by single delimiter
characters, then a free-text label::

    0.12,1.5,-3e-2,...,0.7,lift

A character is numeric if it is a digit or one of ``. e + -``. Exactly one
character after each numeric token is skipped as the delimiter; whatever
follows the last one is the label, verbatim.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from liftsweep.knn.action import Action

logger = logging.getLogger(__name__)

NUMERIC_CHARS = frozenset("0123456789.e+-")

# Longest prefix a C-style atof() would accept
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?")


@dataclass
class ParsedRecord:
    """Values and label read from one record line."""
    values: List[float]
    label: str

    def to_action(self) -> Action:
        return Action.from_values(self.values)

    @property
    def dropped_values(self) -> int:
        """Trailing values that did not form a complete triple."""
        return len(self.values) % 3


def parse_number(token: str) -> float:
    """Convert a numeric token; an unparsable token reads as 0.0."""
    match = _FLOAT_PREFIX.match(token)
    if not match:
        return 0.0
    return float(match.group(0))


def split_record(line: str) -> Tuple[List[float], str]:
    """Split a record line into its numeric values and its label."""
    line = line.rstrip("\r\n")
    values: List[float] = []
    begin = 0
    while begin < len(line) and line[begin] in NUMERIC_CHARS:
        end = begin
        while end < len(line) and line[end] in NUMERIC_CHARS:
            end += 1
        values.append(parse_number(line[begin:end]))
        begin = end + 1
    return values, line[begin:]


def parse_record(line: str) -> ParsedRecord:
    values, label = split_record(line)
    return ParsedRecord(values=values, label=label)


def iter_records(lines: Iterable[str]) -> Iterator[Tuple[Action, str]]:
    """Yield (action, label) for every line, in order."""
    for lineno, line in enumerate(lines, 1):
        record = parse_record(line)
        if record.dropped_values:
            logger.debug(
                f"Line {lineno}: dropping {record.dropped_values} trailing value(s) "
                f"that do not form a complete triple"
            )
        yield record.to_action(), record.label


def read_records(path: Union[str, Path]) -> List[Tuple[Action, str]]:
    """Read every record of a dataset file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        return list(iter_records(fh))
