"""
Nearest-neighbor engine for lift/sweep motion classification.

COMPONENTS:
1. DataPoint: one (velocity, position, effort) sample, plus the distance metric
2. Action: a recording stored as a fixed-stride (bin, joint) grid, 8 joints per bin
3. Records: text record parsing (numeric tokens + trailing label)
4. ReferenceLibrary: the lift and sweep collections, with column extraction
5. ActionClassifier: per-sample 1-NN verdicts aggregated by majority vote
6. Presentation: actions rendered back to record-style lines

Usage:
    from liftsweep.knn import ReferenceLibrary, ActionClassifier, parse_record

    library = ReferenceLibrary.from_file("data/training.txt")
    classifier = ActionClassifier(library)
    result = classifier.evaluate(parse_record(line).to_action())
    print(result.label, result.votes)
"""

from liftsweep.knn.data_point import DataPoint, distance, column_distances
from liftsweep.knn.action import Action, BinIndexError, JOINTS_PER_BIN
from liftsweep.knn.records import (
    ParsedRecord, parse_record, split_record, parse_number, iter_records, read_records
)
from liftsweep.knn.library import Category, ReferenceLibrary, extract_column
from liftsweep.knn.classifier import (
    ActionClassifier,
    Classification,
    VoteTally,
    classify_action,
    classify_point,
    nearest_distance,
)
from liftsweep.knn.presentation import format_action, iter_dataset_lines, print_dataset

__all__ = [
    # Samples
    "DataPoint",
    "distance",
    "column_distances",

    # Actions
    "Action",
    "BinIndexError",
    "JOINTS_PER_BIN",

    # Ingestion
    "ParsedRecord",
    "parse_record",
    "split_record",
    "parse_number",
    "iter_records",
    "read_records",

    # Reference library
    "Category",
    "ReferenceLibrary",
    "extract_column",

    # Classification
    "ActionClassifier",
    "Classification",
    "VoteTally",
    "classify_action",
    "classify_point",
    "nearest_distance",

    # Presentation
    "format_action",
    "iter_dataset_lines",
    "print_dataset",
]
