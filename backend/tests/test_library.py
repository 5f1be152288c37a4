"""Tests for the reference library and column extraction."""

import pytest

from liftsweep.knn import (
    BinIndexError, Category, DataPoint, ReferenceLibrary, extract_column, parse_record
)

from helpers import build_action, make_record, repeat


@pytest.fixture
def library():
    lib = ReferenceLibrary()
    for i in range(3):
        lib.add(build_action([(float(i), float(j), 0.0) for j in range(16)]), Category.LIFT)
    lib.add(build_action(repeat((9.0, 9.0, 9.0), 16)), Category.SWEEP)
    return lib


class TestIngestion:

    def test_lift_record_is_filed_under_lifts(self):
        record = parse_record("1.0,2.0,3.0,lift")
        lib = ReferenceLibrary.from_pairs([(record.to_action(), record.label)])

        assert len(lib.lifts) == 1
        assert len(lib.sweeps) == 0
        assert lib.lifts[0].points() == [DataPoint(1.0, 2.0, 3.0)]

    def test_unknown_label_is_discarded(self):
        lib = ReferenceLibrary.from_lines(["1.0,2.0,3.0,unknown"])
        assert len(lib) == 0

    def test_empty_label_is_discarded(self):
        lib = ReferenceLibrary()
        assert lib.add(build_action([(1, 2, 3)]), "") is None
        assert len(lib) == 0

    def test_from_lines_routes_by_label(self):
        lines = [
            make_record(repeat((1, 1, 1)), "lift"),
            make_record(repeat((2, 2, 2)), "sweep"),
            make_record(repeat((3, 3, 3)), "sweep"),
            make_record(repeat((4, 4, 4)), "Lift"),
            "",
        ]
        lib = ReferenceLibrary.from_lines(lines)
        assert (len(lib.lifts), len(lib.sweeps)) == (1, 2)

    def test_require_complete_bins_skips_partial_records(self):
        lib = ReferenceLibrary(require_complete_bins=True)
        assert lib.add(build_action(repeat((1, 1, 1), 12)), Category.LIFT) is None
        assert lib.add(build_action(repeat((1, 1, 1), 16)), Category.LIFT) == Category.LIFT
        assert len(lib.lifts) == 1

    def test_from_file(self, tmp_path):
        path = tmp_path / "training.txt"
        path.write_text(make_record(repeat((1, 1, 1)), "lift") + "\n", encoding="utf-8")
        lib = ReferenceLibrary.from_file(path)
        assert len(lib.lifts) == 1

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ReferenceLibrary.from_file(tmp_path / "nope.txt")


class TestColumnExtraction:

    def test_column_has_one_point_per_action(self, library):
        for joint in range(1, 9):
            for bin in (1, 2):
                column = extract_column(joint, bin, library.lifts)
                assert len(column) == len(library.lifts)

    def test_column_holds_the_stored_samples(self, library):
        column = library.column(Category.LIFT, joint=3, bin=2)
        assert column == [DataPoint(float(i), 10.0, 0.0) for i in range(3)]

    def test_column_matches_point_accessor(self, library):
        column = extract_column(5, 1, library.sweeps)
        assert column == [a.point(5, 1) for a in library.sweeps]

    def test_empty_collection_gives_empty_column(self):
        assert extract_column(1, 1, []) == []

    def test_overrun_is_an_error(self, library):
        library.add(build_action(repeat((0, 0, 0), 8)), Category.LIFT)
        with pytest.raises(BinIndexError):
            library.column(Category.LIFT, joint=1, bin=2)

    def test_unknown_category(self, library):
        with pytest.raises(ValueError):
            library.column("wave", 1, 1)


def test_items_lists_lifts_then_sweeps(library):
    labels = [label for label, _ in library.items()]
    assert labels == ["lift", "lift", "lift", "sweep"]


def test_max_bins(library):
    assert library.max_bins == 2
    assert ReferenceLibrary().max_bins == 0
