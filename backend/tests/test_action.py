"""Tests for the (bin, joint) action grid."""

import pytest

from liftsweep.knn import Action, BinIndexError, DataPoint, JOINTS_PER_BIN

from helpers import build_action


def numbered_action(n_samples: int) -> Action:
    """Sample i holds (i, i, i) so offsets are easy to read back."""
    return build_action([(float(i), float(i), float(i)) for i in range(n_samples)])


class TestIndexing:

    def test_offset_is_bin_major(self):
        assert Action.offset(1, 1) == 0
        assert Action.offset(8, 1) == 7
        assert Action.offset(1, 2) == 8
        assert Action.offset(3, 4) == 26

    def test_point_reads_stored_sample(self):
        action = numbered_action(24)
        for bin in range(1, 4):
            for joint in range(1, JOINTS_PER_BIN + 1):
                expected = float((bin - 1) * 8 + (joint - 1))
                assert action.point(joint, bin) == DataPoint(expected, expected, expected)

    def test_overrun_raises_bin_index_error(self):
        action = numbered_action(8)
        with pytest.raises(BinIndexError) as exc:
            action.point(1, 2)
        assert exc.value.joint == 1
        assert exc.value.bin == 2
        assert exc.value.sample_count == 8
        assert isinstance(exc.value, IndexError)

    def test_partial_bin_is_checked_per_joint(self):
        action = numbered_action(10)
        assert action.point(2, 2) == DataPoint(9.0, 9.0, 9.0)
        with pytest.raises(BinIndexError):
            action.point(3, 2)

    @pytest.mark.parametrize("joint,bin", [(0, 1), (9, 1), (1, 0), (1, -1)])
    def test_invalid_coordinates(self, joint, bin):
        with pytest.raises(ValueError):
            numbered_action(16).index(joint, bin)


class TestConstruction:

    def test_from_values_groups_triples(self):
        action = Action.from_values([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        assert action.points() == [DataPoint(1.0, 2.0, 3.0), DataPoint(4.0, 5.0, 6.0)]

    def test_from_values_drops_incomplete_trailing_triple(self):
        action = Action.from_values([1.0, 2.0, 3.0, 4.0, 5.0])
        assert len(action) == 1

    def test_empty_action(self):
        action = Action.from_values([])
        assert len(action) == 0
        assert action.bin_count == 0
        assert list(action) == []

    def test_samples_are_read_only(self):
        action = numbered_action(8)
        with pytest.raises(ValueError):
            action.samples[0, 0] = 99.0

    def test_construction_copies_input(self):
        values = [1.0, 2.0, 3.0]
        action = Action.from_values(values)
        values[0] = 42.0
        assert action.point(1, 1).velocity == 1.0


class TestShape:

    def test_bin_count_counts_partial_bin(self):
        assert numbered_action(8).bin_count == 1
        assert numbered_action(9).bin_count == 2
        assert numbered_action(16).bin_count == 2

    def test_is_complete(self):
        assert numbered_action(16).is_complete
        assert not numbered_action(12).is_complete

    def test_coordinates_walk_bin_by_bin(self):
        coords = [(bin, joint) for bin, joint, _ in numbered_action(10).coordinates()]
        assert coords[:8] == [(1, j) for j in range(1, 9)]
        assert coords[8:] == [(2, 1), (2, 2)]
