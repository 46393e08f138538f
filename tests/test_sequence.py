"""Tests for dominant-axis ordering."""

import pytest

from levelforge import ValidationError
from levelforge.sequence import dominant_axis, sort_by_dominant_axis


class TestDominantAxis:
    """Tests for dominant_axis()."""

    def test_wide_box(self):
        assert dominant_axis([(0, 0), (10, 1)]) == 0

    def test_tall_box(self):
        assert dominant_axis([(0, 0), (1, 10)]) == 1

    def test_square_box_uses_y(self):
        assert dominant_axis([(0, 0), (5, 5)]) == 1

    def test_single_point_uses_y(self):
        assert dominant_axis([(3, 4)]) == 1

    def test_empty(self):
        assert dominant_axis([]) is None


class TestSortByDominantAxis:
    """Tests for sort_by_dominant_axis()."""

    def test_sorts_by_x_when_wide(self):
        points = [(9, 0), (1, 2), (5, 1)]
        assert sort_by_dominant_axis(points) == [(1, 2), (5, 1), (9, 0)]

    def test_sorts_by_y_when_tall(self):
        points = [(0, 9), (2, 1), (1, 5)]
        assert sort_by_dominant_axis(points) == [(2, 1), (1, 5), (0, 9)]

    def test_equal_extent_sorts_by_y(self):
        points = [(0, 4), (4, 0), (2, 2)]
        assert sort_by_dominant_axis(points) == [(4, 0), (2, 2), (0, 4)]

    def test_stable_under_duplicate_keys(self):
        points = [(5, 0, 1), (1, 0, 2), (5, 0, 3), (1, 0, 4)]
        result = sort_by_dominant_axis(points)
        assert result == [(1, 0, 2), (1, 0, 4), (5, 0, 1), (5, 0, 3)]

    def test_idempotent(self):
        points = [(3, 0), (1, 1), (7, 0), (2, 1)]
        once = sort_by_dominant_axis(points)
        assert sort_by_dominant_axis(once) == once

    def test_empty(self):
        assert sort_by_dominant_axis([]) == []

    def test_input_not_modified(self):
        points = [(3, 0), (1, 0)]
        sort_by_dominant_axis(points)
        assert points == [(3, 0), (1, 0)]

    def test_short_point_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            sort_by_dominant_axis([(0, 0), (5,)])
        assert excinfo.value.details["index"] == 1

    def test_key_orders_arbitrary_items(self):
        items = [("c", (30, 1)), ("a", (10, 0)), ("b", (20, 2)), ("a2", (10, 5))]
        result = sort_by_dominant_axis(items, key=lambda item: item[1])
        assert [name for name, _ in result] == ["a", "a2", "b", "c"]
