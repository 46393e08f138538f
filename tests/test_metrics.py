"""Tests for the metrics module."""

import pytest

from levelforge import Contour
from levelforge.metrics import contour_area, contour_length, measure_contour


class TestContourArea:
    """Tests for contour_area()."""

    def test_square(self):
        assert contour_area(Contour(((0, 0), (10, 0), (10, 10), (0, 10)), closed=True)) == 100.0

    def test_orientation_does_not_matter(self):
        assert contour_area([(0, 0), (0, 10), (10, 10), (10, 0)]) == 100.0

    def test_fewer_than_three_vertices(self):
        assert contour_area([(0, 0), (1, 1)]) == 0.0


class TestContourLength:
    """Tests for contour_length()."""

    def test_open_polyline(self):
        assert contour_length(Contour(((0, 0), (3, 0), (3, 4)))) == pytest.approx(7.0)

    def test_closed_adds_closing_edge(self):
        assert contour_length(Contour(((0, 0), (3, 0), (3, 4)), closed=True)) == pytest.approx(12.0)

    def test_plain_sequence_is_open(self):
        assert contour_length([(0, 0), (3, 0), (3, 4)]) == pytest.approx(7.0)


class TestMeasureContour:
    """Tests for measure_contour()."""

    def test_closed_square(self):
        metrics = measure_contour(Contour(((0, 0), (10, 0), (10, 10), (0, 10)), closed=True))

        assert metrics["vertex_count"] == 4
        assert metrics["is_closed"] is True
        assert metrics["area"] == 100.0
        assert metrics["length"] == pytest.approx(40.0)
        assert metrics["self_intersecting"] is False
        assert metrics["has_duplicate_vertices"] is False
        assert metrics["bounds"] == (0.0, 0.0, 10.0, 10.0)

    def test_open_contour_has_no_area(self):
        metrics = measure_contour(Contour(((0, 0), (10, 0), (10, 10))))
        assert metrics["area"] is None

    def test_bowtie(self):
        metrics = measure_contour(Contour(((0, 0), (2, 2), (2, 0), (0, 2)), closed=True))
        assert metrics["self_intersecting"] is True

    def test_duplicate_vertices(self):
        metrics = measure_contour(Contour(((0, 0), (0, 0), (1, 0))))
        assert metrics["has_duplicate_vertices"] is True
