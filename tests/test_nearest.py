"""Tests for nearest-annotation lookup."""

import math

from levelforge import INVALID_ELEVATION, TextAnnotation
from levelforge.nearest import nearest_annotation, nearest_elevation


class TestNearestAnnotation:
    """Tests for nearest_annotation()."""

    def test_picks_closest(self):
        texts = [
            TextAnnotation("a", (0, 0)),
            TextAnnotation("b", (10, 10)),
            TextAnnotation("c", (3, 3)),
        ]
        assert nearest_annotation((4, 4), texts) == 2

    def test_tie_goes_to_first(self):
        texts = [TextAnnotation("left", (-1, 0)), TextAnnotation("right", (1, 0))]
        assert nearest_annotation((0, 0), texts) == 0

    def test_distance_is_3d(self):
        """Z separates anchors that coincide in plan."""
        texts = [TextAnnotation("high", (0, 0, 50)), TextAnnotation("low", (1, 1, 0))]
        assert nearest_annotation((0, 0, 0), texts) == 1

    def test_2d_query_against_3d_anchor(self):
        texts = [TextAnnotation("a", (0, 0, 2)), TextAnnotation("b", (0, 0, 1))]
        assert nearest_annotation((0, 0), texts) == 1

    def test_invalid_anchors_skipped(self):
        texts = [
            TextAnnotation("none", None),
            TextAnnotation("nan", (math.nan, 0)),
            TextAnnotation("far", (100, 100)),
        ]
        assert nearest_annotation((0, 0), texts) == 2

    def test_no_usable_anchor(self):
        assert nearest_annotation((0, 0), [TextAnnotation("x", None)]) is None
        assert nearest_annotation((0, 0), []) is None


class TestNearestElevation:
    """Tests for nearest_elevation()."""

    def test_parses_nearest_text(self):
        texts = [TextAnnotation("FG=10.5", (0, 0)), TextAnnotation("FG=12,25", (5, 5))]
        assert nearest_elevation((4, 4), texts) == 12.25

    def test_nearest_without_number_is_invalid(self):
        """The nearest text decides even if a farther one holds a number."""
        texts = [TextAnnotation("FG", (0, 0)), TextAnnotation("FG=3", (50, 0))]
        assert nearest_elevation((1, 0), texts) == INVALID_ELEVATION

    def test_no_candidates(self):
        assert nearest_elevation((0, 0), []) == INVALID_ELEVATION

    def test_only_unanchored_candidates(self):
        texts = [TextAnnotation("FG=1", None), TextAnnotation("FG=2", None)]
        assert nearest_elevation((0, 0), texts) == INVALID_ELEVATION
