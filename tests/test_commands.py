"""Tests for the batch commands over a drawing."""

import json

import pytest

from levelforge import (
    INVALID_ELEVATION,
    InMemoryDrawing,
    OffsetError,
    ToolkitConfig,
    ValidationError,
    VertexRole,
)
from levelforge.commands import (
    assign_contour_elevations,
    assign_point_elevations,
    close_contours,
    export_slope_polylines,
    flag_self_intersections,
    format_angle_labels,
    measure_vertex_angles,
    offset_contours,
    order_points,
)
from levelforge.metrics import contour_area
from levelforge.sequence import sort_by_dominant_axis

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
BOWTIE = [(0, 0), (2, 2), (2, 0), (0, 2)]


class TestAssignPointElevations:
    """Tests for assign_point_elevations()."""

    def test_processed_and_failed(self):
        drawing = InMemoryDrawing()
        p1 = drawing.add_point((0, 0))
        p2 = drawing.add_point((100, 0))
        texts = [
            drawing.add_text("FG=10,5", (1, 0)),
            drawing.add_text("no value", (101, 0)),
        ]

        report = assign_point_elevations(drawing, [p1, p2], texts)

        assert report.values == {p1: 10.5}
        assert report.failed == [p2]
        assert report.processed == [p1]
        assert drawing.layer_of(p1) == "ELEV_OK"
        assert drawing.layer_of(p2) == "ELEV_FAILED"

    def test_custom_layers(self):
        drawing = InMemoryDrawing()
        point = drawing.add_point((0, 0))
        text = drawing.add_text("5", (0, 1))
        config = ToolkitConfig(processed_layer="DONE")

        assign_point_elevations(drawing, [point], [text], config)
        assert drawing.layer_of(point) == "DONE"

    def test_no_texts(self):
        drawing = InMemoryDrawing()
        point = drawing.add_point((0, 0))
        report = assign_point_elevations(drawing, [point], [])
        assert report.failed == [point]


class TestAssignContourElevations:
    """Tests for assign_contour_elevations()."""

    def test_text_inside_contour(self):
        drawing = InMemoryDrawing()
        contour = drawing.add_polyline(SQUARE, closed=True)
        texts = [
            drawing.add_text("FG=7.25", (9, 9)),
            drawing.add_text("FG=99", (5.5, 5.5)),
            drawing.add_text("FG=1", (50, 50)),
        ]

        report = assign_contour_elevations(drawing, [contour], texts)
        assert report.values == {contour: 99.0}

    def test_outside_texts_are_ignored(self):
        drawing = InMemoryDrawing()
        contour = drawing.add_polyline(SQUARE, closed=True)
        text = drawing.add_text("FG=1", (10.5, 5))

        report = assign_contour_elevations(drawing, [contour], [text])
        assert report.failed == [contour]
        assert drawing.layer_of(contour) == "ELEV_FAILED"

    def test_open_contour_fails(self):
        drawing = InMemoryDrawing()
        contour = drawing.add_polyline(SQUARE)
        text = drawing.add_text("FG=1", (5, 5))

        report = assign_contour_elevations(drawing, [contour], [text])
        assert report.failed == [contour]


class TestContourCommands:
    """Tests for close, self-intersection and offset commands."""

    def test_close_contours(self):
        drawing = InMemoryDrawing()
        open_handle = drawing.add_polyline(SQUARE)
        closed_handle = drawing.add_polyline(SQUARE, closed=True)

        closed = close_contours(drawing, [open_handle, closed_handle])
        assert list(closed) == [open_handle]
        assert closed[open_handle].closed
        assert not drawing.read(open_handle).contour.closed

    def test_flag_self_intersections(self):
        drawing = InMemoryDrawing()
        good = drawing.add_polyline(SQUARE, closed=True)
        bad = drawing.add_polyline(BOWTIE, closed=True)

        flagged = flag_self_intersections(drawing, [good, bad])
        assert flagged == [bad]
        assert drawing.layer_of(bad) == "SELF_INTERSECT"
        assert drawing.layer_of(good) == "0"

    def test_offset_contours(self):
        drawing = InMemoryDrawing()
        square = drawing.add_polyline(SQUARE, closed=True, elevation=3.0)
        bowtie = drawing.add_polyline(BOWTIE, closed=True)
        open_line = drawing.add_polyline(SQUARE)

        with pytest.warns(UserWarning, match="2 contour"):
            report = offset_contours(drawing, [square, bowtie, open_line], 1.0)

        assert list(report.results) == [square]
        assert contour_area(report.results[square].chosen) == pytest.approx(144.0)
        assert report.results[square].chosen.elevation == 3.0
        assert report.unprocessable == {bowtie: 'self_intersecting', open_line: 'open'}

    def test_offset_contours_raise_on_failure(self):
        drawing = InMemoryDrawing()
        bowtie = drawing.add_polyline(BOWTIE, closed=True)
        with pytest.raises(OffsetError):
            offset_contours(drawing, [bowtie], -0.5, raise_on_failure=True)

    def test_offset_contours_zero_distance(self):
        with pytest.raises(ValidationError):
            offset_contours(InMemoryDrawing(), [], 0.0)


class TestAngleCommands:
    """Tests for measure_vertex_angles() and format_angle_labels()."""

    def test_measure_and_label(self):
        drawing = InMemoryDrawing()
        handle = drawing.add_polyline([(0, 0), (10, 0), (10, 10)])

        records = measure_vertex_angles(drawing, [handle])[handle]
        assert [r.role for r in records] == [VertexRole.START, VertexRole.INTERIOR, VertexRole.END]
        assert format_angle_labels(records) == ["start", "90.000000", "end"]
        assert format_angle_labels(records, ToolkitConfig(angle_precision=1)) == ["start", "90.0", "end"]


class TestOrderPoints:
    """Tests for order_points()."""

    def test_orders_along_x(self):
        drawing = InMemoryDrawing()
        a = drawing.add_point((30, 1))
        b = drawing.add_point((10, 0))
        c = drawing.add_point((20, 2))
        assert order_points(drawing, [a, b, c]) == [b, c, a]

    def test_duplicates_keep_input_order(self):
        drawing = InMemoryDrawing()
        a = drawing.add_point((0, 5))
        b = drawing.add_point((0, 1))
        c = drawing.add_point((0, 5))
        assert order_points(drawing, [a, b, c]) == [b, a, c]

    def test_empty(self):
        assert order_points(InMemoryDrawing(), []) == []

    def test_matches_plain_point_sort(self):
        locations = [(0, 9), (1, 2), (0, 2), (2, 5)]
        drawing = InMemoryDrawing()
        handles = [drawing.add_point(p) for p in locations]
        by_handle = dict(zip(handles, locations))

        ordered = [by_handle[h] for h in order_points(drawing, handles)]
        assert ordered == sort_by_dominant_axis(locations)


class TestExportSlopePolylines:
    """Tests for export_slope_polylines()."""

    def test_export(self, tmp_path):
        drawing = InMemoryDrawing()
        handles = [
            drawing.add_polyline([(0, 0), (1, 0)]),
            drawing.add_polyline([(0, 0), (1, 0), (1, 1)], closed=True),
        ]
        path = tmp_path / "slopes.geojson"
        config = ToolkitConfig(precision=2, collection_name="site-slopes")

        segments = export_slope_polylines(drawing, handles, path, config)

        assert [s.slope_id for s in segments] == [0, 1, 2]
        text = path.read_text(encoding="utf-8")
        assert "[ [ 1.00, 0.00 ], [ 1.00, 1.00 ] ]" in text
        assert json.loads(text)["name"] == "site-slopes"


def test_sentinel_value():
    assert INVALID_ELEVATION == -100.0
