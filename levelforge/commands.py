"""Batch commands over a drawing.

Each command reads entities through a :class:`~levelforge.host.DrawingSource`,
runs the core functions on them and returns new values. Commands never
modify geometry in the drawing; the only write-back is layer tagging for
classification (processed/failed elevations, self-intersecting contours).
Applying returned geometry back to the drawing is left to the caller.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .config import ToolkitConfig
from .core.errors import OffsetError
from .core.geometry_utils import to_shapely_polygon
from .core.types import (
    INVALID_ELEVATION,
    Contour,
    EntityKind,
    OffsetSide,
    SlopeSegment,
    TextAnnotation,
    VertexAngle,
    VertexRole,
)
from .core.validation_utils import is_finite_point
from .export import build_slope_segments, write_slope_segments
from .geometry import close_contour, has_self_intersection, point_in_polygon, vertices_with_angles
from .host import DrawingSource, read_kind
from .nearest import nearest_elevation
from .offset import OffsetResult, offset_contour
from .sequence import sort_by_dominant_axis
from .text import format_number, is_valid_elevation

logger = logging.getLogger(__name__)


@dataclass
class ElevationReport:
    """Elevations found per entity handle, and the handles that failed."""

    values: Dict[str, float] = field(default_factory=dict)
    failed: List[str] = field(default_factory=list)

    @property
    def processed(self) -> List[str]:
        return list(self.values)


@dataclass
class OffsetReport:
    """Offset results per handle, and the reason each unprocessable one failed."""

    results: Dict[str, OffsetResult] = field(default_factory=dict)
    unprocessable: Dict[str, str] = field(default_factory=dict)


def _annotations(source: DrawingSource, text_handles: Iterable[str]) -> List[TextAnnotation]:
    return [read_kind(source, h, EntityKind.TEXT).annotation for h in text_handles]


def _contour(source: DrawingSource, handle: str) -> Contour:
    return read_kind(source, handle, EntityKind.POLYLINE).contour


def _classify(
    source: DrawingSource,
    report: ElevationReport,
    handle: str,
    elevation: float,
    config: ToolkitConfig,
) -> None:
    if is_valid_elevation(elevation):
        report.values[handle] = elevation
        source.assign_layer(handle, config.processed_layer)
    else:
        report.failed.append(handle)
        source.assign_layer(handle, config.failed_layer)


def assign_point_elevations(
    source: DrawingSource,
    point_handles: Sequence[str],
    text_handles: Sequence[str],
    config: Optional[ToolkitConfig] = None,
) -> ElevationReport:
    """Give each point the elevation written in its nearest text.

    Points whose nearest text holds no number (or that have no text with an
    anchor at all) are tagged with the failed layer, the rest with the
    processed layer.
    """
    config = config or ToolkitConfig()
    texts = _annotations(source, text_handles)
    report = ElevationReport()

    for handle in point_handles:
        location = read_kind(source, handle, EntityKind.POINT).location
        _classify(source, report, handle, nearest_elevation(location, texts), config)

    logger.info(
        "Point elevations: %d processed, %d failed",
        len(report.values), len(report.failed),
    )
    return report


def assign_contour_elevations(
    source: DrawingSource,
    contour_handles: Sequence[str],
    text_handles: Sequence[str],
    config: Optional[ToolkitConfig] = None,
) -> ElevationReport:
    """Give each closed contour the elevation of a text placed inside it.

    Only texts anchored inside the contour are considered; among those the
    one nearest the contour centroid is used. Open contours fail.
    """
    config = config or ToolkitConfig()
    texts = _annotations(source, text_handles)
    report = ElevationReport()

    for handle in contour_handles:
        contour = _contour(source, handle)
        if not contour.closed:
            logger.warning("Contour %s is open, no elevation assigned", handle)
            _classify(source, report, handle, INVALID_ELEVATION, config)
            continue

        inside = [
            t for t in texts
            if is_finite_point(t.anchor) and point_in_polygon(contour, t.anchor)
        ]
        polygon = to_shapely_polygon(contour)
        if polygon.is_empty:
            centroid = contour.vertices[0]
        else:
            centroid = (polygon.centroid.x, polygon.centroid.y)
        _classify(source, report, handle, nearest_elevation(centroid, inside), config)

    logger.info(
        "Contour elevations: %d processed, %d failed",
        len(report.values), len(report.failed),
    )
    return report


def close_contours(source: DrawingSource, handles: Sequence[str]) -> Dict[str, Contour]:
    """Return closed copies of the open contours among ``handles``."""
    closed: Dict[str, Contour] = {}
    for handle in handles:
        contour = _contour(source, handle)
        if not contour.closed:
            closed[handle] = close_contour(contour)

    logger.info("Closed %d of %d contours", len(closed), len(handles))
    return closed


def flag_self_intersections(
    source: DrawingSource,
    handles: Sequence[str],
    config: Optional[ToolkitConfig] = None,
) -> List[str]:
    """Tag self-intersecting contours with the self-intersection layer.

    Returns:
        Handles of the tagged contours, in input order
    """
    config = config or ToolkitConfig()
    flagged = []
    for handle in handles:
        if has_self_intersection(_contour(source, handle)):
            source.assign_layer(handle, config.self_intersection_layer)
            flagged.append(handle)

    if flagged:
        logger.warning("%d self-intersecting contour(s) found", len(flagged))
    return flagged


def offset_contours(
    source: DrawingSource,
    handles: Sequence[str],
    distance: float,
    raise_on_failure: bool = False,
) -> OffsetReport:
    """Offset each contour to the side given by the sign of ``distance``.

    Contours that are open, self-intersecting or whose offset collapses are
    reported as unprocessable. A ``UserWarning`` summarises them unless
    ``raise_on_failure`` is set, in which case the first failure is raised.

    Raises:
        ValidationError: If ``distance`` is zero
        OffsetError: On the first failure when ``raise_on_failure`` is True
    """
    OffsetSide.from_distance(distance)
    report = OffsetReport()

    for handle in handles:
        contour = _contour(source, handle)
        try:
            report.results[handle] = offset_contour(contour, distance)
        except OffsetError as e:
            if raise_on_failure:
                raise
            logger.warning("Contour %s not offset: %s", handle, e)
            report.unprocessable[handle] = e.reason

    if report.unprocessable:
        warnings.warn(
            f"{len(report.unprocessable)} contour(s) could not be offset: "
            + ", ".join(report.unprocessable),
            UserWarning,
            stacklevel=2,
        )

    logger.info(
        "Offset by %s: %d done, %d unprocessable",
        distance, len(report.results), len(report.unprocessable),
    )
    return report


def measure_vertex_angles(
    source: DrawingSource,
    handles: Sequence[str],
) -> Dict[str, List[VertexAngle]]:
    """List the vertices of each polyline with their interior angles."""
    return {h: vertices_with_angles(_contour(source, h)) for h in handles}


def format_angle_labels(
    records: Sequence[VertexAngle],
    config: Optional[ToolkitConfig] = None,
) -> List[str]:
    """Label text for each vertex record: ``start``, ``end`` or the angle.

    Angles use ``config.angle_precision`` decimals.

    Examples:
        >>> format_angle_labels([VertexAngle((0, 0, 0), VertexRole.START),
        ...                      VertexAngle((1, 0, 0), VertexRole.INTERIOR, 90.0),
        ...                      VertexAngle((1, 1, 0), VertexRole.END)], ToolkitConfig(angle_precision=2))
        ['start', '90.00', 'end']
    """
    precision = (config or ToolkitConfig()).angle_precision
    labels = []
    for record in records:
        if record.role is VertexRole.INTERIOR:
            labels.append(format_number(record.angle, precision))
        else:
            labels.append(record.role.value)
    return labels


def order_points(source: DrawingSource, handles: Sequence[str]) -> List[str]:
    """Order point handles along the dominant axis of their locations."""
    pairs = [(h, read_kind(source, h, EntityKind.POINT).location) for h in handles]
    ordered = sort_by_dominant_axis(pairs, key=lambda pair: pair[1])
    return [handle for handle, _ in ordered]


def export_slope_polylines(
    source: DrawingSource,
    handles: Sequence[str],
    path: Union[str, Path],
    config: Optional[ToolkitConfig] = None,
) -> List[SlopeSegment]:
    """Export the segments of the given polylines to ``path``.

    Raises:
        ExportError: If ``path`` cannot be written
    """
    config = config or ToolkitConfig()
    segments = build_slope_segments(_contour(source, h) for h in handles)
    write_slope_segments(
        segments,
        path,
        precision=config.precision,
        name=config.collection_name,
    )
    return segments


__all__ = [
    'ElevationReport',
    'OffsetReport',
    'assign_point_elevations',
    'assign_contour_elevations',
    'close_contours',
    'flag_self_intersections',
    'offset_contours',
    'measure_vertex_angles',
    'format_angle_labels',
    'order_points',
    'export_slope_polylines',
]
