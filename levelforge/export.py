"""Slope segment export to a GeoJSON-style interchange file.

Each polyline is split into its consecutive vertex pairs; every pair becomes
one ``LineString`` feature with a global, sequential ``slopeId``. The
document layout is::

    {
    "type": "FeatureCollection",
    "name": "slopes-input",
    "crs": null,
    "features": [
    { "type": "Feature", "properties": { ... "slopeId": 0 ... },
      "geometry": { "type": "LineString", "coordinates": [ [ x1, y1 ], [ x2, y2 ] ] } }
    ]
    }

Coordinates are written as fixed-point numbers with a configurable number of
decimals (4 by default).
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .core.errors import ExportError, ValidationError
from .core.types import Contour, Point, SlopeSegment
from .core.validation_utils import is_finite_point, lift_to_3d, validate_vertices
from .text import format_number

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION_NAME = "slopes-input"

PolylineLike = Union[Contour, Sequence[Point]]


def build_slope_segments(polylines: Iterable[PolylineLike]) -> List[SlopeSegment]:
    """Split polylines into consecutive-vertex segments with sequential ids.

    Ids start at 0 and increase across all polylines in input order. Closed
    contours are segmented open: no segment joins the last vertex back to the
    first.

    Raises:
        ValidationError: If a polyline has fewer than 2 vertices, or a vertex
            or elevation is not a finite number
    """
    segments: List[SlopeSegment] = []
    next_id = 0

    for polyline in polylines:
        if isinstance(polyline, Contour):
            vertices, z = validate_vertices(polyline.vertices), polyline.elevation
        else:
            vertices, z = validate_vertices(polyline), None
        if z is not None and not math.isfinite(z):
            raise ValidationError(f"Polyline elevation is not finite: {z}", {"elevation": z})

        for start, end in zip(vertices[:-1], vertices[1:]):
            segments.append(SlopeSegment(next_id, lift_to_3d(start, z), lift_to_3d(end, z)))
            next_id += 1

    return segments


def _feature_text(segment: SlopeSegment, precision: int) -> str:
    properties = json.dumps({
        "elevationsTargetM": None,
        "padId": None,
        "slopeId": segment.slope_id,
        "slopeTarget": None,
    })
    if not (is_finite_point(segment.start) and is_finite_point(segment.end)):
        raise ValidationError(
            f"Slope segment {segment.slope_id} has non-finite coordinates",
            {"slope_id": segment.slope_id},
        )
    start = ", ".join(format_number(v, precision) for v in segment.start[:2])
    end = ", ".join(format_number(v, precision) for v in segment.end[:2])
    return (
        '{ "type": "Feature", "properties": ' + properties + ', '
        '"geometry": { "type": "LineString", "coordinates": '
        f'[ [ {start} ], [ {end} ] ] }} }}'
    )


def dumps_slope_segments(
    segments: Iterable[SlopeSegment],
    precision: int = 4,
    name: str = DEFAULT_COLLECTION_NAME,
) -> str:
    """Render segments as the interchange document, ordered by ``slope_id``.

    Raises:
        ValidationError: If a segment endpoint is not a finite point
    """
    ordered = sorted(segments, key=lambda s: s.slope_id)
    features = ",\n".join(_feature_text(s, precision) for s in ordered)

    lines = [
        "{",
        '"type": "FeatureCollection",',
        f'"name": {json.dumps(name)},',
        '"crs": null,',
        '"features": [',
    ]
    if features:
        lines.append(features)
    lines.extend(["]", "}"])
    return "\n".join(lines) + "\n"


def write_slope_segments(
    segments: Iterable[SlopeSegment],
    path: Union[str, Path],
    precision: int = 4,
    name: str = DEFAULT_COLLECTION_NAME,
) -> Path:
    """Write the interchange document to ``path``, replacing prior content.

    The document is rendered in memory first, so a destination that cannot
    be opened leaves nothing behind.

    Raises:
        ExportError: If the destination cannot be opened or written
    """
    path = Path(path)
    document = dumps_slope_segments(segments, precision=precision, name=name)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(document)
    except OSError as e:
        logger.error("Cannot write slope export %s: %s", path, e)
        raise ExportError(f"Cannot write slope export to {path}: {e}", path=str(path)) from e

    logger.info("Slope export written to %s", path)
    return path


def export_slopes(
    polylines: Iterable[PolylineLike],
    path: Union[str, Path],
    precision: int = 4,
    name: str = DEFAULT_COLLECTION_NAME,
) -> List[SlopeSegment]:
    """Segment ``polylines`` and write them to ``path``.

    Returns:
        The exported segments in id order
    """
    segments = build_slope_segments(polylines)
    write_slope_segments(segments, path, precision=precision, name=name)
    logger.debug("Exported %d slope segments", len(segments))
    return segments


__all__ = [
    'DEFAULT_COLLECTION_NAME',
    'build_slope_segments',
    'dumps_slope_segments',
    'write_slope_segments',
    'export_slopes',
]
