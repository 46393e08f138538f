"""Planar geometry predicates and measurements.

Functions in this module accept either a :class:`~levelforge.core.types.Contour`
or a plain sequence of 2D/3D points, and only look at X and Y. They are
total over well-formed input: degenerate edges produce neutral results
instead of errors.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .core.geometry_utils import contour_points
from .core.types import BoundingBox, Contour, Point, VertexAngle, VertexRole
from .core.validation_utils import as_xy_array, lift_to_3d

#: Vector length product below which an angle is taken as 0 degrees.
ZERO_LENGTH_TOLERANCE = 1e-12

PolygonLike = Union[Contour, Sequence[Point]]


def point_in_polygon(polygon: PolygonLike, point: Sequence[float]) -> bool:
    """Even-odd ray casting test.

    A horizontal ray runs from ``point`` toward +X. An edge (consecutive
    vertices, wrapping last to first) crosses it when one endpoint lies
    strictly above ``point`` and the other at or below, and the crossing is at
    or to the right of ``point``. Zero-length edges never cross.

    Args:
        polygon: Contour or vertex sequence
        point: Query point (2D or 3D; Z is ignored)

    Returns:
        True if the crossing count is odd

    Examples:
        >>> square = [(0, 0), (4, 0), (4, 4), (0, 4)]
        >>> point_in_polygon(square, (2, 2))
        True
        >>> point_in_polygon(square, (10, 10))
        False
    """
    coords = as_xy_array(contour_points(polygon))
    n = len(coords)
    if n == 0:
        return False

    px, py = float(point[0]), float(point[1])
    inside = False
    for i in range(n):
        x1, y1 = coords[i]
        x2, y2 = coords[(i + 1) % n]
        if (y1 > py) == (y2 > py):
            continue
        if y2 == y1:
            continue
        x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
        if x_cross >= px:
            inside = not inside

    return inside


def _segments_cross(a1: np.ndarray, a2: np.ndarray, b1: np.ndarray, b2: np.ndarray) -> bool:
    """Interior crossing test for two segments using the parametric form."""
    r = a2 - a1
    s = b2 - b1
    denom = r[0] * s[1] - r[1] * s[0]
    if denom == 0:
        return False

    qp = b1 - a1
    t = (qp[0] * s[1] - qp[1] * s[0]) / denom
    u = (qp[0] * r[1] - qp[1] * r[0]) / denom
    return 0.0 < t < 1.0 and 0.0 < u < 1.0


def has_self_intersection(polygon: PolygonLike) -> bool:
    """Check whether any two non-adjacent edges cross.

    Edges are the consecutive vertex pairs plus the wrap-around edge from the
    last vertex to the first. Edges sharing a vertex (including the first and
    the wrap-around edge) are adjacent and never compared. Only crossings
    strictly inside both edges count, and parallel edges never intersect.

    Args:
        polygon: Contour or vertex sequence

    Returns:
        True on the first interior crossing found

    Examples:
        >>> has_self_intersection([(0, 0), (1, 0), (1, 1), (0, 1)])
        False
        >>> has_self_intersection([(0, 0), (1, 1), (1, 0), (0, 1)])
        True
    """
    coords = as_xy_array(contour_points(polygon))
    n = len(coords)
    if n < 4:
        return False

    for i in range(n):
        a1, a2 = coords[i], coords[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            b1, b2 = coords[j], coords[(j + 1) % n]
            if _segments_cross(a1, a2, b1, b2):
                return True

    return False


def close_contour(contour: Contour) -> Contour:
    """Mark a contour closed without repeating its first vertex.

    Already closed contours are returned unchanged.
    """
    return contour.as_closed()


def bounding_box(points: Iterable[Sequence[float]]) -> Optional[BoundingBox]:
    """Compute the XY bounding box of ``points``.

    Points with fewer than two coordinates are ignored.

    Returns:
        BoundingBox, or None if no usable point remains

    Examples:
        >>> bounding_box([(1, 2)]).as_tuple()
        (1.0, 2.0, 1.0, 2.0)
        >>> bounding_box([]) is None
        True
    """
    usable = [p for p in points if p is not None and len(p) >= 2]
    if not usable:
        return None

    coords = as_xy_array(usable)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


def interior_angle_degrees(
    prev: Sequence[float],
    pivot: Sequence[float],
    nxt: Sequence[float],
) -> float:
    """Angle at ``pivot`` between the vectors toward ``prev`` and ``nxt``.

    Computed in the XY plane from the cosine as
    ``atan2(sqrt(1 - cos**2), cos)``, which stays accurate near 0 and 180
    degrees. When the product of the vector lengths is below
    ``ZERO_LENGTH_TOLERANCE`` the cosine is taken as 1.0 (angle 0).

    Examples:
        >>> interior_angle_degrees((0, 0), (1, 0), (2, 0))
        180.0
        >>> interior_angle_degrees((1, 0), (0, 0), (0, 1))
        90.0
    """
    v1 = np.array([prev[0] - pivot[0], prev[1] - pivot[1]], dtype=float)
    v2 = np.array([nxt[0] - pivot[0], nxt[1] - pivot[1]], dtype=float)

    denom = float(np.linalg.norm(v1) * np.linalg.norm(v2))
    if denom < ZERO_LENGTH_TOLERANCE:
        cos_angle = 1.0
    else:
        cos_angle = float(np.dot(v1, v2)) / denom
        cos_angle = max(-1.0, min(1.0, cos_angle))

    return math.degrees(math.atan2(math.sqrt(1.0 - cos_angle * cos_angle), cos_angle))


def vertices_with_angles(polyline: PolygonLike) -> List[VertexAngle]:
    """Tag each polyline vertex with its role and interior angle.

    The first vertex is START, the last END, and every vertex in between
    carries the angle formed with its neighbours. 2D vertices are lifted to
    3D with the contour elevation (or 0.0).
    """
    points = contour_points(polyline)
    z = polyline.elevation if isinstance(polyline, Contour) else None
    n = len(points)
    if n == 0:
        return []

    records = [VertexAngle(lift_to_3d(points[0], z), VertexRole.START)]
    for i in range(1, n - 1):
        angle = interior_angle_degrees(points[i - 1], points[i], points[i + 1])
        records.append(VertexAngle(lift_to_3d(points[i], z), VertexRole.INTERIOR, angle))
    if n > 1:
        records.append(VertexAngle(lift_to_3d(points[-1], z), VertexRole.END))

    return records


__all__ = [
    'ZERO_LENGTH_TOLERANCE',
    'point_in_polygon',
    'has_self_intersection',
    'close_contour',
    'bounding_box',
    'interior_angle_degrees',
    'vertices_with_angles',
]
