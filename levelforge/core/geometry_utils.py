"""Conversions between levelforge contours and Shapely geometries."""

from typing import Optional, Sequence, Union

from shapely.geometry import LineString, MultiPolygon, Polygon, GeometryCollection
from shapely.geometry.base import BaseGeometry

from .types import Contour, Point


def contour_points(polygon: Union[Contour, Sequence[Point]]) -> Sequence[Point]:
    """Return the vertex sequence of a contour or plain point sequence."""
    if isinstance(polygon, Contour):
        return polygon.vertices
    return polygon


def to_shapely_polygon(contour: Union[Contour, Sequence[Point]]) -> Polygon:
    """Build a Shapely polygon from the XY of a contour's vertices.

    Shapely closes the ring itself, so open contours are treated as if closed.
    Fewer than 3 vertices give an empty polygon.

    Examples:
        >>> to_shapely_polygon(Contour(((0, 0), (2, 0), (2, 2)), closed=True)).area
        2.0
    """
    points = contour_points(contour)
    if len(points) < 3:
        return Polygon()
    return Polygon([(p[0], p[1]) for p in points])


def to_shapely_line(contour: Union[Contour, Sequence[Point]]) -> LineString:
    """Build a Shapely line through a contour's vertices, closing it if flagged."""
    points = [(p[0], p[1]) for p in contour_points(contour)]
    if isinstance(contour, Contour) and contour.closed and len(points) > 2:
        points.append(points[0])
    return LineString(points)


def uniform_elevation(contour: Contour) -> Optional[float]:
    """Elevation shared by every vertex of ``contour``.

    The explicit ``elevation`` wins. Otherwise, when all vertices are 3D and
    carry the same Z, that Z is returned. Mixed or missing Z gives None.

    Examples:
        >>> uniform_elevation(Contour(((0, 0, 5), (1, 0, 5))))
        5.0
        >>> uniform_elevation(Contour(((0, 0, 5), (1, 0, 6)))) is None
        True
    """
    if contour.elevation is not None:
        return contour.elevation
    if not contour.vertices or any(len(v) < 3 for v in contour.vertices):
        return None
    heights = {float(v[2]) for v in contour.vertices}
    if len(heights) != 1:
        return None
    return heights.pop()


def contour_from_shapely(
    geometry: BaseGeometry,
    elevation: Optional[float] = None,
) -> Optional[Contour]:
    """Convert a single Shapely polygon back to a closed contour.

    The exterior ring's repeated closing vertex is dropped. Returns None for
    empty geometries and for results that split into several pieces, which
    callers treat as a failed offset.

    Examples:
        >>> contour_from_shapely(Polygon([(0, 0), (1, 0), (1, 1)])).vertices
        ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    """
    if geometry is None or geometry.is_empty:
        return None
    if isinstance(geometry, (MultiPolygon, GeometryCollection)):
        parts = [g for g in geometry.geoms if not g.is_empty]
        if len(parts) != 1:
            return None
        geometry = parts[0]
    if not isinstance(geometry, Polygon):
        return None

    coords = list(geometry.exterior.coords)[:-1]
    vertices = tuple((float(x), float(y)) for x, y, *_ in coords)
    return Contour(vertices=vertices, closed=True, elevation=elevation)


__all__ = [
    'contour_points',
    'to_shapely_polygon',
    'to_shapely_line',
    'uniform_elevation',
    'contour_from_shapely',
]
