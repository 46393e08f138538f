"""Common validation utilities.

Boundary checks that turn raw caller coordinates into validated vertex
tuples, plus small helpers shared by the geometry modules.
"""

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .errors import ValidationError


def validate_vertices(
    coords: Iterable[Sequence[float]],
    min_vertices: int = 2,
) -> Tuple[Tuple[float, ...], ...]:
    """Validate raw coordinates and convert them to float tuples.

    Args:
        coords: Iterable of 2D or 3D coordinates
        min_vertices: Minimum required number of vertices (default: 2)

    Returns:
        Tuple of vertex tuples (each of length 2 or 3)

    Raises:
        ValidationError: If too few vertices are given, or a vertex does not
            have 2 or 3 coordinates or holds a NaN or infinite value

    Examples:
        >>> validate_vertices([(0, 0), (1, 2)])
        ((0.0, 0.0), (1.0, 2.0))

        >>> validate_vertices([(0, 0)])
        Traceback (most recent call last):
        ...
        ValidationError: Expected at least 2 vertices, got 1
    """
    vertices = []
    for index, coord in enumerate(coords):
        values = tuple(float(c) for c in coord)
        if len(values) not in (2, 3):
            raise ValidationError(
                f"Vertex {index} has {len(values)} coordinates, expected 2 or 3",
                {"index": index, "vertex": values},
            )
        if not np.all(np.isfinite(values)):
            raise ValidationError(
                f"Vertex {index} has non-finite coordinates: {values}",
                {"index": index, "vertex": values},
            )
        vertices.append(values)

    if len(vertices) < min_vertices:
        raise ValidationError(
            f"Expected at least {min_vertices} vertices, got {len(vertices)}",
            {"vertex_count": len(vertices)},
        )

    return tuple(vertices)


def as_xy_array(points: Iterable[Sequence[float]]) -> np.ndarray:
    """Return an Nx2 float array holding the X and Y of each point.

    Examples:
        >>> as_xy_array([(0, 0, 5), (1, 2, 5)]).tolist()
        [[0.0, 0.0], [1.0, 2.0]]
    """
    xy = [(float(p[0]), float(p[1])) for p in points]
    if not xy:
        return np.empty((0, 2), dtype=float)
    return np.asarray(xy, dtype=float)


def is_finite_point(point: Optional[Sequence[float]]) -> bool:
    """Check that ``point`` exists, has 2 or 3 coordinates and all are finite."""
    if point is None:
        return False
    try:
        values = np.asarray(point, dtype=float)
    except (TypeError, ValueError):
        return False
    if values.ndim != 1 or values.shape[0] not in (2, 3):
        return False
    return bool(np.all(np.isfinite(values)))


def lift_to_3d(point: Sequence[float], z: Optional[float] = None) -> Tuple[float, float, float]:
    """Return ``point`` as an XYZ tuple.

    A 2D point takes ``z`` (0.0 when not given). A 3D point keeps its own Z.
    """
    if len(point) > 2:
        return (float(point[0]), float(point[1]), float(point[2]))
    return (float(point[0]), float(point[1]), float(z) if z is not None else 0.0)


def is_ring_closed(
    coords: np.ndarray,
    tolerance: float = 1e-10
) -> bool:
    """Check if coordinate ring is closed (first == last).

    Args:
        coords: Coordinate array (Nx2 or Nx3)
        tolerance: Tolerance for coordinate comparison

    Returns:
        True if ring is closed (first point equals last point within tolerance)

    Examples:
        >>> coords = np.array([[0, 0], [1, 0], [1, 1], [0, 0]])
        >>> is_ring_closed(coords)
        True
    """
    if len(coords) < 2:
        return False

    return np.allclose(coords[0], coords[-1], atol=tolerance)


def strip_closing_vertex(
    coords: Sequence[Sequence[float]],
    tolerance: float = 1e-10
) -> Tuple[list, bool]:
    """Drop a repeated closing vertex.

    Host geometry sometimes stores closure as a repeated first point. Closure
    in levelforge is a flag, so the duplicate is removed.

    Returns:
        Tuple of (vertices without the duplicate, whether one was removed)
    """
    coords = list(coords)
    if len(coords) < 3:
        return coords, False

    array = np.asarray([tuple(c) for c in coords], dtype=float)
    if is_ring_closed(array, tolerance):
        return coords[:-1], True
    return coords, False


def has_duplicate_vertices(
    coords: np.ndarray,
    tolerance: float = 1e-10
) -> bool:
    """Check if coordinate array has consecutive duplicate vertices.

    Args:
        coords: Coordinate array (Nx2 or Nx3)
        tolerance: Tolerance for considering points duplicate

    Returns:
        True if consecutive duplicates found
    """
    if len(coords) < 2:
        return False

    distances = np.linalg.norm(np.diff(coords, axis=0), axis=1)
    return bool(np.any(distances < tolerance))


__all__ = [
    'validate_vertices',
    'as_xy_array',
    'is_finite_point',
    'lift_to_3d',
    'is_ring_closed',
    'strip_closing_vertex',
    'has_duplicate_vertices',
]
