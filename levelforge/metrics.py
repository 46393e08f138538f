"""Shared measurement helpers for levelforge contours.

The offset resolver and the batch commands only need a handful of scalar
metrics. Centralizing the logic here keeps the rest of the codebase free
from ad-hoc area or length computations.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Union

from .core.geometry_utils import contour_points, to_shapely_line, to_shapely_polygon
from .core.types import Contour, Point
from .core.validation_utils import as_xy_array, has_duplicate_vertices
from .geometry import bounding_box, has_self_intersection


def contour_area(contour: Union[Contour, Sequence[Point]]) -> float:
    """Return the enclosed XY area of ``contour``.

    Open contours are measured as if closed. Fewer than three vertices have
    zero area.

    Examples:
        >>> contour_area([(0, 0), (10, 0), (10, 10), (0, 10)])
        100.0
    """
    return float(to_shapely_polygon(contour).area)


def contour_length(contour: Union[Contour, Sequence[Point]]) -> float:
    """Return the XY length of the contour's edges, closing edge included if closed."""
    if len(contour_points(contour)) < 2:
        return 0.0
    return float(to_shapely_line(contour).length)


def measure_contour(contour: Contour) -> Dict[str, Optional[float]]:
    """Return core metrics for ``contour``."""
    coords = as_xy_array(contour.vertices)
    bbox = bounding_box(contour.vertices)

    return {
        "vertex_count": len(contour),
        "is_closed": contour.closed,
        "area": contour_area(contour) if contour.closed else None,
        "length": contour_length(contour),
        "self_intersecting": has_self_intersection(contour),
        "has_duplicate_vertices": has_duplicate_vertices(coords),
        "bounds": bbox.as_tuple() if bbox is not None else None,
    }


__all__ = [
    "contour_area",
    "contour_length",
    "measure_contour",
]
