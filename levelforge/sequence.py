"""Ordering of points along the dominant axis of their bounding box."""

from typing import Any, Callable, List, Optional, Sequence

from .core.errors import ValidationError
from .core.types import Point
from .geometry import bounding_box


def dominant_axis(points: Sequence[Point]) -> Optional[int]:
    """Return 0 when the bounding box is wider than tall, 1 otherwise.

    Equal width and height count as tall. Empty input gives None.
    """
    bbox = bounding_box(points)
    if bbox is None:
        return None
    return 0 if bbox.width > bbox.height else 1


def sort_by_dominant_axis(
    items: Sequence[Any],
    key: Optional[Callable[[Any], Point]] = None,
) -> List[Any]:
    """Sort ``items`` ascending along the dominant axis of their points.

    The sort is stable, so items with equal keys keep their input order.

    Args:
        items: Points, or arbitrary items when ``key`` is given
        key: Maps an item to its point (default: the item itself)

    Returns:
        New list with the items in axis order

    Raises:
        ValidationError: If a point has fewer than 2 coordinates

    Examples:
        >>> sort_by_dominant_axis([(5, 0), (1, 1), (3, 0)])
        [(1, 1), (3, 0), (5, 0)]
        >>> sort_by_dominant_axis([('b', (0, 9)), ('a', (0, 1))], key=lambda i: i[1])
        [('a', (0, 1)), ('b', (0, 9))]
        >>> sort_by_dominant_axis([])
        []
    """
    items = list(items)
    points = [key(item) if key is not None else item for item in items]
    for index, point in enumerate(points):
        if point is None or len(point) < 2:
            raise ValidationError(
                f"Point {index} needs at least 2 coordinates: {point}",
                {"index": index},
            )

    axis = dominant_axis(points)
    if axis is None:
        return []
    order = sorted(range(len(items)), key=lambda i: points[i][axis])
    return [items[i] for i in order]


__all__ = [
    'dominant_axis',
    'sort_by_dominant_axis',
]
