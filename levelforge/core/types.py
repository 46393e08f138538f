"""Type definitions for levelforge operations.

This module defines the value types passed between the toolkit functions
and the enums used as parameters. All values are immutable and created per
call from caller-supplied geometry and text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

from .errors import ValidationError
from .validation_utils import validate_vertices

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]
Point = Union[Point2, Point3]

#: Sentinel elevation meaning "no numeric token recoverable".
INVALID_ELEVATION = -100.0


class OffsetSide(Enum):
    """Side of a closed contour on which an offset should lie.

    Attributes:
        INSIDE: Offset toward the interior (negative distance)
        OUTSIDE: Offset away from the interior (positive distance)

    Examples:
        >>> OffsetSide.from_distance(-0.5)
        <OffsetSide.INSIDE: 'inside'>
    """
    INSIDE = 'inside'
    OUTSIDE = 'outside'

    @classmethod
    def from_distance(cls, distance: float) -> "OffsetSide":
        if distance > 0:
            return cls.OUTSIDE
        if distance < 0:
            return cls.INSIDE
        raise ValidationError("Offset distance must be non-zero", {"distance": distance})


class VertexRole(Enum):
    """Role of a polyline vertex in an angle listing.

    Attributes:
        START: First vertex, carries no angle
        END: Last vertex, carries no angle
        INTERIOR: Pivot vertex with a computed interior angle
    """
    START = 'start'
    END = 'end'
    INTERIOR = 'interior'


class EntityKind(Enum):
    """Kind of drawing entity exposed by a host adapter."""
    POLYLINE = 'polyline'
    TEXT = 'text'
    POINT = 'point'


@dataclass(frozen=True)
class Contour:
    """Ordered vertex sequence with an explicit closed flag.

    Closure is logical: a closed contour does not repeat its first vertex.
    ``elevation`` is the uniform elevation of 2D entities, if known.
    """

    vertices: Tuple[Point, ...]
    closed: bool = False
    elevation: Optional[float] = None

    @classmethod
    def from_coords(
        cls,
        coords: Iterable[Sequence[float]],
        closed: bool = False,
        elevation: Optional[float] = None,
    ) -> "Contour":
        """Build a contour from raw coordinates, rejecting malformed input.

        Raises:
            ValidationError: If fewer than 2 vertices are given, or a vertex
                has fewer than 2 coordinates
        """
        vertices = validate_vertices(coords, min_vertices=2)
        return cls(vertices=vertices, closed=closed, elevation=elevation)

    def __len__(self) -> int:
        return len(self.vertices)

    def as_closed(self) -> "Contour":
        if self.closed:
            return self
        return replace(self, closed=True)


@dataclass(frozen=True)
class TextAnnotation:
    """Annotation text with an optional anchor point."""

    text: str
    anchor: Optional[Point] = None


@dataclass(frozen=True)
class VertexAngle:
    """A polyline vertex tagged with its role.

    ``angle`` is the interior angle in degrees and is only set when ``role``
    is :attr:`VertexRole.INTERIOR`.
    """

    vertex: Point3
    role: VertexRole
    angle: Optional[float] = None

    @property
    def is_endpoint(self) -> bool:
        return self.role is not VertexRole.INTERIOR


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned XY bounds."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class SlopeSegment:
    """One consecutive vertex pair of an exported polyline."""

    slope_id: int
    start: Point3
    end: Point3


__all__ = [
    'Point2',
    'Point3',
    'Point',
    'INVALID_ELEVATION',
    'OffsetSide',
    'VertexRole',
    'EntityKind',
    'Contour',
    'TextAnnotation',
    'VertexAngle',
    'BoundingBox',
    'SlopeSegment',
]
