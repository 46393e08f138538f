"""Core types and utilities for levelforge.

This module provides the value types, enums, exceptions and boundary
validation used throughout the library.
"""

from .types import (
    Point2,
    Point3,
    Point,
    INVALID_ELEVATION,
    OffsetSide,
    VertexRole,
    EntityKind,
    Contour,
    TextAnnotation,
    VertexAngle,
    BoundingBox,
    SlopeSegment,
)

from .errors import (
    LevelforgeError,
    ValidationError,
    OffsetError,
    ExportError,
    ConfigurationError,
    HostError,
)

__all__ = [
    # Value types
    'Point2',
    'Point3',
    'Point',
    'INVALID_ELEVATION',
    'Contour',
    'TextAnnotation',
    'VertexAngle',
    'BoundingBox',
    'SlopeSegment',

    # Enums
    'OffsetSide',
    'VertexRole',
    'EntityKind',

    # Exceptions
    'LevelforgeError',
    'ValidationError',
    'OffsetError',
    'ExportError',
    'ConfigurationError',
    'HostError',
]
