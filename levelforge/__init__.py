"""Levelforge - CAD drawing geometry and elevation text utilities.

This library extracts elevation values from annotation text, classifies and
repairs planar contours, resolves offset directions, computes vertex angles
and exports slope segments to a GeoJSON-style interchange file.
"""

import logging

# Text parsing
from .text import (
    parse_elevation,
    is_valid_elevation,
    format_number,
)

# Planar geometry
from .geometry import (
    point_in_polygon,
    has_self_intersection,
    close_contour,
    bounding_box,
    interior_angle_degrees,
    vertices_with_angles,
)

# Measurements
from .metrics import contour_area, contour_length, measure_contour

# Offsets
from .offset import OffsetResult, resolve_offset, offset_candidates, offset_contour

# Text association and ordering
from .nearest import nearest_annotation, nearest_elevation
from .sequence import dominant_axis, sort_by_dominant_axis

# Export
from .export import (
    build_slope_segments,
    dumps_slope_segments,
    write_slope_segments,
    export_slopes,
)

# Configuration and drawing access
from .config import ToolkitConfig
from .host import DrawingSource, Entity, InMemoryDrawing

# Core types
from .core import (
    INVALID_ELEVATION,
    Contour,
    TextAnnotation,
    VertexAngle,
    BoundingBox,
    SlopeSegment,
    OffsetSide,
    VertexRole,
    EntityKind,
)

# Core exceptions
from .core import (
    LevelforgeError,
    ValidationError,
    OffsetError,
    ExportError,
    ConfigurationError,
    HostError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [

    # Text parsing
    'parse_elevation',
    'is_valid_elevation',
    'format_number',

    # Planar geometry
    'point_in_polygon',
    'has_self_intersection',
    'close_contour',
    'bounding_box',
    'interior_angle_degrees',
    'vertices_with_angles',

    # Measurements
    'contour_area',
    'contour_length',
    'measure_contour',

    # Offsets
    'OffsetResult',
    'resolve_offset',
    'offset_candidates',
    'offset_contour',

    # Text association and ordering
    'nearest_annotation',
    'nearest_elevation',
    'dominant_axis',
    'sort_by_dominant_axis',

    # Export
    'build_slope_segments',
    'dumps_slope_segments',
    'write_slope_segments',
    'export_slopes',

    # Configuration and drawing access
    'ToolkitConfig',
    'DrawingSource',
    'Entity',
    'InMemoryDrawing',

    # Core types
    'INVALID_ELEVATION',
    'Contour',
    'TextAnnotation',
    'VertexAngle',
    'BoundingBox',
    'SlopeSegment',
    'OffsetSide',
    'VertexRole',
    'EntityKind',

    # Core exceptions
    'LevelforgeError',
    'ValidationError',
    'OffsetError',
    'ExportError',
    'ConfigurationError',
    'HostError',
]
