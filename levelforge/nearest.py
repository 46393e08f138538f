"""Nearest-annotation lookup for point elevations."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .core.types import INVALID_ELEVATION, TextAnnotation
from .core.validation_utils import is_finite_point, lift_to_3d
from .text import parse_elevation


def nearest_annotation(
    query: Sequence[float],
    candidates: Sequence[TextAnnotation],
) -> Optional[int]:
    """Index of the annotation whose anchor is closest to ``query``.

    Distances are 3D Euclidean; 2D points are lifted with Z = 0. Candidates
    without a usable anchor are skipped. On equal distances the earliest
    candidate wins.

    Returns:
        Index into ``candidates``, or None if no anchor is usable
    """
    indices = [i for i, c in enumerate(candidates) if is_finite_point(c.anchor)]
    if not indices:
        return None

    anchors = np.array([lift_to_3d(candidates[i].anchor) for i in indices], dtype=float)
    target = np.array(lift_to_3d(query), dtype=float)
    distances = np.linalg.norm(anchors - target, axis=1)

    # argmin returns the first occurrence of the minimum
    return indices[int(np.argmin(distances))]


def nearest_elevation(
    query: Sequence[float],
    candidates: Sequence[TextAnnotation],
) -> float:
    """Parse the elevation of the annotation nearest to ``query``.

    Returns:
        Parsed elevation, or ``INVALID_ELEVATION`` if no candidate has a
        usable anchor or the nearest text holds no number

    Examples:
        >>> texts = [TextAnnotation("FG=10.5", (0, 0)), TextAnnotation("FG=12", (5, 5))]
        >>> nearest_elevation((4, 4), texts)
        12.0
    """
    index = nearest_annotation(query, candidates)
    if index is None:
        return INVALID_ELEVATION
    return parse_elevation(candidates[index].text)


__all__ = [
    'nearest_annotation',
    'nearest_elevation',
]
