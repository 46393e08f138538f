"""Offset direction resolution for closed contours.

Offsetting a closed contour by a distance produces two candidates, one on
each side. Which candidate is "outside" is decided by comparing areas: the
outside offset of a simple polygon encloses more area than the inside one.

This is a heuristic. It holds for closed, non-self-intersecting, reasonably
convex sources; strongly non-convex sources can be misclassified, so
:func:`offset_contour` refuses open and self-intersecting contours up front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from .core.errors import OffsetError
from .core.geometry_utils import contour_from_shapely, to_shapely_polygon, uniform_elevation
from .core.types import Contour, OffsetSide
from .geometry import has_self_intersection
from .metrics import contour_area

AreaFunction = Callable[[Contour], float]


@dataclass(frozen=True)
class OffsetResult:
    """Outcome of offsetting one contour.

    Attributes:
        source: Contour that was offset
        chosen: Candidate on the requested side
        rejected: Candidate on the opposite side, discarded by callers
        side: Requested side
    """

    source: Contour
    chosen: Contour
    rejected: Contour
    side: OffsetSide


def resolve_offset(
    side: OffsetSide,
    candidate_plus: Contour,
    candidate_minus: Contour,
    area_of: AreaFunction = contour_area,
) -> Tuple[Contour, Contour]:
    """Pick the candidate lying on ``side``.

    OUTSIDE picks the candidate with the larger area, INSIDE the one with the
    smaller area. On equal areas OUTSIDE keeps ``candidate_plus`` and INSIDE
    keeps ``candidate_minus``.

    Args:
        side: Requested offset side
        candidate_plus: First offset candidate
        candidate_minus: Second offset candidate
        area_of: Area function applied to both candidates

    Returns:
        Tuple of (chosen, rejected)

    Examples:
        >>> big = Contour(((0, 0), (4, 0), (4, 4), (0, 4)), closed=True)
        >>> small = Contour(((1, 1), (3, 1), (3, 3), (1, 3)), closed=True)
        >>> resolve_offset(OffsetSide.OUTSIDE, small, big)[0] is big
        True
    """
    area_plus = area_of(candidate_plus)
    area_minus = area_of(candidate_minus)

    if side is OffsetSide.OUTSIDE:
        if area_plus >= area_minus:
            return candidate_plus, candidate_minus
        return candidate_minus, candidate_plus

    if side is OffsetSide.INSIDE:
        if area_minus <= area_plus:
            return candidate_minus, candidate_plus
        return candidate_plus, candidate_minus

    raise ValueError(f"Unknown offset side: {side}")


def offset_candidates(
    contour: Contour,
    distance: float,
    mitre_limit: float = 5.0,
) -> Tuple[Contour, Contour]:
    """Compute the two opposite offsets of a closed contour.

    Both candidates are at ``abs(distance)`` from the source and are 2D. They
    carry the source elevation, taken from the common Z of its vertices when
    no explicit elevation is set. Mitre joins keep corners sharp.

    Raises:
        OffsetError: If either candidate collapses or splits into pieces
    """
    magnitude = abs(distance)
    polygon = to_shapely_polygon(contour)
    elevation = uniform_elevation(contour)

    candidates = []
    for signed in (magnitude, -magnitude):
        buffered = polygon.buffer(signed, join_style="mitre", mitre_limit=mitre_limit)
        if buffered.is_empty:
            raise OffsetError(
                f"Offset by {signed} collapses the contour",
                distance=distance,
                reason='collapsed',
            )
        candidate = contour_from_shapely(buffered, elevation=elevation)
        if candidate is None:
            raise OffsetError(
                f"Offset by {signed} splits the contour into several parts",
                distance=distance,
                reason='split',
            )
        candidates.append(candidate)

    return candidates[0], candidates[1]


def offset_contour(
    contour: Contour,
    distance: float,
    area_of: AreaFunction = contour_area,
) -> OffsetResult:
    """Offset a closed contour to the side given by the sign of ``distance``.

    Positive distances offset outside, negative ones inside.

    Raises:
        ValidationError: If ``distance`` is zero
        OffsetError: If the contour is open, self-intersecting, or either
            offset candidate could not be computed
    """
    side = OffsetSide.from_distance(distance)

    if not contour.closed:
        raise OffsetError("Only closed contours can be offset", distance=distance, reason='open')
    if has_self_intersection(contour):
        raise OffsetError(
            "Self-intersecting contours cannot be offset",
            distance=distance,
            reason='self_intersecting',
        )

    plus, minus = offset_candidates(contour, distance)
    chosen, rejected = resolve_offset(side, plus, minus, area_of=area_of)
    return OffsetResult(source=contour, chosen=chosen, rejected=rejected, side=side)


__all__ = [
    'OffsetResult',
    'resolve_offset',
    'offset_candidates',
    'offset_contour',
]
