"""Drawing access interface.

Commands never talk to a drawing editor directly. They go through a
:class:`DrawingSource`, which offers two capabilities: reading the geometry
or text of an entity, and tagging an entity with a layer. A host integration
implements this protocol; :class:`InMemoryDrawing` is a dictionary-backed
implementation for scripts and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from .core.errors import HostError
from .core.types import Contour, EntityKind, Point, TextAnnotation
from .core.validation_utils import strip_closing_vertex, validate_vertices


@dataclass(frozen=True)
class Entity:
    """Snapshot of a drawing entity.

    Exactly one of ``contour`` (polylines), ``annotation`` (texts) or
    ``location`` (points) is set, matching ``kind``.
    """

    handle: str
    kind: EntityKind
    contour: Optional[Contour] = None
    annotation: Optional[TextAnnotation] = None
    location: Optional[Point] = None
    layer: str = "0"


class DrawingSource(Protocol):
    """Data access used by :mod:`levelforge.commands`."""

    def read(self, handle: str) -> Entity:
        """Return a snapshot of the entity identified by ``handle``."""
        ...

    def assign_layer(self, handle: str, layer: str) -> None:
        """Tag the entity identified by ``handle`` with ``layer``."""
        ...


def read_kind(source: DrawingSource, handle: str, kind: EntityKind) -> Entity:
    """Read an entity and check its kind.

    Raises:
        HostError: If the entity is of another kind
    """
    entity = source.read(handle)
    if entity.kind is not kind:
        raise HostError(f"Entity {handle} is a {entity.kind.value}, expected {kind.value}")
    return entity


class InMemoryDrawing:
    """Dictionary-backed :class:`DrawingSource`.

    Handles are generated sequentially as hex strings unless given.
    """

    def __init__(self) -> None:
        self._entities: Dict[str, Entity] = {}
        self._counter = 0

    def _next_handle(self, handle: Optional[str]) -> str:
        if handle is None:
            self._counter += 1
            handle = format(self._counter, 'X')
        if handle in self._entities:
            raise HostError(f"Duplicate entity handle: {handle}")
        return handle

    def add_polyline(
        self,
        coords: Iterable[Sequence[float]],
        closed: bool = False,
        elevation: Optional[float] = None,
        layer: str = "0",
        handle: Optional[str] = None,
    ) -> str:
        """Add a polyline; a repeated closing vertex is folded into ``closed``."""
        vertices = list(validate_vertices(coords, min_vertices=2))
        vertices, repeated = strip_closing_vertex(vertices)
        contour = Contour(tuple(vertices), closed=closed or repeated, elevation=elevation)
        handle = self._next_handle(handle)
        self._entities[handle] = Entity(handle, EntityKind.POLYLINE, contour=contour, layer=layer)
        return handle

    def add_text(
        self,
        text: str,
        anchor: Optional[Point] = None,
        layer: str = "0",
        handle: Optional[str] = None,
    ) -> str:
        handle = self._next_handle(handle)
        annotation = TextAnnotation(text, tuple(anchor) if anchor is not None else None)
        self._entities[handle] = Entity(handle, EntityKind.TEXT, annotation=annotation, layer=layer)
        return handle

    def add_point(
        self,
        location: Point,
        layer: str = "0",
        handle: Optional[str] = None,
    ) -> str:
        handle = self._next_handle(handle)
        location = validate_vertices([location], min_vertices=1)[0]
        self._entities[handle] = Entity(handle, EntityKind.POINT, location=location, layer=layer)
        return handle

    def handles(self, kind: Optional[EntityKind] = None) -> List[str]:
        """Handles in insertion order, optionally filtered by kind."""
        return [h for h, e in self._entities.items() if kind is None or e.kind is kind]

    def layer_of(self, handle: str) -> str:
        return self.read(handle).layer

    def read(self, handle: str) -> Entity:
        try:
            return self._entities[handle]
        except KeyError:
            raise HostError(f"Unknown entity handle: {handle}") from None

    def assign_layer(self, handle: str, layer: str) -> None:
        self._entities[handle] = replace(self.read(handle), layer=layer)


__all__ = [
    'Entity',
    'DrawingSource',
    'InMemoryDrawing',
    'read_kind',
]
