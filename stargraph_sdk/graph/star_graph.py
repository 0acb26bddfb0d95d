# stargraph_sdk/graph/star_graph.py
# SPDX-License-Identifier: Apache-2.0
"""
Star Graph Model

Purpose
-------
A star graph is one local vertex together with all of its incident edges,
seen from that vertex. It is the unit shipped between compute tasks when a
task needs a vertex neighborhood but not a full graph instance.

What lives here
---------------
- Normalized error taxonomy shared by the model and the readers
- Direction (Out / In) and its wire tokens
- StarGraph, StarVertex, StarVertexProperty, StarEdge, StarAdjacentVertex

Model rules
-----------
- Exactly one local vertex per StarGraph; a second add_vertex fails with
  AlreadyInitialized.
- Vertex property cardinality is inferred from arity: a key holding one
  StarVertexProperty is single-valued, more than one is list-valued. There is
  no explicit cardinality tag.
- Vertex properties carry at most one level of meta-properties.
- Edge properties are flat and single-valued.
- Remote endpoints are identity-only placeholders (StarAdjacentVertex).
- Ids are opaque and never checked for uniqueness.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from stargraph_sdk.graph import wire_tokens

OpaqueId = Any
"""Identity token of a vertex, edge, or property. Stored, never interpreted."""


# =============================================================================
# Normalized Errors
# =============================================================================

class StarGraphError(Exception):
    """
    Base exception for star graph decoding and model errors.

    Attributes:
        message: Human-readable description.
        code: Machine-readable, UPPER_SNAKE_CASE error code.
        path: Location in the wire record (e.g. ``properties.name[0].id``).
        details: Additional machine context (no payload values beyond ids/kinds).
    """
    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        path: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.path = path
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = self.message or self.__class__.__name__
        if self.code:
            base += f" [code={self.code}]"
        if self.path is not None:
            base += f" path={self.path or '<root>'}"
        if self.details:
            base += f" details={self.details}"
        return base

    def to_wire(self) -> Dict[str, Any]:
        """Map this error to the canonical error envelope shape."""
        details = dict(self.details)
        if self.path is not None:
            details["path"] = self.path
        return {
            "ok": False,
            "code": self.code or type(self).__name__.upper(),
            "error": type(self).__name__,
            "message": self.message,
            "details": details or None,
        }


class MissingField(StarGraphError):
    """A required field is absent from a wire record."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "MISSING_FIELD")
        super().__init__(message, **kw)


class TypeMismatch(StarGraphError):
    """A field is present but has the wrong wire shape."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "TYPE_MISMATCH")
        super().__init__(message, **kw)


class UnsupportedDirection(StarGraphError):
    """A direction token outside {Out, In}."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "UNSUPPORTED_DIRECTION")
        super().__init__(message, **kw)


class AlreadyInitialized(StarGraphError):
    """A second local vertex was added to one StarGraph."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "ALREADY_INITIALIZED")
        super().__init__(message, **kw)


class VertexNotInitialized(StarGraphError):
    """A property or edge was added before the local vertex exists."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "VERTEX_NOT_INITIALIZED")
        super().__init__(message, **kw)


# =============================================================================
# Direction
# =============================================================================

class Direction(Enum):
    """Which end of an edge the local vertex sits on."""
    OUT = "OUT"  # local vertex is the tail
    IN = "IN"    # local vertex is the head

    @property
    def field(self) -> str:
        """Vertex record field holding edges of this direction."""
        return wire_tokens.OUT_E if self is Direction.OUT else wire_tokens.IN_E

    @property
    def endpoint_field(self) -> str:
        """Edge record field holding the remote endpoint id."""
        return wire_tokens.IN if self is Direction.OUT else wire_tokens.OUT

    @classmethod
    def from_token(cls, token: Any) -> "Direction":
        """
        Resolve a direction from a Direction, a wire section name
        (``outE`` / ``inE``), or a direction name (``OUT`` / ``IN``).
        """
        if isinstance(token, Direction):
            return token
        if isinstance(token, str):
            if token == wire_tokens.OUT_E:
                return cls.OUT
            if token == wire_tokens.IN_E:
                return cls.IN
            name = token.strip().upper()
            if name in cls.__members__:
                return cls[name]
        raise UnsupportedDirection(
            f"direction must be one of {wire_tokens.OUT_E!r}, {wire_tokens.IN_E!r}, "
            f"OUT or IN, got {token!r}",
            details={"token": repr(token)},
        )


# =============================================================================
# Entities
# =============================================================================

@dataclass
class StarAdjacentVertex:
    """Placeholder for a remote endpoint, known only by identity."""
    id: OpaqueId


@dataclass
class StarVertexProperty:
    """
    One value of a vertex property key.

    Attributes:
        id: Property instance identity
        key: Property key this instance belongs to
        value: Property value as read from the wire
        properties: Meta-properties (key -> scalar), one level only
    """
    id: OpaqueId
    key: str
    value: Any
    properties: Dict[str, Any] = field(default_factory=dict)

    def property(self, key: str, value: Any) -> None:
        """Set meta-property ``key``, replacing any previous value."""
        self.properties[key] = value


@dataclass
class StarVertex:
    """
    The local vertex of a star graph.

    Attributes:
        id: Vertex identity
        label: Vertex label
        properties: Property key -> ordered property instances
    """
    id: OpaqueId
    label: str
    properties: Dict[str, List[StarVertexProperty]] = field(default_factory=dict)

    def keys(self) -> List[str]:
        """Property keys in insertion order."""
        return list(self.properties)

    def property_list(self, key: str) -> List[StarVertexProperty]:
        """Property instances under ``key`` in wire order; empty if absent."""
        return list(self.properties.get(key, ()))

    def is_multi_valued(self, key: str) -> bool:
        """True when ``key`` holds more than one property instance."""
        return len(self.properties.get(key, ())) > 1


@dataclass
class StarEdge:
    """
    An edge incident to the local vertex.

    Attributes:
        id: Edge identity
        label: Edge label
        direction: Direction relative to the local vertex
        local_vertex_id: Id of the star graph's vertex
        other_vertex: Placeholder for the remote endpoint
        properties: Flat key -> scalar property map
    """
    id: OpaqueId
    label: str
    direction: Direction
    local_vertex_id: OpaqueId
    other_vertex: StarAdjacentVertex
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def other_vertex_id(self) -> OpaqueId:
        return self.other_vertex.id

    @property
    def out_vertex_id(self) -> OpaqueId:
        if self.direction is Direction.OUT:
            return self.local_vertex_id
        return self.other_vertex.id

    @property
    def in_vertex_id(self) -> OpaqueId:
        if self.direction is Direction.IN:
            return self.local_vertex_id
        return self.other_vertex.id

    def property(self, key: str, value: Any) -> None:
        """Set edge property ``key``, replacing any previous value."""
        self.properties[key] = value


# =============================================================================
# StarGraph
# =============================================================================

AdjacencyKey = Tuple[Direction, str]


class StarGraph:
    """
    Container for one local vertex and its direction/label-grouped edges.

    Created empty via ``StarGraph.open()``; the readers in
    ``stargraph_sdk.graph.star_graph_reader`` populate it.
    """

    def __init__(self) -> None:
        self._vertex: Optional[StarVertex] = None
        self._adjacency: Dict[AdjacencyKey, List[StarEdge]] = {}
        self._adjacent_vertices: List[StarAdjacentVertex] = []

    @classmethod
    def open(cls) -> "StarGraph":
        return cls()

    # ---- accessors ----

    @property
    def has_vertex(self) -> bool:
        return self._vertex is not None

    @property
    def vertex(self) -> StarVertex:
        if self._vertex is None:
            raise VertexNotInitialized("star graph has no local vertex")
        return self._vertex

    @property
    def adjacency(self) -> Dict[AdjacencyKey, List[StarEdge]]:
        return {k: list(v) for k, v in self._adjacency.items()}

    @property
    def adjacent_vertices(self) -> List[StarAdjacentVertex]:
        return list(self._adjacent_vertices)

    def edges(
        self,
        direction: Optional[Direction] = None,
        label: Optional[str] = None,
    ) -> List[StarEdge]:
        return list(self._iter_edges(direction, label))

    def _iter_edges(
        self,
        direction: Optional[Direction],
        label: Optional[str],
    ) -> Iterator[StarEdge]:
        for (d, lbl), bucket in self._adjacency.items():
            if direction is not None and d is not direction:
                continue
            if label is not None and lbl != label:
                continue
            yield from bucket

    # ---- mutation ----

    def add_vertex(self, id: OpaqueId, label: str) -> StarVertex:
        if self._vertex is not None:
            raise AlreadyInitialized(
                "star graph already has a local vertex",
                details={"existing_id": repr(self._vertex.id), "new_id": repr(id)},
            )
        self._vertex = StarVertex(id=id, label=label)
        return self._vertex

    def add_property(self, key: str, value: Any, id: OpaqueId) -> StarVertexProperty:
        """Append a property instance under ``key``; never overwrites."""
        vp = StarVertexProperty(id=id, key=key, value=value)
        self.vertex.properties.setdefault(key, []).append(vp)
        return vp

    def add_adjacent_vertex(self, id: OpaqueId) -> StarAdjacentVertex:
        adjacent = StarAdjacentVertex(id=id)
        self._adjacent_vertices.append(adjacent)
        return adjacent

    def add_edge(
        self,
        direction: Direction,
        label: str,
        other_id: OpaqueId,
        id: OpaqueId,
        *,
        other_vertex: Optional[StarAdjacentVertex] = None,
    ) -> StarEdge:
        """
        Append an edge to the (direction, label) bucket.

        ``other_vertex`` reuses an already registered placeholder; otherwise
        one is registered for ``other_id``.
        """
        local = self.vertex
        direction = Direction.from_token(direction)
        if other_vertex is None:
            other_vertex = self.add_adjacent_vertex(other_id)
        edge = StarEdge(
            id=id,
            label=label,
            direction=direction,
            local_vertex_id=local.id,
            other_vertex=other_vertex,
        )
        self._adjacency.setdefault((direction, label), []).append(edge)
        return edge

    # ---- structural equality ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StarGraph):
            return NotImplemented
        return self._vertex == other._vertex and self._adjacency == other._adjacency

    def __repr__(self) -> str:
        vid = repr(self._vertex.id) if self._vertex is not None else "<none>"
        n_edges = sum(len(b) for b in self._adjacency.values())
        return f"StarGraph(vertex={vid}, edges={n_edges})"


__all__ = [
    "OpaqueId",
    "StarGraphError",
    "MissingField",
    "TypeMismatch",
    "UnsupportedDirection",
    "AlreadyInitialized",
    "VertexNotInitialized",
    "Direction",
    "StarAdjacentVertex",
    "StarVertexProperty",
    "StarVertex",
    "StarEdge",
    "AdjacencyKey",
    "StarGraph",
]
