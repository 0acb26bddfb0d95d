# stargraph_sdk/graph/star_graph_reader.py
# SPDX-License-Identifier: Apache-2.0
"""
Readers that rebuild a StarGraph from a parsed wire record.

Wire shape (field names from ``wire_tokens``):

    {
        "id": <opaque>,
        "label": "person",
        "properties": {
            "name": [
                {"id": <opaque>, "value": "marko",
                 "properties": {"since": 2010}}       # meta-properties, flat
            ]
        },
        "outE": {"knows": [{"id": <opaque>, "in": <opaque>,
                            "properties": {"weight": 0.5}}]},
        "inE":  {"created": [{"id": <opaque>, "out": <opaque>}]}
    }

``read_star_graph_vertex`` builds the graph and the local vertex with its
properties. ``read_star_graph_edges`` adds one direction section to an
existing graph and may be called once per direction. ``read_star_graph``
does both for the configured directions.

Decoding fails fast: the first structural violation raises a StarGraphError
subclass carrying the dotted path of the offending field. A graph left
behind by a failed decode is incomplete and should be dropped. Exceptions
raised by the attach callback propagate unchanged. Ids (vertex, property,
edge and endpoint) are opaque and stored exactly as given.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from stargraph_sdk.graph import wire_tokens
from stargraph_sdk.graph.reader_settings import read_directions, strict_scalars_enabled
from stargraph_sdk.graph.star_graph import (
    Direction,
    StarEdge,
    StarGraph,
    StarVertexProperty,
    TypeMismatch,
)
from stargraph_sdk.graph.wire_value import (
    Record,
    WireKind,
    WireValue,
    child_path,
    expect_record,
    expect_scalar,
    expect_sequence,
    iter_record,
    iter_sequence,
    require_field,
    wire_kind,
)

LOG = logging.getLogger(__name__)

AttachFn = Callable[[StarEdge], Any]
"""Side-effect-only hook called once per decoded edge; its result is ignored."""


def _check_property_value(value: WireValue, path: str, strict: bool) -> None:
    kind = wire_kind(value, path)
    if strict and kind is not WireKind.SCALAR:
        raise TypeMismatch(
            f"property value must be a scalar, got {kind.value}",
            path=path,
            details={"expected": WireKind.SCALAR.value, "actual": kind.value},
        )


# =============================================================================
# Vertex
# =============================================================================

def read_star_graph_vertex(vertex_data: Record) -> StarGraph:
    """
    Build a StarGraph holding the local vertex and its properties.

    Raises:
        MissingField: ``id`` or ``label`` absent, or a property record without
            ``value`` / ``id``.
        TypeMismatch: a field has the wrong shape, or a meta-property value is
            a record or sequence.
    """
    record = expect_record(vertex_data, "", "vertex record")
    vertex_id = require_field(record, wire_tokens.ID, "")
    label = expect_scalar(require_field(record, wire_tokens.LABEL, ""), wire_tokens.LABEL, "label")
    if not isinstance(label, str):
        raise TypeMismatch(
            f"label must be a string, got {type(label).__name__}",
            path=wire_tokens.LABEL,
            details={"expected": "str", "actual": type(label).__name__},
        )

    star_graph = StarGraph.open()
    star_graph.add_vertex(vertex_id, label)

    if wire_tokens.PROPERTIES in record:
        strict = strict_scalars_enabled()
        props_path = wire_tokens.PROPERTIES
        props = expect_record(record[wire_tokens.PROPERTIES], props_path, "vertex properties")
        for key, key_path, entries in iter_record(props, props_path):
            entries = expect_sequence(entries, key_path, f"property {key!r}")
            for _, entry_path, entry in iter_sequence(entries, key_path):
                _read_vertex_property(star_graph, key, entry, entry_path, strict)

    LOG.debug(
        "read star graph vertex id=%r label=%s property_keys=%d",
        vertex_id,
        label,
        len(star_graph.vertex.properties),
    )
    return star_graph


def _read_vertex_property(
    star_graph: StarGraph,
    key: str,
    entry: WireValue,
    path: str,
    strict: bool,
) -> StarVertexProperty:
    entry = expect_record(entry, path, "property record")
    value = require_field(entry, wire_tokens.VALUE, path)
    prop_id = require_field(entry, wire_tokens.ID, path)
    _check_property_value(value, child_path(path, wire_tokens.VALUE), strict)

    vp = star_graph.add_property(key, value, prop_id)

    if wire_tokens.PROPERTIES in entry:
        meta_path = child_path(path, wire_tokens.PROPERTIES)
        meta = expect_record(entry[wire_tokens.PROPERTIES], meta_path, "meta-properties")
        for meta_key, meta_key_path, meta_value in iter_record(meta, meta_path):
            # meta-properties stop at one level, regardless of strict mode
            expect_scalar(meta_value, meta_key_path, f"meta-property {meta_key!r}")
            vp.property(meta_key, meta_value)
    return vp


# =============================================================================
# Edges
# =============================================================================

def read_star_graph_edges(
    star_graph: StarGraph,
    vertex_data: Record,
    direction: Any,
    *,
    attach: Optional[AttachFn] = None,
) -> List[StarEdge]:
    """
    Add the edges of one direction section of ``vertex_data`` to ``star_graph``.

    ``direction`` is a Direction or a token accepted by
    ``Direction.from_token`` (``"outE"``, ``"inE"``, ``"OUT"``, ``"IN"``).
    A missing section means no edges in that direction. Returns the edges
    added, in wire order.

    Raises:
        UnsupportedDirection: unknown direction token.
        MissingField: an edge record without ``id`` or its endpoint field
            (``in`` for outE, ``out`` for inE).
        TypeMismatch: a field has the wrong shape.
    """
    direction = Direction.from_token(direction)
    record = expect_record(vertex_data, "", "vertex record")
    section = direction.field
    if section not in record:
        return []

    strict = strict_scalars_enabled()
    groups = expect_record(record[section], section, f"{section} section")
    added: List[StarEdge] = []
    for label, label_path, edge_datas in iter_record(groups, section):
        edge_datas = expect_sequence(edge_datas, label_path, f"edges labeled {label!r}")
        for _, edge_path, inner in iter_sequence(edge_datas, label_path):
            edge = _read_edge(star_graph, direction, label, inner, edge_path, strict)
            if attach is not None:
                attach(edge)
            added.append(edge)

    LOG.debug(
        "read star graph edges direction=%s labels=%d edges=%d",
        direction.name,
        len(groups),
        len(added),
    )
    return added


def _read_edge(
    star_graph: StarGraph,
    direction: Direction,
    label: str,
    inner: WireValue,
    path: str,
    strict: bool,
) -> StarEdge:
    inner = expect_record(inner, path, "edge record")
    edge_id = require_field(inner, wire_tokens.ID, path)
    other_id = require_field(inner, direction.endpoint_field, path)

    edge = star_graph.add_edge(direction, label, other_id, edge_id)

    if wire_tokens.PROPERTIES in inner:
        props_path = child_path(path, wire_tokens.PROPERTIES)
        props = expect_record(inner[wire_tokens.PROPERTIES], props_path, "edge properties")
        for key, key_path, value in iter_record(props, props_path):
            _check_property_value(value, key_path, strict)
            edge.property(key, value)
    return edge


# =============================================================================
# Vertex + edges
# =============================================================================

def read_star_graph(
    vertex_data: Record,
    *,
    attach: Optional[AttachFn] = None,
    directions: Optional[Iterable[Any]] = None,
) -> StarGraph:
    """
    Read the vertex, then each direction section in order.

    ``directions`` defaults to ``reader_settings.read_directions()``
    (outE then inE unless configured otherwise).
    """
    star_graph = read_star_graph_vertex(vertex_data)
    for direction in (read_directions() if directions is None else directions):
        read_star_graph_edges(star_graph, vertex_data, direction, attach=attach)
    return star_graph


__all__ = [
    "AttachFn",
    "read_star_graph_vertex",
    "read_star_graph_edges",
    "read_star_graph",
]
