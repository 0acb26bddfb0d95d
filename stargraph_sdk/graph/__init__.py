# stargraph_sdk/graph/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
Star Graph - Public API

Model types, errors, and readers are re-exported here for clean imports.
"""

from stargraph_sdk.graph.star_graph import (
    # Model
    OpaqueId,
    Direction,
    StarGraph,
    StarVertex,
    StarVertexProperty,
    StarEdge,
    StarAdjacentVertex,

    # Error types
    StarGraphError,
    MissingField,
    TypeMismatch,
    UnsupportedDirection,
    AlreadyInitialized,
    VertexNotInitialized,
)
from stargraph_sdk.graph.wire_value import WireKind, wire_kind
from stargraph_sdk.graph.star_graph_reader import (
    AttachFn,
    read_star_graph,
    read_star_graph_edges,
    read_star_graph_vertex,
)
from stargraph_sdk.graph.reader_settings import (
    set_strict_scalars,
    strict_scalars_enabled,
    set_read_directions,
    read_directions,
)

__all__ = [
    "OpaqueId",
    "Direction",
    "StarGraph",
    "StarVertex",
    "StarVertexProperty",
    "StarEdge",
    "StarAdjacentVertex",
    "StarGraphError",
    "MissingField",
    "TypeMismatch",
    "UnsupportedDirection",
    "AlreadyInitialized",
    "VertexNotInitialized",
    "WireKind",
    "wire_kind",
    "AttachFn",
    "read_star_graph",
    "read_star_graph_edges",
    "read_star_graph_vertex",
    "set_strict_scalars",
    "strict_scalars_enabled",
    "set_read_directions",
    "read_directions",
]
