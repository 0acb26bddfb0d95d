# SPDX-License-Identifier: Apache-2.0
"""
Reader settings — strict scalars & default directions.

Asserts:
  • strict mode rejects record/sequence vertex and edge property values
  • the meta-property depth cap holds with strict mode off
  • read_star_graph follows the context-local default directions
  • environment parsing of both settings
"""

from decimal import Decimal

import pytest

from stargraph_sdk.graph import reader_settings
from stargraph_sdk.graph.reader_settings import (
    read_directions,
    set_read_directions,
    set_strict_scalars,
    strict_scalars_enabled,
)
from stargraph_sdk.graph.star_graph import Direction, TypeMismatch, UnsupportedDirection
from stargraph_sdk.graph.star_graph_reader import (
    read_star_graph,
    read_star_graph_edges,
    read_star_graph_vertex,
)

pytestmark = pytest.mark.graph


def test_defaults_under_test_isolation():
    assert strict_scalars_enabled() is False
    assert read_directions() == (Direction.OUT, Direction.IN)


def test_strict_scalars_rejects_structured_vertex_property_value():
    record = {"id": 1, "label": "person", "properties": {"tags": [{"id": 0, "value": ["a"]}]}}
    set_strict_scalars(True)
    assert strict_scalars_enabled() is True

    with pytest.raises(TypeMismatch) as ei:
        read_star_graph_vertex(record)
    assert ei.value.path == "properties.tags[0].value"


def test_strict_scalars_rejects_structured_edge_property_value(marko_record):
    marko_record["outE"] = {"knows": [{"id": 7, "in": 2, "properties": {"meta": {"x": 1}}}]}
    lenient = read_star_graph_vertex(marko_record)
    (edge,) = read_star_graph_edges(lenient, marko_record, Direction.OUT)
    assert edge.properties == {"meta": {"x": 1}}

    set_strict_scalars(True)
    strict = read_star_graph_vertex(marko_record)
    with pytest.raises(TypeMismatch) as ei:
        read_star_graph_edges(strict, marko_record, Direction.OUT)
    assert ei.value.path == "outE.knows[0].properties.meta"


def test_strict_scalars_accepts_scalars(modern_record):
    set_strict_scalars(True)
    g = read_star_graph(modern_record)
    assert len(g.edges()) == 4


def test_set_read_directions_drives_read_star_graph(modern_record):
    set_read_directions(["inE"])
    assert read_directions() == (Direction.IN,)

    g = read_star_graph(modern_record)
    assert g.edges(Direction.OUT) == []
    assert len(g.edges(Direction.IN)) == 1


def test_set_read_directions_deduplicates_and_keeps_order():
    set_read_directions(["IN", "outE", Direction.IN])
    assert read_directions() == (Direction.IN, Direction.OUT)


def test_set_read_directions_rejects_unknown_tokens():
    with pytest.raises(UnsupportedDirection):
        set_read_directions(["outE", "sideways"])
    assert read_directions() == (Direction.OUT, Direction.IN)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", True),
        (" TRUE ", True),
        ("on", True),
        ("yes", True),
        ("0", False),
        ("off", False),
        ("", False),
    ],
)
def test_env_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("STARGRAPH_TEST_FLAG", raw)
    assert reader_settings._env_flag("STARGRAPH_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("STARGRAPH_TEST_FLAG", raising=False)
    assert reader_settings._env_flag("STARGRAPH_TEST_FLAG") is False
    assert reader_settings._env_flag("STARGRAPH_TEST_FLAG", "1") is True


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("outE,inE", (Direction.OUT, Direction.IN)),
        ("inE", (Direction.IN,)),
        (" inE , outE ", (Direction.IN, Direction.OUT)),
        ("outE,outE", (Direction.OUT,)),
        ("bogus,inE", (Direction.IN,)),
        ("bogus", (Direction.OUT, Direction.IN)),
        ("", (Direction.OUT, Direction.IN)),
    ],
)
def test_env_directions_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("STARGRAPH_TEST_DIRECTIONS", raw)
    assert reader_settings._env_directions("STARGRAPH_TEST_DIRECTIONS") == expected


def test_env_directions_default(monkeypatch):
    monkeypatch.delenv("STARGRAPH_TEST_DIRECTIONS", raising=False)
    assert reader_settings._env_directions("STARGRAPH_TEST_DIRECTIONS") == (Direction.OUT, Direction.IN)


def test_strict_scalars_accepts_decimal_values():
    record = {
        "id": 1,
        "label": "person",
        "properties": {"age": [{"id": 0, "value": Decimal("29.5")}]},
        "outE": {"knows": [{"id": 7, "in": 2, "properties": {"weight": Decimal("0.5")}}]},
    }
    set_strict_scalars(True)
    g = read_star_graph(record)
    assert g.vertex.property_list("age")[0].value == Decimal("29.5")
    assert g.edges()[0].properties == {"weight": Decimal("0.5")}
