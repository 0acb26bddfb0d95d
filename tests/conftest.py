# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the star graph reader suite.

Provides:
  • wire records for the common scenarios (vertex only, out edges, full)
  • paths to the golden samples and JSON Schemas
  • per-test isolation of the context-local reader settings
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import pytest

from stargraph_sdk.graph.reader_settings import READ_DIRECTIONS_VAR, STRICT_SCALARS_VAR
from stargraph_sdk.graph.star_graph import Direction

ROOT = Path(__file__).resolve().parents[1]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    markers = [
        "graph: star graph model and reader tests",
        "schema: JSON Schema conformance validation tests",
        "golden: golden wire record validation tests",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


@pytest.fixture(autouse=True)
def reader_settings_defaults():
    """Run every test with strict scalars off and both directions configured."""
    strict_token = STRICT_SCALARS_VAR.set(False)
    dirs_token = READ_DIRECTIONS_VAR.set((Direction.OUT, Direction.IN))
    yield
    READ_DIRECTIONS_VAR.reset(dirs_token)
    STRICT_SCALARS_VAR.reset(strict_token)


_MARKO: Dict[str, Any] = {
    "id": 1,
    "label": "person",
    "properties": {"name": [{"id": 0, "value": "marko"}]},
}


@pytest.fixture
def marko_record() -> Dict[str, Any]:
    """Vertex only: one single-valued property, no edge sections."""
    return copy.deepcopy(_MARKO)


@pytest.fixture
def marko_with_knows() -> Dict[str, Any]:
    """Vertex plus one outgoing 'knows' edge carrying a weight."""
    record = copy.deepcopy(_MARKO)
    record["outE"] = {"knows": [{"id": 7, "in": 2, "properties": {"weight": 0.5}}]}
    return record


@pytest.fixture
def modern_record() -> Dict[str, Any]:
    """Multi-valued property with meta-properties and edges in both directions."""
    return {
        "id": 1,
        "label": "person",
        "properties": {
            "name": [{"id": 0, "value": "marko"}],
            "location": [
                {"id": 6, "value": "san diego", "properties": {"startTime": 1997, "endTime": 2001}},
                {"id": 7, "value": "santa cruz", "properties": {"startTime": 2001, "endTime": 2004}},
                {"id": 8, "value": "brussels", "properties": {"startTime": 2004}},
            ],
        },
        "outE": {
            "knows": [
                {"id": 7, "in": 2, "properties": {"weight": 0.5}},
                {"id": 8, "in": 4, "properties": {"weight": 1.0}},
            ],
            "created": [{"id": 9, "in": 3, "properties": {"weight": 0.4}}],
        },
        "inE": {
            "mentors": [{"id": 12, "out": 6}],
        },
    }


@pytest.fixture(scope="session")
def golden_dir() -> Path:
    return ROOT / "tests" / "golden" / "graph"


@pytest.fixture(scope="session")
def schemas_dir() -> Path:
    return ROOT / "schemas" / "graph"
