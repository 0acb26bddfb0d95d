# stargraph_sdk/graph/reader_settings.py
# SPDX-License-Identifier: Apache-2.0
"""
Reader configuration.

Defaults come from the environment once, at import time:

    STARGRAPH_STRICT_SCALARS   "1"/"true"/"yes"/"on" to require scalar
                               vertex property values and edge property values
    STARGRAPH_READ_DIRECTIONS  comma separated edge sections read by
                               read_star_graph (default "outE,inE")

Both can be overridden per task / thread through the setters below. They use
ContextVars, so an override applies to the current context (and children
that inherit it) rather than the whole process.
"""

from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from typing import Iterable, Tuple

from stargraph_sdk.graph import wire_tokens
from stargraph_sdk.graph.star_graph import Direction, UnsupportedDirection

LOG = logging.getLogger(__name__)

_ALL_DIRECTIONS: Tuple[Direction, ...] = (Direction.OUT, Direction.IN)


def _env_flag(name: str, default: str = "0") -> bool:
    """
    Parse a boolean-ish environment variable in a consistent, case-insensitive way.

    Truthy values: "1", "true", "yes", "on". Everything else is False.
    """
    val = os.getenv(name, default)
    if not isinstance(val, str):
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_directions(name: str) -> Tuple[Direction, ...]:
    raw = os.getenv(name, f"{wire_tokens.OUT_E},{wire_tokens.IN_E}")
    out = []
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        try:
            direction = Direction.from_token(token)
        except UnsupportedDirection:
            LOG.warning("%s: ignoring unknown direction token %r", name, token)
            continue
        if direction not in out:
            out.append(direction)
    return tuple(out) or _ALL_DIRECTIONS


_STRICT_SCALARS_DEFAULT: bool = _env_flag("STARGRAPH_STRICT_SCALARS", "0")
_READ_DIRECTIONS_DEFAULT: Tuple[Direction, ...] = _env_directions("STARGRAPH_READ_DIRECTIONS")

#: Context-local strict scalar validation flag.
STRICT_SCALARS_VAR: ContextVar[bool] = ContextVar(
    "stargraph_strict_scalars",
    default=_STRICT_SCALARS_DEFAULT,
)

#: Context-local default directions for read_star_graph.
READ_DIRECTIONS_VAR: ContextVar[Tuple[Direction, ...]] = ContextVar(
    "stargraph_read_directions",
    default=_READ_DIRECTIONS_DEFAULT,
)


def set_strict_scalars(enabled: bool) -> None:
    STRICT_SCALARS_VAR.set(bool(enabled))


def strict_scalars_enabled() -> bool:
    return STRICT_SCALARS_VAR.get()


def set_read_directions(directions: Iterable[object]) -> None:
    """Set the directions read_star_graph decodes by default in this context."""
    resolved = []
    for token in directions:
        direction = Direction.from_token(token)
        if direction not in resolved:
            resolved.append(direction)
    READ_DIRECTIONS_VAR.set(tuple(resolved))


def read_directions() -> Tuple[Direction, ...]:
    return READ_DIRECTIONS_VAR.get()


__all__ = [
    "STRICT_SCALARS_VAR",
    "READ_DIRECTIONS_VAR",
    "set_strict_scalars",
    "strict_scalars_enabled",
    "set_read_directions",
    "read_directions",
]
