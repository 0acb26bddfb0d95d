# stargraph_sdk/graph/wire_tokens.py
# SPDX-License-Identifier: Apache-2.0
"""
Wire field names for serialized star graphs.

These names are the stable contract shared with the encode side and with
whatever parser turns raw bytes into the nested record this package reads.
"""

from __future__ import annotations

ID = "id"
LABEL = "label"
PROPERTIES = "properties"
VALUE = "value"

# Direction-keyed edge sections on a vertex record.
OUT_E = "outE"
IN_E = "inE"

# Remote endpoint id inside an outE / inE edge record.
IN = "in"
OUT = "out"


__all__ = [
    "ID",
    "LABEL",
    "PROPERTIES",
    "VALUE",
    "OUT_E",
    "IN_E",
    "IN",
    "OUT",
]
