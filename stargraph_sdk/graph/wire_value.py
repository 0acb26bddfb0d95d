# stargraph_sdk/graph/wire_value.py
# SPDX-License-Identifier: Apache-2.0
"""
Wire values: the untyped nested record produced by the parser.

Every value is exactly one of three kinds:

    SCALAR    str | bool | None | any numbers.Number (int, float, Decimal, ...)
    SEQUENCE  list | tuple of wire values (order preserving)
    RECORD    mapping of str -> wire value (order preserving)

Anything else (bytes, sets, arbitrary objects) is not a wire value and is
rejected with TypeMismatch wherever it is classified. The helpers below all
take the dotted ``path`` of the value so errors point at the offending field.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Iterator, Mapping, Sequence, Tuple, Union

from stargraph_sdk.graph.star_graph import MissingField, TypeMismatch

Scalar = Union[str, bool, numbers.Number, None]
WireValue = Any
Record = Mapping[str, Any]

_SCALAR_TYPES = (str, bool, numbers.Number)


class WireKind(Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    RECORD = "record"


def wire_kind(value: WireValue, path: str = "") -> WireKind:
    """Classify a wire value, raising TypeMismatch for non-wire Python values."""
    if value is None or isinstance(value, _SCALAR_TYPES):
        return WireKind.SCALAR
    if isinstance(value, Mapping):
        return WireKind.RECORD
    if isinstance(value, (list, tuple)):
        return WireKind.SEQUENCE
    raise TypeMismatch(
        f"not a wire value: {type(value).__name__}",
        path=path,
        details={"expected": "scalar, sequence or record", "actual": type(value).__name__},
    )


def child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def item_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


def _mismatch(what: str, expected: WireKind, actual: WireKind, path: str) -> TypeMismatch:
    return TypeMismatch(
        f"{what} must be a {expected.value}, got {actual.value}",
        path=path,
        details={"expected": expected.value, "actual": actual.value},
    )


def expect_record(value: WireValue, path: str, what: str = "value") -> Record:
    kind = wire_kind(value, path)
    if kind is not WireKind.RECORD:
        raise _mismatch(what, WireKind.RECORD, kind, path)
    return value


def expect_sequence(value: WireValue, path: str, what: str = "value") -> Sequence[WireValue]:
    kind = wire_kind(value, path)
    if kind is not WireKind.SEQUENCE:
        raise _mismatch(what, WireKind.SEQUENCE, kind, path)
    return value


def expect_scalar(value: WireValue, path: str, what: str = "value") -> Scalar:
    kind = wire_kind(value, path)
    if kind is not WireKind.SCALAR:
        raise _mismatch(what, WireKind.SCALAR, kind, path)
    return value


def require_field(record: Record, key: str, path: str) -> WireValue:
    """Return ``record[key]`` or raise MissingField naming the full path."""
    if key not in record:
        raise MissingField(
            f"missing required field {key!r}",
            path=child_path(path, key),
            details={"field": key},
        )
    return record[key]


def iter_record(record: Record, path: str) -> Iterator[Tuple[str, str, WireValue]]:
    """
    Yield ``(key, key_path, value)`` for each entry in wire order.

    Keys must be strings.
    """
    for key, value in record.items():
        if not isinstance(key, str):
            raise TypeMismatch(
                f"record keys must be strings, got {type(key).__name__}",
                path=path,
                details={"expected": "str", "actual": type(key).__name__},
            )
        yield key, child_path(path, key), value


def iter_sequence(seq: Sequence[WireValue], path: str) -> Iterator[Tuple[int, str, WireValue]]:
    """Yield ``(index, item_path, value)`` for each item in order."""
    for idx, value in enumerate(seq):
        yield idx, item_path(path, idx), value


__all__ = [
    "Scalar",
    "WireValue",
    "Record",
    "WireKind",
    "wire_kind",
    "child_path",
    "item_path",
    "expect_record",
    "expect_sequence",
    "expect_scalar",
    "require_field",
    "iter_record",
    "iter_sequence",
]
