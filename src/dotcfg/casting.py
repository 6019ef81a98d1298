"""Conversion of stored values into the shapes requested by typed getters."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any

from dotcfg.errors import NumberParseError, TypeCastError
from dotcfg.types import Number, format_literal

__all__ = ["Kind", "cast", "zero_value"]

_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED_RE = re.compile(r"[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


class Kind(str, Enum):
    """What a getter asks for."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT64 = "float64"
    ANY = "any"
    MAP = "map"


# kind -> (signed, bits)
_INTEGER_KINDS: dict[Kind, tuple[bool, int]] = {
    Kind.INT: (True, 64),
    Kind.INT32: (True, 32),
    Kind.INT64: (True, 64),
    Kind.UINT: (False, 64),
    Kind.UINT32: (False, 32),
    Kind.UINT64: (False, 64),
}

_ZERO_VALUES: dict[Kind, Any] = {
    Kind.STRING: "",
    Kind.BOOL: False,
    Kind.INT: 0,
    Kind.INT32: 0,
    Kind.INT64: 0,
    Kind.UINT: 0,
    Kind.UINT32: 0,
    Kind.UINT64: 0,
    Kind.FLOAT64: 0.0,
    Kind.ANY: None,
    Kind.MAP: None,
}


def zero_value(kind: Kind) -> Any:
    """The value a getter returns when a lookup fault is downgraded."""
    return _ZERO_VALUES[kind]


def _parse_integer(path: str, number: Number, kind: Kind) -> int:
    signed, bits = _INTEGER_KINDS[kind]
    text = number.text
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    if not pattern.fullmatch(text):
        raise NumberParseError(path=path, literal=text, kind=kind.value)
    result = int(text, 10)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= result <= high:
        raise NumberParseError(path=path, literal=text, kind=kind.value)
    return result


def _parse_float(path: str, number: Number) -> float:
    text = number.text
    if not _FLOAT_RE.fullmatch(text):
        raise NumberParseError(path=path, literal=text, kind=Kind.FLOAT64.value)
    result = float(text)
    # finite text that overflows float64
    if math.isinf(result) and "inf" not in text.lower():
        raise NumberParseError(path=path, literal=text, kind=Kind.FLOAT64.value)
    return result


def _require(path: str, value: Any, expected: type, name: str) -> Any:
    if not isinstance(value, expected):
        raise TypeCastError(path=path, literal=format_literal(value), expected=name)
    return value


def cast(kind: Kind, path: str, value: Any) -> Any:
    """Convert ``value`` (found at ``path``) into the shape ``kind`` asks for.

    Numbers are parsed from their decimal text at the requested width.
    Every other kind must match the value's dynamic type exactly.

    Raises:
        TypeCastError: The value is of the wrong kind.
        NumberParseError: The number's text does not fit the requested width.
    """
    if kind in _INTEGER_KINDS:
        number = _require(path, value, Number, "number")
        return _parse_integer(path, number, kind)
    if kind is Kind.FLOAT64:
        number = _require(path, value, Number, "number")
        return _parse_float(path, number)
    if kind is Kind.STRING:
        return _require(path, value, str, "string")
    if kind is Kind.BOOL:
        return _require(path, value, bool, "bool")
    if kind is Kind.MAP:
        return _require(path, value, dict, "map")
    # Kind.ANY: any leaf, never an object
    if isinstance(value, dict):
        raise TypeCastError(path=path, literal=format_literal(value), expected="leaf value")
    return value
