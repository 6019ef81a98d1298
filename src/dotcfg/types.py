"""Value types shared by the parser, the defaults registry and the getters."""

from __future__ import annotations

import json
from typing import Any, Union

__all__ = ["Number", "Value", "format_literal"]


class Number:
    """A JSON number kept as its literal decimal text.

    Conversion to a machine type only happens when a typed getter asks for
    one, so digits beyond float64 or int64 precision are never lost before
    that point.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str) or not text:
            raise ValueError(f"Number text must be a non-empty string, got {text!r}")
        self._text = text

    @property
    def text(self) -> str:
        """The literal decimal text."""
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Number({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Number, self._text))

    # immutable
    def __copy__(self) -> Number:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Number:
        return self


Value = Union[str, bool, Number, None, list, dict]


def _encode(value: Any) -> str:
    if isinstance(value, dict):
        items = ",".join(f"{json.dumps(str(k))}:{_encode(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(v) for v in value) + "]"
    if isinstance(value, str):
        return json.dumps(value)
    return format_literal(value)


def format_literal(value: Any) -> str:
    """Render a value the way it would be spelled in JSON, strings unquoted."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Number):
        return value.text
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return _encode(value)
    return str(value)


