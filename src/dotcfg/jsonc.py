"""JSON-with-comments support: comment stripping and exact-number decoding.

Comments may be written as:
  * single line ( // ... ) up to the end of the line
  * multiline ( /* ... */ )

Comment-like sequences inside string literals are kept verbatim.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, overload

from dotcfg.errors import ConfigParseError
from dotcfg.types import Number

__all__ = ["strip_comments", "decode"]

logger = logging.getLogger(__name__)

_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_SLASH = ord("/")
_STAR = ord("*")
_NEWLINE = ord("\n")


class _State(Enum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


def _strip(src: bytes) -> bytes:
    out = bytearray()
    state = _State.NORMAL
    prev: int | None = None
    escaped = False

    for b in src:
        if state is _State.IN_LINE_COMMENT:
            if b == _NEWLINE:
                state = _State.NORMAL
                out.append(b)
            prev = None
            continue

        if state is _State.IN_BLOCK_COMMENT:
            if b == _SLASH and prev == _STAR:
                state = _State.NORMAL
                prev = None
            else:
                prev = b
            continue

        if state is _State.IN_STRING:
            out.append(b)
            if escaped:
                escaped = False
            elif b == _BACKSLASH:
                escaped = True
            elif b == _QUOTE:
                state = _State.NORMAL
            prev = b
            continue

        # NORMAL
        if b == _SLASH and prev == _SLASH:
            del out[-1]
            state = _State.IN_LINE_COMMENT
            prev = None
            continue
        if b == _STAR and prev == _SLASH:
            del out[-1]
            state = _State.IN_BLOCK_COMMENT
            # the opening '*' must not close the comment on a following '/'
            prev = None
            continue
        if b == _QUOTE:
            state = _State.IN_STRING
        out.append(b)
        prev = b

    if state is _State.IN_BLOCK_COMMENT:
        logger.debug("Unterminated block comment consumed the rest of the input")
    return bytes(out)


@overload
def strip_comments(src: bytes) -> bytes: ...


@overload
def strip_comments(src: str) -> str: ...


def strip_comments(src: bytes | str) -> bytes | str:
    """Remove ``//`` and ``/* */`` comments, returning strict JSON text.

    Never fails: an unterminated block comment swallows the rest of the
    input and the decoder reports the resulting malformed JSON.
    """
    if isinstance(src, str):
        return _strip(src.encode("utf-8")).decode("utf-8")
    return _strip(bytes(src))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def decode(data: bytes | str) -> dict[str, Any]:
    """Decode strict JSON into a tree, keeping numbers as exact decimal text.

    Raises:
        ConfigParseError: If the text is not JSON or its root is not an object.
    """
    try:
        tree = json.loads(
            data,
            parse_int=Number,
            parse_float=Number,
            parse_constant=_reject_constant,
        )
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise ConfigParseError(str(e), cause=e) from e

    if not isinstance(tree, dict):
        raise ConfigParseError(f"root must be an object, got {type(tree).__name__}")
    return tree
