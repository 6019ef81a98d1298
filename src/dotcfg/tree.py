"""Dot-path traversal over a decoded configuration tree."""

from __future__ import annotations

from typing import Any

from dotcfg.errors import KeyNotFoundError, NotAnObjectError
from dotcfg.types import Value

__all__ = ["SEPARATOR", "flatten", "walk", "snapshot"]

SEPARATOR = "."


def flatten(tree: dict[str, Value]) -> dict[str, Value]:
    """Map every non-object leaf of ``tree`` to its dot-joined path.

    Arrays are leaves: their elements are not addressable by path. Keys
    that contain the separator cannot be reached by :func:`walk` either,
    so they (and everything below them) are left out of the index.
    """
    dst: dict[str, Value] = {}
    stack: list[tuple[list[str], dict[str, Value]]] = [([], tree)]
    while stack:
        segments, node = stack.pop()
        for key, value in node.items():
            if SEPARATOR in key:
                continue
            path = segments + [key]
            if isinstance(value, dict):
                stack.append((path, value))
            else:
                dst[SEPARATOR.join(path)] = value
    return dst


def walk(tree: dict[str, Value], path: str) -> Value:
    """Resolve ``path`` segment by segment against ``tree``.

    Returns whatever node the path lands on, objects included.

    Raises:
        KeyNotFoundError: A segment is absent from its parent object.
        NotAnObjectError: A non-final segment resolved to a non-object.
    """
    segments = path.split(SEPARATOR)
    node: Any = tree
    consumed: list[str] = []
    for segment in segments:
        if not isinstance(node, dict):
            raise NotAnObjectError(path=path, prefix=SEPARATOR.join(consumed))
        if segment not in node:
            raise KeyNotFoundError(path=path, prefix=SEPARATOR.join(consumed), segment=segment)
        node = node[segment]
        consumed.append(segment)
    return node


def snapshot(value: Value) -> Value:
    """Deep copy of a subtree so callers cannot mutate store state.

    Only dicts and lists are copied; leaves, including :class:`Number`,
    are immutable and shared.
    """
    if not isinstance(value, (dict, list)):
        return value
    root: Any = {} if isinstance(value, dict) else [None] * len(value)
    stack: list[tuple[Any, Any]] = [(value, root)]
    while stack:
        src, dst = stack.pop()
        items = src.items() if isinstance(src, dict) else enumerate(src)
        for key, item in items:
            if isinstance(item, dict):
                child: Any = {}
                stack.append((item, child))
            elif isinstance(item, list):
                child = [None] * len(item)
                stack.append((item, child))
            else:
                child = item
            dst[key] = child
    return root
