"""Process-wide store with module-level accessors.

Example::

    from dotcfg import shared

    shared.set_default("http_server.port", 80)
    shared.parse_config(open("server.jsonc", "rb"))
    port = shared.get_int("http_server.port")
"""

from __future__ import annotations

import threading
from typing import Any

from dotcfg.config import StoreSettings
from dotcfg.store import ConfigStore, Source

__all__ = [
    "get_store",
    "reset_store",
    "parse_config",
    "load_config",
    "set_default",
    "get_string",
    "get_bool",
    "get_int",
    "get_int32",
    "get_int64",
    "get_uint",
    "get_uint32",
    "get_uint64",
    "get_float64",
    "get_any",
    "get_map",
]

_store_lock = threading.Lock()
_store = ConfigStore()


def get_store() -> ConfigStore:
    """The store behind the module-level functions."""
    with _store_lock:
        return _store


def reset_store(settings: StoreSettings | None = None) -> ConfigStore:
    """Replace the shared store with a fresh one, dropping its tree and defaults."""
    global _store
    with _store_lock:
        _store = ConfigStore(settings=settings)
        return _store


def parse_config(source: Source) -> None:
    get_store().parse_config(source)


def load_config(path: str) -> None:
    get_store().load_config(path)


def set_default(path: str, value: Any) -> None:
    get_store().set_default(path, value)


def get_string(path: str) -> str:
    return get_store().get_string(path)


def get_bool(path: str) -> bool:
    return get_store().get_bool(path)


def get_int(path: str) -> int:
    return get_store().get_int(path)


def get_int32(path: str) -> int:
    return get_store().get_int32(path)


def get_int64(path: str) -> int:
    return get_store().get_int64(path)


def get_uint(path: str) -> int:
    return get_store().get_uint(path)


def get_uint32(path: str) -> int:
    return get_store().get_uint32(path)


def get_uint64(path: str) -> int:
    return get_store().get_uint64(path)


def get_float64(path: str) -> float:
    return get_store().get_float64(path)


def get_any(path: str) -> Any:
    return get_store().get_any(path)


def get_map(path: str) -> dict[str, Any] | None:
    return get_store().get_map(path)
