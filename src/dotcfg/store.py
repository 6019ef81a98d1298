"""ConfigStore: typed dot-path access to a JSON-with-comments document."""

from __future__ import annotations

import logging
import os
import threading
from typing import IO, Any, Union

from dotcfg.casting import Kind, cast, zero_value
from dotcfg.config import ErrorPolicy, LookupStrategy, StoreSettings
from dotcfg.defaults import DefaultsRegistry
from dotcfg.errors import (
    ConfigNotFoundError,
    ConfigReadError,
    LookupFault,
    PathResolutionError,
    TypeCastError,
)
from dotcfg.jsonc import decode, strip_comments
from dotcfg.tree import flatten, snapshot, walk

__all__ = ["ConfigStore", "Source"]

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, str, IO[bytes], IO[str]]

_UNRESOLVED = object()


def _read_source(source: Source) -> bytes | str:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str):
        return source
    read = getattr(source, "read", None)
    if read is None:
        raise TypeError(f"Cannot read configuration from {type(source).__name__}")
    try:
        data = read()
    except OSError as e:
        raise ConfigReadError(str(e), cause=e) from e
    if isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    return data


class ConfigStore:
    """Typed, dot-path view over one parsed configuration document.

    A store holds the most recently parsed tree (replaced wholesale by each
    successful parse) and a registry of defaults that outlives re-parsing.
    Getters resolve a path against the tree, fall back to the default
    registered for the identical path, then cast the value to the requested
    kind. Numbers stay as their literal text until that cast.

    Lookup faults (missing key, non-object intermediate, wrong kind,
    number out of range) follow the store's :class:`ErrorPolicy`: raised
    under ``RAISE``, logged and replaced by the kind's zero value under
    ``ZERO``. ``get_map`` returns ``None`` for an unresolved path under
    either policy.

    Thread safety:
        Internally synchronized. A parse builds the new tree outside the
        lock and swaps it in atomically; getters always see either the old
        or the new tree, never a mix.
    """

    def __init__(
        self,
        settings: StoreSettings | None = None,
        defaults: DefaultsRegistry | None = None,
    ) -> None:
        self._settings = settings if settings is not None else StoreSettings()
        self._defaults = defaults if defaults is not None else DefaultsRegistry()
        self._lock = threading.RLock()
        # (tree, flattened index); the index is empty under LookupStrategy.WALK
        self._state: tuple[dict[str, Any], dict[str, Any]] = ({}, {})

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def defaults(self) -> DefaultsRegistry:
        return self._defaults

    # === Loading ===

    def parse_config(self, source: Source) -> None:
        """Parse a JSON-with-comments document and make it the current tree.

        Args:
            source: Raw bytes, text, or a readable binary/text stream.

        Raises:
            ConfigReadError: Reading the stream failed.
            ConfigParseError: The document is not valid JSON once comments
                are stripped, or its root is not an object.

        On failure the previously loaded tree is kept.
        """
        raw = _read_source(source)
        tree = decode(strip_comments(raw))
        if self._settings.lookup_strategy is LookupStrategy.FLATTEN:
            index = flatten(tree)
        else:
            index = {}
        with self._lock:
            self._state = (tree, index)
        logger.debug("Configuration parsed: %d top-level keys, %d indexed leaves", len(tree), len(index))

    def load_config(self, path: str | os.PathLike[str]) -> None:
        """Read and parse a configuration file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the file is not valid JSON with comments.
        """
        file_path = os.fspath(path)
        if not os.path.isfile(file_path):
            raise ConfigNotFoundError(config_path=file_path)
        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ConfigReadError(f"{file_path}: {e}", cause=e) from e
        self.parse_config(data)

    def set_default(self, path: str, value: Any) -> None:
        """Register the fallback used when ``path`` is absent from the tree.

        Raises:
            InvalidDefaultError: If ``value`` is not a bool, int, float,
                Decimal, Number, str, None, list, tuple or str-keyed dict.
        """
        self._defaults.set(path, value)

    # === Introspection ===

    def has(self, path: str) -> bool:
        """Whether a scalar getter would find a value for ``path``."""
        try:
            value = self._resolve(path)
        except PathResolutionError:
            return False
        return path in self._defaults or not isinstance(value, dict)

    def keys(self) -> list[str]:
        """All leaf paths of the current tree, sorted."""
        with self._lock:
            tree, index = self._state
        if self._settings.lookup_strategy is LookupStrategy.WALK:
            index = flatten(tree)
        return sorted(index)

    # === Getters ===

    def get_string(self, path: str) -> str:
        return self._get(Kind.STRING, path)

    def get_bool(self, path: str) -> bool:
        return self._get(Kind.BOOL, path)

    def get_int(self, path: str) -> int:
        """Value at ``path`` as a signed 64-bit integer."""
        return self._get(Kind.INT, path)

    def get_int32(self, path: str) -> int:
        return self._get(Kind.INT32, path)

    def get_int64(self, path: str) -> int:
        return self._get(Kind.INT64, path)

    def get_uint(self, path: str) -> int:
        """Value at ``path`` as an unsigned 64-bit integer."""
        return self._get(Kind.UINT, path)

    def get_uint32(self, path: str) -> int:
        return self._get(Kind.UINT32, path)

    def get_uint64(self, path: str) -> int:
        return self._get(Kind.UINT64, path)

    def get_float64(self, path: str) -> float:
        """Value at ``path`` parsed from its decimal text as a float64."""
        return self._get(Kind.FLOAT64, path)

    def get_any(self, path: str) -> Any:
        """Raw leaf value at ``path``; numbers are returned as :class:`Number`."""
        return self._get(Kind.ANY, path)

    def get_map(self, path: str) -> dict[str, Any] | None:
        """Snapshot of the object at ``path``, or ``None`` if nothing is there.

        The returned dict is a deep copy; numbers inside it are
        :class:`Number`. A missing path is not a fault here: the default for
        ``path`` is used if one is registered, otherwise ``None``.
        """
        with self._lock:
            tree, _ = self._state
        try:
            node = walk(tree, path)
        except PathResolutionError:
            found, node = self._defaults.lookup(path)
            if not found:
                logger.debug("No map found for '%s'", path)
                return None
        try:
            return snapshot(cast(Kind.MAP, path, node))
        except TypeCastError as e:
            return self._handle_fault(Kind.MAP, path, e)

    # === Internals ===

    def _resolve(self, path: str) -> Any:
        with self._lock:
            tree, index = self._state

        fault: PathResolutionError | None = None
        node: Any = _UNRESOLVED
        if self._settings.lookup_strategy is LookupStrategy.FLATTEN:
            if path in index:
                return index[path]
        else:
            try:
                node = walk(tree, path)
            except PathResolutionError as e:
                fault = e
            else:
                if not isinstance(node, dict):
                    return node

        found, value = self._defaults.lookup(path)
        if found:
            return value

        if fault is not None:
            raise fault
        if node is _UNRESOLVED:
            # raises with the offending segment, or lands on an object node
            node = walk(tree, path)
        return node

    def _get(self, kind: Kind, path: str) -> Any:
        try:
            return cast(kind, path, self._resolve(path))
        except LookupFault as e:
            return self._handle_fault(kind, path, e)

    def _handle_fault(self, kind: Kind, path: str, error: LookupFault) -> Any:
        if self._settings.error_policy is ErrorPolicy.RAISE:
            raise error
        logger.warning("%s: no usable value for key '%s', using zero value instead", error.message, path)
        return zero_value(kind)
