"""Registry of per-path fallback values."""

from __future__ import annotations

import logging
import math
import threading
from decimal import Decimal
from typing import Any

from dotcfg.errors import InvalidDefaultError
from dotcfg.types import Number, Value

__all__ = ["DefaultsRegistry", "normalize_default"]

logger = logging.getLogger(__name__)

_MISSING = object()


def _float_text(value: float) -> str:
    """Shortest round-trip digits laid out like printf's %g.

    Exponent form is used when the decimal exponent is below -4 or at
    least 6; the exponent has at least two digits (``1e+06``, ``1e-05``).
    Integral values carry no fractional part, so ``100.0`` is ``100``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + int(exponent)
    exp = point - 1

    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


def normalize_default(path: str, value: Any) -> Value:
    """Convert a native Python value into the form the JSON decoder produces.

    Numbers become :class:`Number` holding the text a JSON literal of the
    same value would have, so getters cannot tell a default from a parsed
    value. Lists, tuples and dicts are normalized recursively.

    Raises:
        InvalidDefaultError: If ``value`` is not one of the accepted shapes.
    """
    if value is None or isinstance(value, (str, Number)):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return Number(str(int(value)))
    if isinstance(value, float):
        return Number(_float_text(float(value)))
    if isinstance(value, Decimal):
        return Number(str(value))
    if isinstance(value, (list, tuple)):
        return [normalize_default(path, item) for item in value]
    if isinstance(value, dict):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidDefaultError(path=path, value=key)
            result[key] = normalize_default(f"{path}.{key}", item)
        return result
    raise InvalidDefaultError(path=path, value=value)


class DefaultsRegistry:
    """Path-addressed fallback values.

    Lookups are exact: a default at ``a`` never answers for ``a.b``.

    Thread safety:
        Internally synchronized.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._lock = threading.Lock()

    def set(self, path: str, value: Any) -> None:
        """Register ``value`` as the fallback for ``path``, replacing any previous one."""
        normalized = normalize_default(path, value)
        with self._lock:
            self._values[path] = normalized
        logger.debug("Default registered for '%s'", path)

    def get(self, path: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(path, default)

    def lookup(self, path: str) -> tuple[bool, Any]:
        """Return ``(found, value)`` so a registered ``None`` is distinguishable."""
        with self._lock:
            value = self._values.get(path, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value

    def snapshot(self) -> dict[str, Any]:
        """Shallow copy of all registered defaults."""
        with self._lock:
            return dict(self._values)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
