"""Error hierarchy for the dotcfg configuration store."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigStoreError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigParseError",
    "SettingsError",
    "InvalidDefaultError",
    "LookupFault",
    "PathResolutionError",
    "KeyNotFoundError",
    "NotAnObjectError",
    "TypeCastError",
    "NumberParseError",
    "ErrorCodes",
]


class ConfigStoreError(Exception):
    """Base error for all dotcfg errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ConfigStoreError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigReadError(ConfigStoreError):
    """Raised when the configuration source cannot be read."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_READ_ERROR",
            message=f"fail to read configuration: {reason}",
            details={"reason": reason},
            **kwargs,
        )


class ConfigParseError(ConfigStoreError):
    """Raised when the configuration is not valid JSON once comments are stripped."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"fail to parse JSON: {reason}",
            details={"reason": reason},
            **kwargs,
        )


class SettingsError(ConfigStoreError):
    """Raised when store settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SETTINGS_INVALID", message=message, **kwargs)


class InvalidDefaultError(ConfigStoreError):
    """Raised when a default value is not one of the accepted shapes."""

    def __init__(self, path: str, value: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_DEFAULT",
            message=f"Unsupported default for '{path}': {type(value).__name__}",
            details={"path": path, "type": type(value).__name__},
            **kwargs,
        )


class LookupFault(ConfigStoreError):
    """Base class for faults raised while answering a getter."""


class PathResolutionError(LookupFault):
    """Raised when a path cannot be resolved against the tree."""

    @property
    def path(self) -> str:
        """The full path that was requested."""
        return self.details["path"]


class KeyNotFoundError(PathResolutionError):
    """Raised when a path segment is absent and no default is registered."""

    def __init__(self, path: str, prefix: str, segment: str, **kwargs: Any) -> None:
        where = f" under '{prefix}'" if prefix else ""
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"no such key '{segment}'{where}",
            details={"path": path, "prefix": prefix, "segment": segment},
            **kwargs,
        )

    @property
    def prefix(self) -> str:
        """The part of the path that resolved before the missing segment."""
        return self.details["prefix"]

    @property
    def segment(self) -> str:
        """The segment that was not found."""
        return self.details["segment"]


class NotAnObjectError(PathResolutionError):
    """Raised when an intermediate path segment resolves to a non-object."""

    def __init__(self, path: str, prefix: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_AN_OBJECT",
            message=f"'{prefix}' is not an object",
            details={"path": path, "prefix": prefix},
            **kwargs,
        )

    @property
    def prefix(self) -> str:
        """The prefix that resolved to a non-object value."""
        return self.details["prefix"]


class TypeCastError(LookupFault):
    """Raised when a value's kind does not match the getter's kind."""

    def __init__(self, path: str, literal: str, expected: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_CAST_ERROR",
            message=f"'{literal}' is not a {expected}",
            details={"path": path, "literal": literal, "expected": expected},
            **kwargs,
        )

    @property
    def literal(self) -> str:
        return self.details["literal"]

    @property
    def expected(self) -> str:
        return self.details["expected"]


class NumberParseError(LookupFault):
    """Raised when a number's text is not valid at the requested width."""

    def __init__(self, path: str, literal: str, kind: str, **kwargs: Any) -> None:
        article = "an" if kind[:1] in "aeiou" else "a"
        super().__init__(
            code="NUMBER_PARSE_ERROR",
            message=f"cannot parse '{literal}' as {article} {kind}",
            details={"path": path, "literal": literal, "kind": kind},
            **kwargs,
        )

    @property
    def literal(self) -> str:
        return self.details["literal"]

    @property
    def kind(self) -> str:
        return self.details["kind"]


class ErrorCodes:
    """All dotcfg error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            handle_missing()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_READ_ERROR = "CONFIG_READ_ERROR"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    SETTINGS_INVALID = "SETTINGS_INVALID"
    INVALID_DEFAULT = "INVALID_DEFAULT"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    TYPE_CAST_ERROR = "TYPE_CAST_ERROR"
    NUMBER_PARSE_ERROR = "NUMBER_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
