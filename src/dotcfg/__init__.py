"""dotcfg - Typed dot-path access to JSON-with-comments configuration."""

from __future__ import annotations

# Core
from dotcfg.store import ConfigStore
from dotcfg.defaults import DefaultsRegistry
from dotcfg.types import Number

# Settings
from dotcfg.config import ErrorPolicy, LookupStrategy, StoreSettings

# JSON with comments
from dotcfg.jsonc import strip_comments

# Errors
from dotcfg.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigStoreError,
    ErrorCodes,
    InvalidDefaultError,
    KeyNotFoundError,
    LookupFault,
    NotAnObjectError,
    NumberParseError,
    PathResolutionError,
    SettingsError,
    TypeCastError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigStore",
    "DefaultsRegistry",
    "Number",
    # Settings
    "StoreSettings",
    "ErrorPolicy",
    "LookupStrategy",
    # JSON with comments
    "strip_comments",
    # Errors
    "ErrorCodes",
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
]
