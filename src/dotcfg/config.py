"""Settings controlling how a ConfigStore answers lookups."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from dotcfg.errors import ConfigNotFoundError, SettingsError

__all__ = ["ErrorPolicy", "LookupStrategy", "StoreSettings"]


class ErrorPolicy(str, Enum):
    """What a getter does on a lookup fault (missing key, wrong kind, bad number)."""

    RAISE = "raise"
    ZERO = "zero"


class LookupStrategy(str, Enum):
    """How paths are resolved against the loaded tree."""

    FLATTEN = "flatten"
    WALK = "walk"


class StoreSettings(BaseModel):
    """Store-wide lookup behaviour.

    The same policy applies to every getter; there is no per-getter override.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    error_policy: ErrorPolicy = ErrorPolicy.RAISE
    lookup_strategy: LookupStrategy = LookupStrategy.FLATTEN

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoreSettings:
        """Validate settings from a plain mapping.

        Raises:
            SettingsError: If a key is unknown or a value is invalid.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid store settings: {e}", cause=e) from e

    @classmethod
    def from_yaml(cls, yaml_path: str) -> StoreSettings:
        """Load settings from a YAML file.

        An empty file yields the defaults.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            SettingsError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise SettingsError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError(f"Store settings must be a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
