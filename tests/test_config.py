"""Tests for StoreSettings."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from dotcfg.config import ErrorPolicy, LookupStrategy, StoreSettings
from dotcfg.errors import ConfigNotFoundError, SettingsError


class TestStoreSettings:
    def test_defaults(self) -> None:
        settings = StoreSettings()
        assert settings.error_policy is ErrorPolicy.RAISE
        assert settings.lookup_strategy is LookupStrategy.FLATTEN

    def test_from_dict_accepts_strings(self) -> None:
        settings = StoreSettings.from_dict({"error_policy": "zero", "lookup_strategy": "walk"})
        assert settings.error_policy is ErrorPolicy.ZERO
        assert settings.lookup_strategy is LookupStrategy.WALK

    def test_from_dict_rejects_unknown_key(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            StoreSettings.from_dict({"separator": "/"})
        assert exc_info.value.code == "SETTINGS_INVALID"
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_from_dict_rejects_bad_value(self) -> None:
        with pytest.raises(SettingsError):
            StoreSettings.from_dict({"error_policy": "panic"})

    def test_frozen(self) -> None:
        settings = StoreSettings()
        with pytest.raises(ValidationError):
            settings.error_policy = ErrorPolicy.ZERO  # type: ignore[misc]


class TestFromYaml:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "store.yaml"
        path.write_text(
            textwrap.dedent(
                """\
                error_policy: zero
                lookup_strategy: walk
                """
            )
        )
        settings = StoreSettings.from_yaml(str(path))
        assert settings.error_policy is ErrorPolicy.ZERO
        assert settings.lookup_strategy is LookupStrategy.WALK

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert StoreSettings.from_yaml(str(path)) == StoreSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            StoreSettings.from_yaml(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("{{invalid: yaml: ---")
        with pytest.raises(SettingsError, match="Invalid YAML"):
            StoreSettings.from_yaml(str(path))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- raise\n- walk\n")
        with pytest.raises(SettingsError, match="must be a mapping"):
            StoreSettings.from_yaml(str(path))
