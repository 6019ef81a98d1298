"""Tests for the dotcfg error hierarchy."""

from __future__ import annotations

import pytest

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
    TypeCastError,
)


class TestConfigStoreError:
    def test_str_includes_code(self) -> None:
        err = ConfigStoreError(code="X", message="boom")
        assert str(err) == "[X] boom"
        assert err.details == {}
        assert err.cause is None

    def test_cause_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigParseError("bad", cause=cause)
        assert err.cause is cause


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            KeyNotFoundError(path="a.b", prefix="a", segment="b"),
            NotAnObjectError(path="a.b.c", prefix="a.b"),
            TypeCastError(path="a", literal="true", expected="string"),
            NumberParseError(path="a", literal="1.5", kind="int"),
        ],
    )
    def test_lookup_faults(self, err: LookupFault) -> None:
        assert isinstance(err, LookupFault)
        assert isinstance(err, ConfigStoreError)

    def test_path_resolution_faults(self) -> None:
        assert issubclass(KeyNotFoundError, PathResolutionError)
        assert issubclass(NotAnObjectError, PathResolutionError)
        assert not issubclass(TypeCastError, PathResolutionError)

    def test_parse_time_faults_are_not_lookup_faults(self) -> None:
        for cls in (ConfigReadError, ConfigParseError, ConfigNotFoundError, InvalidDefaultError):
            assert not issubclass(cls, LookupFault)


class TestMessages:
    def test_key_not_found_at_root(self) -> None:
        err = KeyNotFoundError(path="x", prefix="", segment="x")
        assert err.message == "no such key 'x'"
        assert err.code == ErrorCodes.KEY_NOT_FOUND

    def test_type_cast(self) -> None:
        err = TypeCastError(path="p", literal="true", expected="string")
        assert err.message == "'true' is not a string"
        assert err.literal == "true"
        assert err.expected == "string"

    def test_number_parse(self) -> None:
        err = NumberParseError(path="p", literal="300", kind="uint32")
        assert err.message == "cannot parse '300' as an uint32"
        assert err.code == ErrorCodes.NUMBER_PARSE_ERROR

    def test_read_error(self) -> None:
        assert ConfigReadError("eof").message == "fail to read configuration: eof"

    def test_not_found(self) -> None:
        err = ConfigNotFoundError(config_path="/x.jsonc")
        assert err.details == {"config_path": "/x.jsonc"}


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().KEY_NOT_FOUND = "other"
