"""Tests for the dotcfg public API surface.

Verifies that all expected names are importable from the top-level
``dotcfg`` package and that ``__all__`` is comprehensive.
"""

import dotcfg


class TestPublicAPIImports:
    def test_store_importable(self):
        from dotcfg import ConfigStore

        assert ConfigStore is not None

    def test_number_importable(self):
        from dotcfg import Number

        assert Number("1").text == "1"

    def test_settings_importable(self):
        from dotcfg import ErrorPolicy, LookupStrategy, StoreSettings

        assert StoreSettings().error_policy is ErrorPolicy.RAISE
        assert LookupStrategy("walk") is LookupStrategy.WALK

    def test_strip_comments_importable(self):
        from dotcfg import strip_comments

        assert strip_comments("{} // x") == "{} "

    def test_errors_importable(self):
        from dotcfg import ConfigStoreError, KeyNotFoundError, TypeCastError

        assert issubclass(KeyNotFoundError, ConfigStoreError)
        assert issubclass(TypeCastError, ConfigStoreError)


class TestAll:
    def test_all_names_resolve(self):
        for name in dotcfg.__all__:
            assert hasattr(dotcfg, name), name

    def test_version(self):
        assert isinstance(dotcfg.__version__, str)
