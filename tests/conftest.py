"""Shared test fixtures for the dotcfg test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from dotcfg.config import ErrorPolicy, LookupStrategy, StoreSettings
from dotcfg.store import ConfigStore


@pytest.fixture(params=[LookupStrategy.FLATTEN, LookupStrategy.WALK], ids=["flatten", "walk"])
def store(request: pytest.FixtureRequest) -> ConfigStore:
    """A raising store, once per lookup strategy."""
    return ConfigStore(settings=StoreSettings(lookup_strategy=request.param))


@pytest.fixture
def zero_store() -> ConfigStore:
    """A store that downgrades lookup faults to zero values."""
    return ConfigStore(settings=StoreSettings(error_policy=ErrorPolicy.ZERO))


@pytest.fixture
def load(store: ConfigStore) -> Callable[[str], ConfigStore]:
    """Parse a document into ``store`` and return it."""

    def _load(text: str) -> ConfigStore:
        store.parse_config(text)
        return store

    return _load
