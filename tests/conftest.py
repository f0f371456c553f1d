"""Pytest configuration and fixtures."""

import pytest

from tests.fakes import Article
from toolbag.meta import MetadataStore
from toolbag.utils.codec import JsonCodec, set_default_codec

_CONFIG_ENV_VARS = (
    "TOOLBAG_CONFIG",
    "TOOLBAG_JSON_MAX_DEPTH",
    "TOOLBAG_JSON_PARTIAL_OUTPUT",
    "TOOLBAG_JSON_ENSURE_ASCII",
    "TOOLBAG_DATE_FORMAT",
    "TOOLBAG_DATETIME_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run each test against default configuration and a fresh default codec."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    set_default_codec(None)
    yield
    set_default_codec(None)


@pytest.fixture
def store() -> MetadataStore:
    """Provide an empty MetadataStore."""
    return MetadataStore()


@pytest.fixture
def article() -> Article:
    """Provide an empty Article with a bound tags collection."""
    return Article()


@pytest.fixture
def codec() -> JsonCodec:
    """Provide a JsonCodec with default settings."""
    return JsonCodec()
