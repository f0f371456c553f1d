"""End-to-end tests for document-like stores built on the metadata layer."""

import json
from types import SimpleNamespace

from tests.fakes import Article, Profile
from toolbag.meta import MetadataCollection, MetadataStore
from toolbag.utils import arrays, text
from toolbag.utils.codec import JsonCodec


def test_mapping_then_json_import_overrides():
    """Later imports win for shared keys and keep the rest."""
    store = MetadataStore()

    store.import_mapping({"title": "Hello", "views": 3})
    store.import_json('{"views": 4, "draft": true}')

    assert store.get_attribute("title") == "Hello"
    assert store.get_attribute("views") == 4
    assert store.get_attribute("draft") is True


def test_collection_sees_direct_entry_replacement():
    """A collection follows its entry even when replaced behind its back."""
    store = MetadataStore()
    store.set_attribute("tags", [])
    tags = MetadataCollection("tags", store)

    assert tags.count() == 0

    store.entries["tags"] = ["a", "b"]

    assert tags.count() == 2


def test_article_lifecycle():
    """Properties, collections and exports work together on a subclass."""
    article = Article()
    article.import_json('{"title": "Perché l\'è così?", "tags": ["python", "json"]}')

    assert article.title == "Perché l'è così?"
    assert list(article.tags) == ["python", "json"]
    assert text.slug(article.title) == "perche-l-e-cosi"

    article.title = "Updated"
    article.import_record(Profile(name="Ada", email="ada@example.com"))

    exported = json.loads(article.export_json())
    assert exported == {
        "tags": ["python", "json"],
        "title": "Updated",
        "name": "Ada",
        "email": "ada@example.com",
        "age": None,
    }

    article.reset_attributes()

    assert article.has_property("title") is False
    assert article.tags.is_empty() is True


def test_records_from_json_import_as_attributes():
    """Objects decoded as records can be imported field by field."""
    record = arrays.from_json('{"name": "Ada", "active": true}', assoc=False)
    store = MetadataStore()

    store.import_record(record)

    assert isinstance(record, SimpleNamespace)
    assert store.export_mapping() == {"name": "Ada", "active": True}


def test_default_codec_follows_environment(monkeypatch):
    """Stores without their own codec use the configured default."""
    monkeypatch.setenv("TOOLBAG_JSON_ENSURE_ASCII", "true")
    store = MetadataStore()
    store.set_attribute("city", "Zürich")

    assert store.export_json() == '{"city": "Z\\u00fcrich"}'


def test_store_codec_overrides_default(monkeypatch):
    """A codec passed to the store takes precedence over configuration."""
    monkeypatch.setenv("TOOLBAG_JSON_ENSURE_ASCII", "true")
    store = MetadataStore(codec=JsonCodec())
    store.set_attribute("city", "Zürich")

    assert store.export_json() == '{"city": "Zürich"}'
