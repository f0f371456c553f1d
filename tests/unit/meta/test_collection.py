"""Tests for MetadataCollection."""

import pytest

from toolbag.core.exceptions import ImmutableCollectionError, OutOfRangeError
from toolbag.meta import MetadataCollection, MetadataStore


@pytest.fixture
def tags(store: MetadataStore) -> MetadataCollection:
    """Provide a collection bound to the store's 'tags' entry."""
    return MetadataCollection("tags", store)


class TestConstruction:
    """Tests for binding a collection to a store entry."""

    def test_fresh_collection_is_empty(self, store: MetadataStore, tags: MetadataCollection):
        """Binding to an absent entry creates it empty."""
        assert tags.count() == 0
        assert tags.is_empty() is True
        assert store.get_attribute("tags") == []

    def test_existing_entry_is_kept(self, store: MetadataStore):
        """Binding to an existing entry exposes its contents."""
        store.set_attribute("tags", ["python", "json"])

        tags = MetadataCollection("tags", store)

        assert tags.count() == 2
        assert list(tags) == ["python", "json"]

    def test_bind_to_plain_mapping(self):
        """A plain attribute mapping can be used instead of a store."""
        entries: dict = {}

        tags = MetadataCollection("tags", entries)

        assert entries == {"tags": []}
        assert tags.name == "tags"


class TestLiveView:
    """Tests for aliasing between the collection and its store."""

    def test_store_replacement_is_visible(self, store: MetadataStore):
        """Replacing the entry through the store changes the collection."""
        store.set_attribute("tags", [])
        tags = MetadataCollection("tags", store)
        assert tags.count() == 0

        store.entries["tags"] = ["a", "b"]

        assert tags.count() == 2
        assert tags.is_empty() is False

    def test_reset_empties_store_entry(self, store: MetadataStore, tags: MetadataCollection):
        """Reset on the collection empties the bound store entry."""
        store.set_attribute("tags", ["a", "b", "c"])

        tags.reset()

        assert tags.count() == 0
        assert store.entries["tags"] == []

    def test_reset_detaches_old_sequence(self, store: MetadataStore, tags: MetadataCollection):
        """Previously obtained sequences are stale after reset."""
        store.set_attribute("tags", ["a"])
        before = tags.as_sequence()

        tags.reset()

        assert before == ["a"]
        assert tags.as_sequence() is not before

    def test_as_sequence_is_a_view(self, store: MetadataStore, tags: MetadataCollection):
        """as_sequence returns the entry itself, not a copy."""
        assert tags.as_sequence() is store.entries["tags"]

    def test_store_reset_reads_as_empty(self, store: MetadataStore, tags: MetadataCollection):
        """After the store is reset the collection is empty and the entry restored."""
        store.set_attribute("tags", ["a"])

        store.reset_attributes()

        assert tags.count() == 0
        assert store.entries["tags"] == []

    def test_removed_entry_reads_as_empty(self, store: MetadataStore, tags: MetadataCollection):
        """Removing the entry through the store empties the collection."""
        store.set_attribute("tags", ["a"])

        store.remove_attribute("tags")

        assert tags.is_empty() is True


class TestIndexing:
    """Tests for read access by position."""

    @pytest.fixture(autouse=True)
    def _populate(self, store: MetadataStore, tags: MetadataCollection):
        store.set_attribute("tags", ["python", "json", "yaml"])

    def test_has(self, tags: MetadataCollection):
        """Only non-negative positions below count are valid."""
        assert tags.has(0) is True
        assert tags.has(2) is True
        assert tags.has(3) is False
        assert tags.has(-1) is False
        assert tags.has("0") is False
        assert tags.has(True) is False

    def test_get(self, tags: MetadataCollection):
        """get and subscription return the element at the position."""
        assert tags.get(1) == "json"
        assert tags[2] == "yaml"

    @pytest.mark.parametrize("index", [3, 100, -1])
    def test_get_out_of_range(self, tags: MetadataCollection, index: int):
        """Invalid positions raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            tags.get(index)

    def test_out_of_range_is_index_error(self, tags: MetadataCollection):
        """OutOfRangeError should be catchable as IndexError."""
        with pytest.raises(IndexError):
            tags[10]

    def test_iteration_is_restartable(self, tags: MetadataCollection):
        """Each iteration starts from the beginning."""
        assert list(tags) == ["python", "json", "yaml"]
        assert list(tags) == ["python", "json", "yaml"]

    def test_len(self, tags: MetadataCollection):
        """len() matches count()."""
        assert len(tags) == tags.count() == 3

    def test_repr(self, tags: MetadataCollection):
        """Repr shows name and size."""
        assert repr(tags) == "<MetadataCollection 'tags': 3 items>"


class TestMappingEntry:
    """Tests for a collection bound to a mapping-valued entry."""

    def test_keys_index_the_collection(self, store: MetadataStore):
        """Mapping entries are indexed by key and iterate over values."""
        store.set_attribute("emails", {"ada@example.com": True, "bob@example.com": False})
        emails = MetadataCollection("emails", store)

        assert emails.count() == 2
        assert emails.has("ada@example.com") is True
        assert emails.get("bob@example.com") is False
        assert list(emails) == [True, False]

        with pytest.raises(OutOfRangeError):
            emails.get("eve@example.com")


class TestImmutability:
    """Tests for refused positional mutation."""

    def test_set_at_always_fails(self, tags: MetadataCollection):
        """set_at fails even on an empty collection."""
        with pytest.raises(ImmutableCollectionError):
            tags.set_at(0, "x")

    def test_remove_at_always_fails(self, store: MetadataStore, tags: MetadataCollection):
        """remove_at fails and leaves the entry untouched."""
        store.set_attribute("tags", ["a"])

        with pytest.raises(ImmutableCollectionError):
            tags.remove_at(0)

        assert store.entries["tags"] == ["a"]

    def test_subscript_assignment_fails(self, store: MetadataStore, tags: MetadataCollection):
        """Item assignment and deletion are refused."""
        store.set_attribute("tags", ["a"])

        with pytest.raises(ImmutableCollectionError):
            tags[0] = "b"
        with pytest.raises(ImmutableCollectionError):
            del tags[0]

        assert list(tags) == ["a"]

    def test_immutable_message(self, tags: MetadataCollection):
        """The error explains the collection cannot change."""
        with pytest.raises(TypeError, match="Collection is immutable and cannot be changed."):
            tags.set_at(0, "x")
