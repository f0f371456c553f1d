"""Read-only named collections carved out of a metadata store."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from loguru import logger

from ..core.exceptions import ImmutableCollectionError, OutOfRangeError
from .properties import PropertyAccessMixin
from .store import MetadataStore


class MetadataCollection(PropertyAccessMixin):
    """A bounded, read-only view over one entry of a metadata store.

    The collection does not copy anything: it keeps a reference to the
    store's attribute mapping and reads the bound entry on every call, so
    changes made through the store are visible immediately. Positional
    mutation is refused; restructure the entry through the store, or empty it
    with :meth:`reset`. A collection must not outlive its store.

    Example:
        class Article(MetadataStore):
            def __init__(self):
                super().__init__()
                self._tags = MetadataCollection("tags", self)

        article = Article()
        article.set_attribute("tags", ["python", "json"])
        len(article._tags)  # 2
        article._tags[0]  # "python"
        article._tags[0] = "rust"  # ImmutableCollectionError
    """

    def __init__(self, name: str, store: MetadataStore | MutableMapping[str, Any]):
        """Bind the collection to the entry ``name``.

        The entry is created as an empty list when absent.

        Args:
            name: Name of the store entry exposed by this collection.
            store: The owning store, or its attribute mapping.
        """
        self._name = name
        self._entries = store.entries if isinstance(store, MetadataStore) else store
        if name not in self._entries:
            self._entries[name] = []

    @property
    def name(self) -> str:
        """Name of the bound entry."""
        return self._name

    def _bound(self) -> Any:
        # The store may have dropped the entry (remove/reset); restore it empty
        return self._entries.setdefault(self._name, [])

    def reset(self) -> None:
        """Remove all items, replacing the bound entry with an empty list."""
        logger.debug(f"Resetting collection {self._name!r}")
        self._entries[self._name] = []

    def as_sequence(self) -> Any:
        """Return the bound entry itself (a view, not a copy)."""
        return self._bound()

    def count(self) -> int:
        """Number of items in the collection."""
        return len(self._bound())

    def is_empty(self) -> bool:
        """True if the collection has no items."""
        return self.count() == 0

    def has(self, index: Any) -> bool:
        """Check whether ``index`` is a valid position (or key) in the collection."""
        items = self._bound()
        if isinstance(items, Mapping):
            return index in items
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(items)

    def get(self, index: Any) -> Any:
        """Return the item at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is not a valid position.
        """
        if not self.has(index):
            raise OutOfRangeError(
                f"Index {index!r} is out of range for collection {self._name!r}"
            )
        return self._bound()[index]

    def set_at(self, index: Any, value: Any) -> None:
        """Always fails: the collection cannot be changed by position."""
        raise ImmutableCollectionError()

    def remove_at(self, index: Any) -> None:
        """Always fails: the collection cannot be changed by position."""
        raise ImmutableCollectionError()

    def __iter__(self) -> Iterator[Any]:
        items = self._bound()
        if isinstance(items, Mapping):
            yield from items.values()
        else:
            yield from items

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: Any) -> Any:
        return self.get(index)

    def __setitem__(self, index: Any, value: Any) -> None:
        self.set_at(index, value)

    def __delitem__(self, index: Any) -> None:
        self.remove_at(index)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}: {self.count()} items>"
