"""Schema-less metadata storage.

:class:`MetadataStore` holds an ordered set of named attributes and imports
or exports them in bulk. Document-like types extend it and expose selected
attributes as properties (see :mod:`toolbag.meta.properties`) or as
read-only sub-collections (see :mod:`toolbag.meta.collection`).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from loguru import logger

from ..core.exceptions import InvalidArgumentError
from ..utils.arrays import is_associative
from ..utils.codec import JsonCodec, default_codec
from .properties import PropertyAccessMixin


class MetadataStore(PropertyAccessMixin):
    """Ordered key/value attribute store.

    Imports merge at the top level only: an incoming value replaces the
    existing one of the same name, nested mappings included.

    Example:
        store = MetadataStore()
        store.import_mapping({"title": "Hello", "views": 3})
        store.import_json('{"views": 4, "draft": true}')
        store.get_attribute("views")  # 4
        store.export_json()  # '{"title": "Hello", "views": 4, "draft": true}'
    """

    def __init__(self, codec: JsonCodec | None = None):
        """Initialize an empty store.

        Args:
            codec: JSON codec for import/export (default: the process-wide
                codec built from configuration).
        """
        self._entries: dict[str, Any] = {}
        self._codec = codec

    @property
    def entries(self) -> dict[str, Any]:
        """The live attribute mapping."""
        return self._entries

    @property
    def codec(self) -> JsonCodec:
        """JSON codec used by ``import_json`` and ``export_json``."""
        return self._codec or default_codec()

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get an attribute value.

        Args:
            name: Attribute name.
            default: Returned when the attribute is not present.

        Returns:
            The stored value (which may itself be None), or ``default``.
        """
        return self._entries.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if the attribute exists, whatever its value."""
        return name in self._entries

    def set_attribute(
        self,
        name: str,
        value: Any,
        override: bool = True,
        allow_null: bool = True,
    ) -> None:
        """Set an attribute value.

        Args:
            name: Attribute name.
            value: Attribute value.
            override: When False, an existing attribute is left untouched.
            allow_null: When False, a None value is ignored.
        """
        if value is None and not allow_null:
            return

        if not override and name in self._entries:
            return

        self._entries[name] = value

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute if present."""
        self._entries.pop(name, None)

    def reset_attributes(self) -> None:
        """Remove all attributes.

        The mapping is emptied in place, so collections bound to this store
        keep observing it.
        """
        logger.debug(f"Resetting {len(self._entries)} attributes")
        self._entries.clear()

    def import_json(self, json_text: str | bytes) -> None:
        """Merge the attributes of a JSON object.

        Args:
            json_text: JSON object text.

        Raises:
            MalformedInputError: If the text cannot be decoded.
            InvalidArgumentError: If the text decodes to something other
                than an object.
        """
        data = self.codec.decode(json_text)
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                f"JSON must decode to an object, not {type(data).__name__}"
            )
        self._merge(data, "json")

    def import_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Merge the entries of a key/value mapping.

        Raises:
            InvalidArgumentError: If ``mapping`` is a plain sequence or a
                mapping keyed by consecutive positions.
        """
        if not is_associative(mapping):
            raise InvalidArgumentError("mapping must be an associative key/value mapping.")
        self._merge(mapping, "mapping")

    def import_record(self, record: Any) -> None:
        """Merge the public fields of a plain record.

        Dataclass instances, named tuples and plain objects (such as
        ``types.SimpleNamespace``) are supported.

        Raises:
            InvalidArgumentError: If ``record`` has no named fields.
        """
        self._merge(_record_fields(record), "record")

    def export_json(self) -> str:
        """Return the attributes as a JSON object.

        Raises:
            MalformedInputError: If the attributes cannot be encoded.
        """
        return self.codec.encode(self._entries)

    def export_mapping(self) -> dict[str, Any]:
        """Return the attributes mapping.

        This is the live mapping, not a copy; callers should not change its
        structure.
        """
        return self._entries

    def _merge(self, data: Mapping[str, Any], source: str) -> None:
        self._entries.update(data)
        logger.debug(f"Imported {len(data)} attributes from {source}")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {len(self._entries)} attributes>"


def _record_fields(record: Any) -> dict[str, Any]:
    """Public named fields of a record."""
    if isinstance(record, (Mapping, str, bytes, bytearray)) or isinstance(record, type):
        raise InvalidArgumentError(
            f"record must be an object with named fields, not {type(record).__name__}"
        )

    if dataclasses.is_dataclass(record):
        items = ((f.name, getattr(record, f.name)) for f in dataclasses.fields(record))
    elif isinstance(record, tuple) and hasattr(record, "_fields"):
        items = zip(record._fields, record)
    elif hasattr(record, "__dict__"):
        items = vars(record).items()
    else:
        raise InvalidArgumentError(
            f"record must be an object with named fields, not {type(record).__name__}"
        )

    return {name: value for name, value in items if not name.startswith("_")}
