"""Metadata storage and views.

This package provides the schema-less attribute store used to back
document-like objects, the property facade over accessor methods, and
read-only named collections carved out of a store.
"""

from .collection import MetadataCollection
from .properties import PropertyAccessMixin
from .store import MetadataStore

__all__ = [
    "MetadataCollection",
    "MetadataStore",
    "PropertyAccessMixin",
]
