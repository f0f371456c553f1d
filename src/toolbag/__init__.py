"""toolbag - metadata storage and small utility helpers."""

from .core.exceptions import (
    ImmutableCollectionError,
    InvalidArgumentError,
    MalformedInputError,
    MissingAccessorError,
    OutOfRangeError,
    ToolBagError,
)
from .meta import MetadataCollection, MetadataStore, PropertyAccessMixin

__version__ = "1.0.0"

__all__ = [
    "MetadataCollection",
    "MetadataStore",
    "PropertyAccessMixin",
    "ToolBagError",
    "MalformedInputError",
    "InvalidArgumentError",
    "MissingAccessorError",
    "OutOfRangeError",
    "ImmutableCollectionError",
]
