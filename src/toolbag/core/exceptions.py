"""Custom exceptions for toolbag.

ToolBagError (base, Exception)
├── MalformedInputError(ToolBagError, ValueError)       ← JSON decode/encode failures
├── InvalidArgumentError(ToolBagError, TypeError)       ← wrong shape for a bulk import
├── MissingAccessorError(ToolBagError, AttributeError)  ← property without accessor
├── OutOfRangeError(ToolBagError, IndexError)           ← bad collection index
└── ImmutableCollectionError(ToolBagError, TypeError)   ← positional mutation attempt

The builtin bases keep ``except ValueError`` / ``except IndexError`` blocks and
``hasattr()`` working as callers expect.
"""

from __future__ import annotations

from .types import JsonErrorKind


class ToolBagError(Exception):
    """Base exception for all toolbag errors."""

    pass


class MalformedInputError(ToolBagError, ValueError):
    """JSON could not be decoded or encoded."""

    def __init__(self, kind: JsonErrorKind, detail: str | None = None):
        """Initialize exception with the failure kind.

        Args:
            kind: Classification of the codec failure.
            detail: Underlying decoder/encoder diagnostic, if any.
        """
        self.kind = kind
        self.detail = detail
        message = kind.message
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidArgumentError(ToolBagError, TypeError):
    """A plain sequence was supplied where a key/value mapping is required."""

    pass


class MissingAccessorError(ToolBagError, AttributeError):
    """No accessor method backs the requested property."""

    def __init__(self, property_name: str, method_name: str):
        self.property_name = property_name
        self.method_name = method_name
        super().__init__(
            f"Method {method_name} is not implemented for property {property_name}."
        )


class OutOfRangeError(ToolBagError, IndexError):
    """Indexed lookup into a collection used an invalid position."""

    pass


class ImmutableCollectionError(ToolBagError, TypeError):
    """Structural mutation attempted on a read-only collection."""

    def __init__(self, message: str = "Collection is immutable and cannot be changed."):
        super().__init__(message)
