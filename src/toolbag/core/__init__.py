"""Core types, configuration and exceptions for toolbag."""

from .config import Config, JsonConfig, TimeConfig
from .exceptions import (
    ImmutableCollectionError,
    InvalidArgumentError,
    MalformedInputError,
    MissingAccessorError,
    OutOfRangeError,
    ToolBagError,
)
from .types import JsonErrorKind

__all__ = [
    "Config",
    "JsonConfig",
    "TimeConfig",
    "ToolBagError",
    "MalformedInputError",
    "InvalidArgumentError",
    "MissingAccessorError",
    "OutOfRangeError",
    "ImmutableCollectionError",
    "JsonErrorKind",
]
