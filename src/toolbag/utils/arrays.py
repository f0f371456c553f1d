"""Helpers for mappings and sequences."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, MutableSequence, Sequence
from itertools import islice
from types import SimpleNamespace
from typing import Any

from . import text
from .codec import default_codec


def is_associative(data: Any) -> bool:
    """Check if the data is an associative (key/value) mapping.

    A mapping whose keys are exactly ``0..n-1``, in any order, is a plain list
    in disguise and is not considered associative. An empty mapping is.

    Args:
        data: Value to check.

    Returns:
        True for key/value mappings, False for sequences and everything else.
    """
    if not isinstance(data, Mapping):
        return False
    if not data:
        return True
    return set(data.keys()) != set(range(len(data)))


def to_object(data: Any) -> Any:
    """Convert nested mappings to ``SimpleNamespace`` records.

    Lists are kept as lists with their elements converted.
    """
    if isinstance(data, Mapping):
        return SimpleNamespace(**{str(k): to_object(v) for k, v in data.items()})
    if isinstance(data, list):
        return [to_object(item) for item in data]
    return data


def from_json(json_text: str | bytes, assoc: bool = True) -> Any:
    """Convert the given JSON into Python values.

    Args:
        json_text: A JSON document.
        assoc: When True, objects are returned as dicts; otherwise as
            ``SimpleNamespace`` records.

    Raises:
        MalformedInputError: If the JSON cannot be decoded.
    """
    return default_codec().decode(json_text, as_mapping=assoc)


def slice_items(data: Mapping | Sequence, number: int | None = None) -> Any:
    """Return the first ``number`` elements, keeping keys for mappings.

    Args:
        data: The original mapping or sequence.
        number: Number of elements from left to right; all when None.
    """
    if isinstance(data, Mapping):
        return dict(islice(data.items(), number))
    return list(islice(data, number))


def value(key: Hashable, data: Mapping) -> Any:
    """Return the value for ``key``, or False when the key doesn't exist."""
    if key in data:
        return data[key]
    return False


def key(key: Hashable, data: Mapping) -> Any:
    """Return ``key`` itself if present in ``data``, otherwise False."""
    if key in data:
        return key
    return False


def unversion(ids: MutableSequence[str]) -> None:
    """Strip the version suffix from every ID, in place.

    Example:
        ids = ["3e96144b::1410886811", "a1b2"]
        unversion(ids)
        # ["3e96144b", "a1b2"]
    """
    ids[:] = [text.unversion(item) for item in ids]


def merge(first: Iterable[Hashable], second: Iterable[Hashable]) -> list:
    """Merge two sequences into one without duplicate values.

    Order of first appearance is preserved.
    """
    return list(dict.fromkeys([*first, *second]))


def multidimensional_unique(rows: Iterable[Mapping], key: Hashable) -> list:
    """Remove rows that repeat an already seen value for ``key``.

    Like ``merge`` for values, but works on a list of mappings.

    Args:
        rows: The original rows.
        key: The key used as filter.

    Returns:
        The rows whose ``key`` value was seen first, in their original order.
    """
    seen: set = set()
    unique: list = []

    for row in rows:
        marker = row[key]
        if marker not in seen:
            seen.add(marker)
            unique.append(row)

    return unique
