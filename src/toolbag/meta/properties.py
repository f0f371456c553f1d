"""Property-style attribute access backed by accessor methods.

A class mixing in :class:`PropertyAccessMixin` exposes ``obj.title`` as a
property as soon as it defines the matching accessors:

    class Article(MetadataStore):
        def get_title(self):
            return self.get_attribute("title")

        def set_title(self, value):
            self.set_attribute("title", value)

        def isset_title(self):
            return self.has_attribute("title")

        def unset_title(self):
            self.remove_attribute("title")

    article = Article()
    article.title = "Hello"     # set_title("Hello")
    article.title               # get_title()
    article.has_property("title")  # isset_title()
    del article.title           # unset_title()

Accessors are collected into a dispatch table once per class, when the class
is created. Names starting with an underscore and real properties are
never routed through the accessors.
"""

from __future__ import annotations

import inspect
from typing import Any, ClassVar

from ..core.exceptions import MissingAccessorError

GET = "get"
ISSET = "isset"
SET = "set"
UNSET = "unset"

_PREFIXES = {
    GET: "get_",
    ISSET: "isset_",
    SET: "set_",
    UNSET: "unset_",
}


class PropertyAccessMixin:
    """Route property get/has/set/clear to ``get_``/``isset_``/``set_``/``unset_`` methods."""

    _accessors: ClassVar[dict[str, dict[str, str]]] = {kind: {} for kind in _PREFIXES}

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls._accessors = _build_accessor_table(cls)

    def get_property(self, name: str) -> Any:
        """Return the value of property ``name`` via ``get_<name>()``."""
        return self._resolve_accessor(GET, name)()

    def has_property(self, name: str) -> bool:
        """Check property ``name`` via ``isset_<name>()``."""
        return bool(self._resolve_accessor(ISSET, name)())

    def set_property(self, name: str, value: Any) -> None:
        """Assign property ``name`` via ``set_<name>(value)``."""
        self._resolve_accessor(SET, name)(value)

    def clear_property(self, name: str) -> None:
        """Clear property ``name`` via ``unset_<name>()``."""
        self._resolve_accessor(UNSET, name)()

    def _resolve_accessor(self, kind: str, name: str):
        method_name = type(self)._accessors[kind].get(name)
        if method_name is None:
            raise MissingAccessorError(name, _PREFIXES[kind] + name)
        return getattr(self, method_name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get_property(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or _is_data_descriptor(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self.set_property(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or _is_data_descriptor(type(self), name):
            object.__delattr__(self, name)
        else:
            self.clear_property(name)


# The facade's own entry points are not accessors for a property "property"
_FACADE_METHODS = frozenset(
    ("get_property", "has_property", "set_property", "clear_property")
)


# Positional arguments each accessor kind is called with, besides self
_ARITY = {GET: 0, ISSET: 0, SET: 1, UNSET: 0}


def _build_accessor_table(cls: type) -> dict[str, dict[str, str]]:
    """Map each accessor kind to ``{property_name: method_name}`` for ``cls``.

    Only instance methods callable with the kind's arguments are registered,
    so API methods such as ``get_attribute(name)`` are not mistaken for the
    getter of a property called ``attribute``.
    """
    table: dict[str, dict[str, str]] = {kind: {} for kind in _PREFIXES}

    for attr in dir(cls):
        if attr in _FACADE_METHODS:
            continue
        for kind, prefix in _PREFIXES.items():
            if not attr.startswith(prefix) or len(attr) == len(prefix):
                continue
            if _accepts(cls, attr, _ARITY[kind]):
                table[kind][attr[len(prefix) :]] = attr

    return table


def _accepts(cls: type, attr: str, arity: int) -> bool:
    """Check whether instance method ``attr`` can be called with ``arity`` arguments."""
    raw = inspect.getattr_static(cls, attr, None)
    if not inspect.isfunction(raw):
        return False

    params = list(inspect.signature(raw).parameters.values())[1:]
    positional = [
        p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    required = [p for p in positional if p.default is p.empty]
    if any(p.kind is p.KEYWORD_ONLY and p.default is p.empty for p in params):
        return False
    if any(p.kind is p.VAR_POSITIONAL for p in params):
        return len(required) <= arity
    return len(required) <= arity <= len(positional)


def _is_data_descriptor(cls: type, name: str) -> bool:
    attr = getattr(cls, name, None)
    return attr is not None and hasattr(type(attr), "__set__")
