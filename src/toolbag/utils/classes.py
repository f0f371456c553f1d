"""Helpers to handle class and module names."""

import re

_PY_SUFFIX_PATTERN = re.compile(r"\.py\Z", re.IGNORECASE)


def get_class(pathname: str, root: str = "toolbag") -> str:
    """Given a source file path, return its dotted module path.

    Everything before ``root`` is dropped.

    Example:
        >>> get_class("/srv/app/src/toolbag/meta/store.py")
        'toolbag.meta.store'
    """
    index = pathname.lower().find(root.lower())
    if index >= 0:
        pathname = pathname[index:]
    pathname = _PY_SUFFIX_PATTERN.sub("", pathname)
    return pathname.replace("\\", ".").replace("/", ".")


def get_class_name(qualified_name: str) -> str:
    """Return the last segment of a dotted name.

    Example:
        >>> get_class_name("toolbag.meta.store.MetadataStore")
        'MetadataStore'
    """
    return qualified_name.rpartition(".")[2]


def get_class_root(qualified_name: str) -> str:
    """Return a dotted name pruned of its last segment.

    Returns an empty string for names without a dot.
    """
    return qualified_name.rpartition(".")[0]
