"""JSON encoding and decoding with classified failures.

Decode failures are reported as :class:`MalformedInputError` carrying a
:class:`JsonErrorKind`, so callers can tell "no data" from "bad data" and
see why the data was bad:

- ``encoding-error``: byte input is not valid UTF-8
- ``control-character``: an unescaped control character inside a string
- ``structural-mismatch``: a closing bracket that does not match its opener
- ``depth-exceeded``: nesting deeper than the configured maximum
- ``syntax-error``: anything else the parser rejects

Usage:
    codec = JsonCodec(max_depth=64)
    data = codec.decode('{"title": "Hello"}')
    text = codec.encode(data)
"""

from __future__ import annotations

import json
import math
from types import SimpleNamespace
from typing import Any

from loguru import logger

from ..core.config import Config, JsonConfig
from ..core.exceptions import InvalidArgumentError, MalformedInputError
from ..core.types import JsonErrorKind

_CLOSERS = {"[": "]", "{": "}"}


class JsonCodec:
    """Decode JSON text to Python values and encode them back."""

    def __init__(
        self,
        max_depth: int = 512,
        *,
        partial_output: bool = True,
        ensure_ascii: bool = False,
    ):
        """Initialize the codec.

        Args:
            max_depth: Maximum container nesting accepted by ``decode``.
            partial_output: When True, ``encode`` writes ``0`` for NaN and
                infinities and ``null`` for other values it cannot represent,
                instead of failing.
            ensure_ascii: Escape non-ASCII characters on output.
        """
        self.max_depth = max_depth
        self.partial_output = partial_output
        self.ensure_ascii = ensure_ascii

    @classmethod
    def from_config(cls, config: JsonConfig) -> "JsonCodec":
        """Create a codec from a :class:`JsonConfig` section."""
        return cls(
            config.max_depth,
            partial_output=config.partial_output,
            ensure_ascii=config.ensure_ascii,
        )

    def decode(self, text: str | bytes | bytearray, as_mapping: bool = True) -> Any:
        """Decode JSON text.

        Args:
            text: JSON document. Bytes must be UTF-8.
            as_mapping: When True, JSON objects become dicts; otherwise they
                become ``SimpleNamespace`` records.

        Returns:
            The decoded value.

        Raises:
            MalformedInputError: If the text is not valid JSON.
            InvalidArgumentError: If ``text`` is neither str nor bytes.
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedInputError(JsonErrorKind.ENCODING_ERROR, str(exc)) from exc
        elif not isinstance(text, str):
            raise InvalidArgumentError(
                f"JSON input must be str or bytes, not {type(text).__name__}"
            )

        object_hook = None if as_mapping else _to_namespace

        try:
            data = json.loads(
                text,
                object_hook=object_hook,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as exc:
            raise MalformedInputError(_classify(exc), str(exc)) from exc
        except RecursionError as exc:
            raise MalformedInputError(JsonErrorKind.DEPTH_EXCEEDED) from exc
        except ValueError as exc:
            # Raised by _reject_constant for NaN / Infinity
            raise MalformedInputError(JsonErrorKind.SYNTAX_ERROR, str(exc)) from exc

        depth = _nesting_depth(data)
        if depth > self.max_depth:
            raise MalformedInputError(
                JsonErrorKind.DEPTH_EXCEEDED,
                f"depth {depth} exceeds maximum {self.max_depth}",
            )

        return data

    def encode(self, value: Any) -> str:
        """Encode a value as JSON text.

        Non-ASCII characters are written as-is unless ``ensure_ascii`` is set,
        and floats keep their fractional part (``1.0``). With partial output,
        NaN and infinities are written as ``0`` and unsupported values as
        ``null``.

        Raises:
            MalformedInputError: If the value cannot be encoded at all
                (circular references, or NaN, Infinity and unsupported types
                when partial output is disabled).
        """
        try:
            if self.partial_output:
                value = _replace_non_finite(value, set())
            return json.dumps(
                value,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
                skipkeys=self.partial_output,
                default=self._fallback,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise MalformedInputError(JsonErrorKind.UNENCODABLE, str(exc)) from exc

    def _fallback(self, value: Any) -> Any:
        if isinstance(value, SimpleNamespace):
            return vars(value)
        if self.partial_output:
            logger.warning(
                f"Cannot encode {type(value).__name__} as JSON, writing null instead"
            )
            return None
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


_default_codec: JsonCodec | None = None


def default_codec() -> JsonCodec:
    """Get the process-wide codec, building it from configuration on first use."""
    global _default_codec

    if _default_codec is None:
        config = Config.from_env_or_file()
        _default_codec = JsonCodec.from_config(config.json)
        logger.debug(f"Default JSON codec created: max_depth={_default_codec.max_depth}")

    return _default_codec


def set_default_codec(codec: JsonCodec | None) -> None:
    """Replace the process-wide codec; ``None`` rebuilds it from config on next use."""
    global _default_codec
    _default_codec = codec


def _to_namespace(data: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**data)


def _replace_non_finite(value: Any, active: set[int]) -> Any:
    """Copy ``value`` with NaN and infinities replaced by 0.

    Containers already being walked are returned as-is, so the encoder still
    reports circular references.
    """
    if isinstance(value, float):
        if math.isfinite(value):
            return value
        logger.warning(f"Cannot encode {value!r} as JSON, writing 0 instead")
        return 0

    if not isinstance(value, (dict, list, tuple, SimpleNamespace)):
        return value
    if id(value) in active:
        return value

    active.add(id(value))
    try:
        if isinstance(value, SimpleNamespace):
            return {k: _replace_non_finite(v, active) for k, v in vars(value).items()}
        if isinstance(value, dict):
            return {k: _replace_non_finite(v, active) for k, v in value.items()}
        return [_replace_non_finite(item, active) for item in value]
    finally:
        active.discard(id(value))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid constant {name!r}")


def _classify(exc: json.JSONDecodeError) -> JsonErrorKind:
    """Map a decoder error onto a failure kind."""
    if exc.msg.startswith("Invalid control character"):
        return JsonErrorKind.CONTROL_CHARACTER
    if _is_bracket_mismatch(exc.doc, exc.pos):
        return JsonErrorKind.STRUCTURAL_MISMATCH
    return JsonErrorKind.SYNTAX_ERROR


def _is_bracket_mismatch(doc: str, pos: int) -> bool:
    """Check whether the character at ``pos`` closes the wrong container.

    Args:
        doc: The JSON document.
        pos: Offset reported by the decoder.

    Returns:
        True if ``doc[pos]`` is a closing bracket with no opener, or one
        whose opener is of the other kind.
    """
    if pos >= len(doc) or doc[pos] not in "]}":
        return False

    stack: list[str] = []
    in_string = escaped = False
    for char in doc[:pos]:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in _CLOSERS:
            stack.append(char)
        elif char in "]}" and stack:
            stack.pop()

    if not stack:
        return True
    return _CLOSERS[stack[-1]] != doc[pos]


def _nesting_depth(value: Any) -> int:
    """Container nesting depth of a decoded value (scalars are depth 0)."""
    depth = 0
    pending: list[tuple[Any, int]] = [(value, 1)]

    while pending:
        item, level = pending.pop()
        if isinstance(item, dict):
            children = item.values()
        elif isinstance(item, list):
            children = item
        elif isinstance(item, SimpleNamespace):
            children = vars(item).values()
        else:
            continue

        depth = max(depth, level)
        pending.extend((child, level + 1) for child in children)

    return depth
