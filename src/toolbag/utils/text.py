"""Text processing helpers.

All functions work on ``str`` (Unicode) unless stated otherwise; only
``convert_charset`` deals with raw bytes.
"""

from __future__ import annotations

import html
import re
import unicodedata
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from html.parser import HTMLParser

# Separates an ID from its version number
SEPARATOR = "::"

_TRAILING_WORD_PATTERN = re.compile(r"\s+?(\S+)?$")
_PRE_BLOCK_PATTERN = re.compile(r"<(pre)(?:(?!</\1).)*?</\1>", re.DOTALL | re.IGNORECASE)
_SLASHED_PATTERN = re.compile(r"\\(.?)", re.DOTALL)
_NON_ALNUM_PATTERN = re.compile(r"[\W_]+")
_NON_SLUG_PATTERN = re.compile(r"[^\-\w]+", re.ASCII)

# MS Word smart characters and their replacements (quotes pre-escaped,
# since replacement happens after HTML escaping)
_SMART_CHARACTERS = {
    "\u2018": "&#x27;",  # Left single quote
    "\u2019": "&#x27;",  # Right single quote
    "\u201c": "&quot;",  # Left double quote
    "\u201d": "&quot;",  # Right double quote
    "\u2014": "&mdash;",  # Em dash
    "\u2026": "...",  # Ellipsis
}


def convert_charset(
    data: bytes,
    strip_slashes: bool = False,
    from_charset: str = "cp1252",
    to_charset: str = "utf-8",
) -> bytes:
    """Convert bytes from a charset to another one.

    The default conversion is from Windows-1252 to UTF-8. Windows-1252 is a
    superset of ISO-8859-1 that uses displayable characters in the 0x80-0x9F
    range, which is what documents pasted from Word actually contain even
    when they claim to be Latin-1.

    Args:
        data: The input bytes.
        strip_slashes: Remove backslash escapes before converting.
        from_charset: The origin charset.
        to_charset: The target charset.

    Returns:
        The text encoded with ``to_charset``.
    """
    decoded = data.decode(from_charset)
    if strip_slashes:
        decoded = _SLASHED_PATTERN.sub(r"\1", decoded)
    return decoded.encode(to_charset)


def truncate(
    text: str,
    length: int = 200,
    etc: str = " ...",
    break_words: bool = False,
    middle: bool = False,
) -> str:
    """Cut a string to a given number of characters without breaking words.

    Args:
        text: The input string.
        length: Maximum length of the result, ``etc`` included.
        etc: Characters appended where the text was cut.
        break_words: Cut at exactly ``length`` characters, even mid-word.
        middle: Remove the middle of the text instead of the end.

    Returns:
        The truncated text, or ``text`` unchanged when it already fits.
    """
    if length == 0:
        return ""

    if len(text) <= length:
        return text

    length -= min(length, len(etc))

    if not break_words and not middle:
        text = _TRAILING_WORD_PATTERN.sub("", text[: length + 1])

    if not middle:
        return text[:length] + etc

    half = length // 2
    tail = text[-half:] if half else text
    return text[:half] + etc + tail


def capitalize(text: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return text[:1].upper() + text[1:].lower()


class _TagStripper(HTMLParser):
    """Collects text content, leaving entities untouched."""

    def __init__(self):
        super().__init__(convert_charrefs=False)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def handle_entityref(self, name: str) -> None:
        self.parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.parts.append(f"&#{name};")


def purge(text: str) -> str:
    """Remove ``<pre>`` blocks with their content, then strip all tags."""
    text = _PRE_BLOCK_PATTERN.sub("", text)

    stripper = _TagStripper()
    stripper.feed(text)
    stripper.close()
    return "".join(stripper.parts)


def stick(word: str) -> str:
    """Make a single word from a compound one, dropping every ``-``."""
    return word.replace("-", "")


def substrings(text: str) -> list[str]:
    """Return all the unique substrings of ``text``, in order of discovery."""
    length = len(text)
    subs = (text[i : i + j] for i in range(length) for j in range(1, length + 1))
    return list(dict.fromkeys(subs))


def slug(text: str) -> str:
    """Generate an ASCII slug from the provided string.

    Example:
        >>> slug("Perché l'è così?")
        'perche-l-e-cosi'
    """
    value = _NON_ALNUM_PATTERN.sub("-", text).strip("-")
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG_PATTERN.sub("", value.lower())


def build_url(when: int | float | date, slug_text: str) -> str:
    """Build a post URL from its publishing date and slug.

    Args:
        when: Publishing or creation date, as a timestamp or date.
        slug_text: The slug of the title.

    Returns:
        A path like ``/2024/03/15/my-post``.
    """
    if not isinstance(when, date):
        when = datetime.fromtimestamp(when)
    return when.strftime("/%Y/%m/%d/") + slug_text


def replace_all_but_first(pattern: str | re.Pattern, replacement: str, subject: str) -> str:
    """Replace every match of ``pattern`` except the first one."""
    seen = 0

    def _replace(match: re.Match) -> str:
        nonlocal seen
        seen += 1
        return match.group(0) if seen == 1 else replacement

    return re.sub(pattern, _replace, subject)


def unversion(identifier: str) -> str:
    """Prune an ID of its version number, if any.

    Example:
        >>> unversion("3e96144b-3ebd-41e4-8a45-78cd9af1671d::1410886811")
        '3e96144b-3ebd-41e4-8a45-78cd9af1671d'
    """
    return identifier.partition(SEPARATOR)[0]


def format_number(number: int | float) -> str:
    """Format a number with ``.`` as thousands separator and no decimals."""
    rounded = Decimal(str(number)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(rounded):,}".replace(",", ".")


def split_full_name(full_name: str) -> dict[str, str]:
    """Separate a full name into salutation, first, last name and suffix.

    A leading word with a period is taken as a salutation ("Dr."), a
    trailing one as a suffix ("Jr.").

    Args:
        full_name: A person's full name.

    Returns:
        Dictionary with ``salutation``, ``first``, ``last`` and ``suffix``.
    """
    words = full_name.split(" ")
    result: dict[str, str] = {}

    if "." in words[0] and len(words) > 1:
        result["salutation"] = words[0]
        result["first"] = words[1]
    else:
        result["salutation"] = ""
        result["first"] = words[0]

    last_word = words[-1]
    result["suffix"] = last_word if "." in last_word and len(words) > 2 else ""

    start = 2 if result["salutation"] else 1
    end = len(words) - 1 if result["suffix"] else len(words)
    result["last"] = " ".join(words[start:end]).strip()

    return result


def sanitize(text: str) -> str:
    """Escape HTML and replace MS Word smart punctuation."""
    escaped = html.escape(text)
    for char, replacement in _SMART_CHARACTERS.items():
        escaped = escaped.replace(char, replacement)
    return escaped
