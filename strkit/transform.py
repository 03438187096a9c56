"""Allocating string transformations: insertion, trimming and ASCII case changes.

Input strings end at the first ``"\\0"`` character.
"""

from __future__ import annotations

import string
from typing import Optional

from strkit.cstr import strlen

DEFAULT_TRIM_CHARS = " \t\n\b\v"

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _terminated(text: str) -> str:
    return text[:strlen(text)]


def insert(src: str, text: str, start_index: int) -> str:
    """Return ``src`` with ``text`` inserted at ``start_index``.

    Raises IndexError when ``start_index`` lies outside ``0..len(src)``.
    """
    body = _terminated(src)
    if not 0 <= start_index <= len(body):
        raise IndexError(
            f"start index {start_index} outside string of length {len(body)}"
        )
    return body[:start_index] + _terminated(text) + body[start_index:]


def trim(src: str, trim_chars: Optional[str] = None) -> str:
    """Remove leading and trailing characters found in ``trim_chars``.

    An empty or missing ``trim_chars`` trims whitespace (space, tab, newline,
    backspace, vertical tab).
    """
    chars = _terminated(trim_chars) if trim_chars else ""
    return _terminated(src).strip(chars or DEFAULT_TRIM_CHARS)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII capitals turned to lower case."""
    return _terminated(text).translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII small letters turned to upper case."""
    return _terminated(text).translate(_TO_UPPER)