"""Null-terminated string operations.

Strings are Python ``str`` values; a ``"\\0"`` character ends the string,
as a terminator would.  Searches return an index into the string, or None
when nothing is found.  Functions that write into ``dest`` return its new
contents; characters of ``dest`` beyond the newly written terminator are
kept after a ``"\\0"``, as they would remain in a buffer.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator, Optional, Union

CharLike = Union[int, str]


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def _write_at(buffer: str, offset: int, text: str) -> str:
    written = buffer[:offset] + text
    tail = buffer[len(written) + 1:]
    return f"{written}\0{tail}" if tail else written


def strlen(text: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(text))


def strcat(dest: str, src: str) -> str:
    """Append ``src`` to ``dest``."""
    return _write_at(dest, strlen(dest), _terminated(src))


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` to ``dest``."""
    _check_count(n)
    return _write_at(dest, strlen(dest), _terminated(src)[:n])


def strcpy(dest: str, src: str) -> str:
    """Copy ``src`` over the start of ``dest``."""
    return _write_at(dest, 0, _terminated(src))


def strncpy(dest: str, src: str, n: int) -> str:
    """Copy at most ``n`` characters of ``src`` over ``dest``, always terminating."""
    _check_count(n)
    return _write_at(dest, 0, _terminated(src)[:n])


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``; searching for the terminator finds it."""
    ch = _char(c)
    body = _terminated(text)
    if ch == "\0":
        return len(body)
    index = body.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; searching for the terminator finds it."""
    ch = _char(c)
    body = _terminated(text)
    if ch == "\0":
        return len(body)
    index = body.rfind(ch)
    return None if index < 0 else index


def strcmp(first: str, second: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    pairs = zip_longest(_terminated(first), _terminated(second), fillvalue="\0")
    return next((ord(a) - ord(b) for a, b in pairs if a != b), 0)


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_count(n)
    pairs = zip_longest(_terminated(first), _terminated(second), fillvalue="\0")
    return next((ord(a) - ord(b) for a, b in islice(pairs, n) if a != b), 0)


def strcspn(text: str, reject: str) -> int:
    """Length of the leading run of ``text`` containing no character of ``reject``."""
    body = _terminated(text)
    rejected = set(_terminated(reject))
    return next((i for i, ch in enumerate(body) if ch in rejected), len(body))


def strspn(text: str, accept: str) -> int:
    """Length of the leading run of ``text`` made only of characters of ``accept``."""
    body = _terminated(text)
    accepted = set(_terminated(accept))
    return next((i for i, ch in enumerate(body) if ch not in accepted), len(body))


def strpbrk(text: str, accept: str) -> Optional[int]:
    """Index of the first character of ``text`` that is in ``accept``, or None."""
    accepted = set(_terminated(accept))
    return next((i for i, ch in enumerate(_terminated(text)) if ch in accepted), None)


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is found at 0."""
    index = _terminated(haystack).find(_terminated(needle))
    return None if index < 0 else index


def strtok(text: str, delim: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``text`` separated by characters of ``delim``."""
    delimiters = set(_terminated(delim))
    token: list[str] = []
    for ch in _terminated(text):
        if ch in delimiters:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)