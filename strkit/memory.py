"""Operations on raw byte buffers bounded by an explicit byte count.

Buffers are any objects supporting the buffer protocol (``bytes``,
``bytearray``, ``memoryview``, ``array.array`` ...).  Functions that write
require a writable buffer and modify it in place, returning it.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str, bytes]


def _byte(c: CharLike) -> int:
    """Normalise a character argument to a byte value."""
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c & 0xFF


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer of {length} bytes")


def memchr(buf, c: CharLike, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    target = _byte(c)
    with memoryview(buf) as raw, raw.cast("B") as view:
        _check_count(n, len(view))
        index = bytes(view[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first, second, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, else 0."""
    with memoryview(first) as raw_a, raw_a.cast("B") as a, \
            memoryview(second) as raw_b, raw_b.cast("B") as b:
        _check_count(n, len(a), len(b))
        return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    with memoryview(dest) as raw_d, raw_d.cast("B") as target, \
            memoryview(src) as raw_s, raw_s.cast("B") as source:
        _check_count(n, len(target), len(source))
        target[:n] = source[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap."""
    with memoryview(dest) as raw_d, raw_d.cast("B") as target, \
            memoryview(src) as raw_s, raw_s.cast("B") as source:
        _check_count(n, len(target), len(source))
        chunk = bytes(source[:n])
        target[:n] = chunk
    return dest


def memset(buf, c: CharLike, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c``; return ``buf``."""
    value = _byte(c)
    with memoryview(buf) as raw, raw.cast("B") as view:
        _check_count(n, len(view))
        view[:n] = bytes([value]) * n
    return buf