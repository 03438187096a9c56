"""A ``sprintf``-style formatter supporting ``c d i f s u o x X e E p n %``.

Conversions accept the flags ``-``, ``+``, `` `` and ``0``, a width, a
precision (either may be ``*`` to take it from the arguments) and the length
modifiers ``h``, ``l`` and ``L``.  Integer arguments are wrapped to the size
a C argument of that length would have.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from strkit.cstr import strlen, strtok
from strkit.numconv import atoi, ftoa, itoa, itoau

CONVERSIONS = "cdifsugGeExXonp%"
_SIGNED = "di"
_UNSIGNED = "uoxX"


@dataclass
class FormatSpec:
    """Flags, width, precision and length of one conversion."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    zero: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None
    length: str = ""
    width_from_arg: bool = False
    precision_from_arg: bool = False

    def read_numbers(self, text: str) -> None:
        """Fill width, precision and the zero flag from ``text``."""
        if text.startswith("."):
            rest = text.lstrip(".0")
            if rest == "*":
                self.precision_from_arg = True
            else:
                self.precision = atoi(rest)
            return
        tokens = list(strtok(text, "."))
        if not tokens:
            return
        before = tokens[0]
        if before == "*":
            self.width_from_arg = True
        elif before == "0":
            self.zero = True
        else:
            if before[0] == "0":
                self.zero = True
            if len(before) > 1 and before[1] == "*":
                self.width_from_arg = True
            else:
                self.width = atoi(before)
        if len(tokens) > 1:
            if tokens[1] == "*":
                self.precision_from_arg = True
            else:
                self.precision = atoi(tokens[1])


def _parse(fmt: str, pos: int) -> tuple[FormatSpec, str, int]:
    spec = FormatSpec()
    numbers: list[str] = []
    while True:
        if pos >= len(fmt):
            raise ValueError("format ends inside a conversion specification")
        ch = fmt[pos]
        pos += 1
        if ch in CONVERSIONS:
            break
        if ch == "-":
            spec.minus = True
        elif ch == "+":
            spec.plus = True
        elif ch == " ":
            spec.space = True
        elif ch in "lhL":
            spec.length = ch
        else:
            numbers.append(ch)
    spec.read_numbers("".join(numbers))
    return spec, ch, pos


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _exponent(reference: float, number: float) -> int:
    log_ref = math.log10(abs(number))
    if int(reference) == 0 and int(log_ref) != log_ref:
        return int(math.log10(abs(reference)) - 1)
    return int(math.log10(abs(reference)))


def _exponent_text(number: float, letter: str) -> str:
    if number == 0 or not math.isfinite(number):
        raise ValueError(f"cannot format {number!r} in exponent notation")
    exp = _exponent(number, number)
    scale = 10.0 ** exp
    res = scale * _round_half_away(number / scale * 1e6) / 1e6
    exp = _exponent(res, number)
    res /= 10.0 ** exp
    suffix = letter + itoa(exp)
    if len(suffix) == 3 and suffix[1] == "-":
        suffix = suffix[:2] + "0" + suffix[2:]
    elif len(suffix) == 2:
        suffix = suffix[0] + "+0" + suffix[1:]
    return ftoa(res, 1) + suffix


def _pad(text: str, size: int, shift: int, fill: str) -> str:
    if size == 0 and text == fill:
        return ""
    if size > len(text) and not text.startswith("-"):
        return fill * (size - len(text)) + text
    if text.startswith("-") and size > len(text) - 1:
        missing = size - (len(text) - shift)
        return text[:shift] + fill * max(missing, 0) + text[shift:]
    return text


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: FormatSpec, conv: str, args: Iterator[Any], written: int) -> tuple[str, Optional[bool]]:
    if spec.width_from_arg:
        value = int(_next(args))
        spec.width = None if value == -1 else value
    if spec.precision_from_arg:
        value = int(_next(args))
        spec.precision = None if value == -1 else value

    if conv == "c":
        arg = _next(args)
        ch = chr(arg) if isinstance(arg, int) else str(arg)[:1]
        return ch[:strlen(ch)], None
    if conv == "s":
        text = str(_next(args))
        return text[:strlen(text)], None
    if conv in _SIGNED:
        bits = {"l": 64, "h": 16}.get(spec.length, 32)
        number = _wrap(int(_next(args)), bits, signed=True)
        return itoa(number), number >= 0
    if conv == "f":
        value = float(_next(args))
        text = ftoa(value, spec.precision)
        return text.removesuffix("."), value >= 0
    if conv == "%":
        return "%", None
    if conv in _UNSIGNED:
        bits = {"l": 64, "h": 16}.get(spec.length, 32)
        number = _wrap(int(_next(args)), bits, signed=False)
        if conv == "x":
            return f"{number:x}", None
        if conv == "X":
            return f"{number:X}", None
        if conv == "o":
            return f"{number:o}", None
        return itoau(number), None
    if conv == "n":
        target = _next(args)
        target[0] = written
        return "", None
    if conv == "p":
        address = _next(args)
        return f"0x{int(address or 0):x}", None
    if conv in "eE":
        return _exponent_text(float(_next(args)), conv), None
    return "", None


def _apply(spec: FormatSpec, text: str, positive: Optional[bool], conv: str) -> str:
    if spec.precision is not None:
        if conv == "s":
            text = text[:spec.precision]
        elif conv in _SIGNED + _UNSIGNED:
            text = _pad(text, spec.precision, 1, "0")
    if spec.width is not None and spec.zero and spec.precision is None:
        text = _pad(text, spec.width, 0, "0")
    if spec.space and positive:
        text = " " + text
    if spec.plus and positive:
        text = "+" + text
    if spec.width is not None and not spec.minus:
        text = _pad(text, spec.width, 0, " ")
    if spec.minus and spec.width is not None and spec.width > len(text):
        text = text.ljust(spec.width)
    return text


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    ``%n`` stores the count of characters written so far into item 0 of
    its argument.  Raises TypeError when arguments run out and ValueError
    for a truncated specification.
    """
    pieces: list[str] = []
    written = 0
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        pos += 1
        if ch != "%":
            pieces.append(ch)
            written += 1
            continue
        spec, conv, pos = _parse(fmt, pos)
        text, positive = _convert(spec, conv, remaining, written)
        text = _apply(spec, text, positive, conv)
        pieces.append(text)
        written += len(text)
    return "".join(pieces)