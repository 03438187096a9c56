"""Conversions between numbers and their decimal text."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Union

from strkit.transform import trim

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
DEFAULT_PRECISION = 6

_LEADING_NUMBER = re.compile(r"(-?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Spaces and plus signs are stripped from both ends first.  An optional
    minus sign and the run of digits after it are read; anything else ends
    the number.  Text without digits gives 0.  The result is clamped to the
    range of a 32-bit signed integer.
    """
    match = _LEADING_NUMBER.match(trim(text, " +"))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign:
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def itoa(n: int) -> str:
    """Return the decimal text of the signed integer ``n``."""
    return str(int(n))


def itoau(n: int) -> str:
    """Return the decimal text of the unsigned integer ``n``.

    Raises ValueError for a negative ``n``.
    """
    value = int(n)
    if value < 0:
        raise ValueError(f"expected an unsigned value, got {value}")
    return str(value)


def ftoa(value: Union[float, int, Decimal], precision: Optional[int] = None) -> str:
    """Format ``value`` in fixed-point notation with ``precision`` decimals.

    ``None`` or ``-1`` selects the default of six decimals.  The value is
    rounded half away from zero.  The decimal point is always written, so a
    precision of 0 leaves a trailing ``"."``.  A value that rounds to zero
    is written without a sign.
    """
    if precision is None or precision == -1:
        precision = DEFAULT_PRECISION
    if precision < 0:
        raise ValueError(f"precision must not be negative, got {precision}")

    exact = Decimal(value)
    if not exact.is_finite():
        raise ValueError(f"cannot format non-finite value {value!r}")

    with localcontext() as ctx:
        ctx.prec = len(exact.as_tuple().digits) + abs(exact.adjusted()) + precision + 10
        scaled = exact.scaleb(precision).to_integral_value(rounding=ROUND_HALF_UP)

    negative = scaled < 0
    whole, fraction = divmod(int(abs(scaled)), 10**precision)
    fraction_digits = f"{fraction:0{precision}d}" if precision else ""
    return f"{'-' if negative else ''}{whole}.{fraction_digits}"