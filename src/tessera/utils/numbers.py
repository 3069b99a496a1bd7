"""Locale-independent number formatting for CSS values.

Python's str() and repr() for numbers never consult the active locale, but
they do switch to scientific notation for very large or very small floats,
which is not what hand-written CSS looks like. format_css_number renders
every real number in plain positional notation with a "." decimal point.

Example:
    >>> format_css_number(50.5)
    '50.5'
    >>> format_css_number(10.0)
    '10'
    >>> format_css_number(1e-7)
    '0.0000001'
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Real


def _to_decimal(value: Real | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot format non-finite number as CSS: {value!r}")
    # repr() is the shortest string that round-trips, so 0.1 stays "0.1".
    return Decimal(repr(number))


def format_css_number(value: Real | Decimal) -> str:
    """Format a real number for CSS output.

    Integral values drop the fractional part, negative zero renders as "0",
    and trailing zeros are removed.

    Args:
        value: int, float, Decimal, Fraction, or any numbers.Real

    Returns:
        Positional decimal string, e.g. ``"-10.5"``

    Raises:
        TypeError: If value is a bool or not a real number
        ValueError: If value is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    if isinstance(value, int):
        return str(value)

    number = _to_decimal(value)
    if not number.is_finite():
        raise ValueError(f"Cannot format non-finite number as CSS: {value!r}")
    if number == number.to_integral_value():
        return str(int(number))

    text = format(number, "f")
    return text.rstrip("0").rstrip(".")
