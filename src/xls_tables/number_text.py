"""Excel "General" number rendering.

Excel shows numbers with at most 15 significant digits, never prints a
trailing ``.0`` and switches to scientific notation only for very large or
very small magnitudes. ``number_to_text`` reproduces that text so that
values read from a sheet match what a user sees in the cell.

Example:
    >>> number_to_text(123.0)
    '123'
    >>> number_to_text(0.1 + 0.2)
    '0.3'
    >>> number_to_text(1e21)
    '1E+21'
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

SIGNIFICANT_DIGITS = 15

# Longest plain rendering of a value below one before it goes scientific
MAX_TEXT_LENGTH = 20

# Largest decimal exponent still rendered without scientific notation
MAX_PLAIN_EXPONENT = 19

_ROUNDING = Context(prec=SIGNIFICANT_DIGITS, rounding=ROUND_HALF_UP)


def number_to_text(value: float) -> str:
    """Render a number the way Excel's General format does.

    Args:
        value: The number to render.

    Returns:
        The decimal text of the value.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite number: {value!r}")
    if math.copysign(1.0, value) < 0:
        return "-" + number_to_text(-value)
    if value == 0:
        return "0"

    digits, exponent = _significant_digits(value)
    if exponent < 0:
        return _format_less_than_one(digits, exponent)
    return _format_greater_than_one(digits, exponent)


def _significant_digits(value: float) -> tuple[str, int]:
    """Round the exact binary value to 15 digits.

    Returns:
        Tuple of (significant digits without trailing zeros, decimal exponent
        of the first digit).
    """
    rounded = _ROUNDING.plus(Decimal(value))
    _, digit_tuple, exponent = rounded.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    decimal_exponent = len(digits) + exponent - 1
    return digits.rstrip("0"), decimal_exponent


def _scientific(digits: str, sign: str, exponent: int) -> str:
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += "." + digits[1:]
    return f"{mantissa}E{sign}{exponent:02d}"


def _format_less_than_one(digits: str, exponent: int) -> str:
    leading_zeros = -exponent - 1
    if 2 + leading_zeros + len(digits) > MAX_TEXT_LENGTH:
        return _scientific(digits, "-", -exponent)
    return "0." + "0" * leading_zeros + digits


def _format_greater_than_one(digits: str, exponent: int) -> str:
    if exponent > MAX_PLAIN_EXPONENT:
        return _scientific(digits, "+", exponent)

    integer_length = exponent + 1
    if len(digits) > integer_length:
        return digits[:integer_length] + "." + digits[integer_length:]
    return digits + "0" * (integer_length - len(digits))
