"""String codec for scaled integers.

Converts between plain decimal numerals ("-123.45") and integers scaled
by 10^decimals. Neither direction rounds: format_units is exact and
parse_units rejects numerals that carry more fractional digits than the
target scale can hold.
"""

from __future__ import annotations

import re

from fixed_decimal.errors import InvalidNumeralError
from fixed_decimal.math.scaling import abs_int

__all__ = [
    "format_units",
    "parse_units",
    "is_numeral",
]

# Optional minus, digits with at most one dot, at least one digit.
# Exponent notation ("1e8"), "+" signs and whitespace are not numerals.
_NUMERAL_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

# Digits converted per int/str step; stays under the interpreter's
# int_max_str_digits limit (4300 by default) for arbitrarily large values.
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _int_to_digits(magnitude: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    if magnitude < _CHUNK_BASE:
        return str(magnitude)
    chunks = []
    while magnitude >= _CHUNK_BASE:
        magnitude, chunk = divmod(magnitude, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(magnitude))
    return "".join(reversed(chunks))


def _digits_to_int(digits: str) -> int:
    """Parse a string of decimal digits of any length (empty is 0)."""
    result = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        result = result * 10 ** len(chunk) + int(chunk)
    return result


def is_numeral(value: str) -> bool:
    """Check if a string is a plain decimal numeral.

    Examples:
        >>> is_numeral("-123.45")
        True
        >>> is_numeral(".5")
        True
        >>> is_numeral("1e8")
        False
        >>> is_numeral("1.2.3")
        False
    """
    return _NUMERAL_RE.fullmatch(value) is not None


def format_units(value: int, decimals: int) -> str:
    """Render a scaled integer as a canonical decimal string.

    The sign is emitted only for negative values, the fraction is stripped
    of trailing zeros and dropped together with the dot when empty.

    Args:
        value: Integer scaled by 10^decimals
        decimals: Number of fractional digits carried by value

    Returns:
        Decimal string without exponent or grouping

    Examples:
        >>> format_units(1_500_000, 6)
        '1.5'
        >>> format_units(-5, 3)
        '-0.005'
        >>> format_units(7_000, 3)
        '7'
    """
    magnitude = abs_int(value)
    sign = "-" if value < 0 else ""
    if decimals == 0:
        return f"{sign}{_int_to_digits(magnitude)}"

    quotient, remainder = divmod(magnitude, 10**decimals)
    integral = _int_to_digits(quotient)
    fraction = _int_to_digits(remainder).zfill(decimals).rstrip("0")
    if fraction:
        return f"{sign}{integral}.{fraction}"
    return f"{sign}{integral}"


def parse_units(value: str, decimals: int) -> int:
    """Parse a decimal numeral into an integer scaled by 10^decimals.

    The string is split on its dot; the integer part and the fraction
    (right-padded with zeros to decimals digits) form the magnitude, and a
    leading "-" negates the result. "-0" parses to 0.

    Args:
        value: Plain decimal numeral, e.g. "12.5", ".5", "12.", "-3"
        decimals: Number of fractional digits of the result

    Returns:
        Scaled integer

    Raises:
        InvalidNumeralError: If value is not a numeral or its fraction has
            more than decimals significant digits (truncate before calling)
    """
    if not isinstance(value, str) or not is_numeral(value):
        raise InvalidNumeralError(f"Invalid decimal numeral: {value!r}")

    negative = value.startswith("-")
    body = value[1:] if negative else value
    integral, _, fraction = body.partition(".")

    # Trailing zeros carry no value and never count against the scale
    fraction = fraction.rstrip("0")
    if len(fraction) > decimals:
        raise InvalidNumeralError(
            f"Numeral {value!r} has {len(fraction)} fractional digits, at most {decimals} allowed"
        )

    magnitude = _digits_to_int(integral) * 10**decimals + _digits_to_int(fraction.ljust(decimals, "0"))
    return -magnitude if negative else magnitude
