"""Scaled-integer helpers.

A scaled integer is an ``int`` equal to ``actual_value * 10^precision`` for
some explicit precision. These helpers move integers between scales.

Narrowing always truncates toward zero, never floors or rounds:
    decrease_precision(-1_999, 3) == -1   (not -2)
"""

from __future__ import annotations

__all__ = [
    "abs_int",
    "div_trunc",
    "increase_precision",
    "decrease_precision",
    "rescale",
]


def abs_int(value: int) -> int:
    """Absolute value of a scaled integer."""
    return value if value > 0 else -value


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity. Fixed-point
    narrowing must drop digits toward zero instead, which matters for
    negative numbers.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    # Same sign: result is non-negative, floor and truncate agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def increase_precision(value: int, by_digits: int) -> int:
    """Widen the scale of value by by_digits decimal digits.

    A negative by_digits narrows instead (see decrease_precision).
    """
    if by_digits < 0:
        return decrease_precision(value, -by_digits)
    return value * 10**by_digits


def decrease_precision(value: int, by_digits: int) -> int:
    """Narrow the scale of value by by_digits decimal digits.

    Excess fractional digits are dropped (truncation toward zero).
    A negative by_digits widens instead (see increase_precision).
    """
    if by_digits < 0:
        return increase_precision(value, -by_digits)
    return div_trunc(value, 10**by_digits)


def rescale(value: int, from_precision: int, to_precision: int) -> int:
    """Convert a scaled integer from one precision to another.

    Args:
        value: Integer scaled by 10^from_precision
        from_precision: Current number of fractional digits
        to_precision: Target number of fractional digits

    Returns:
        Integer scaled by 10^to_precision, truncated toward zero when narrowing
    """
    if from_precision == to_precision:
        return value
    if from_precision < to_precision:
        return increase_precision(value, to_precision - from_precision)
    return decrease_precision(value, from_precision - to_precision)
