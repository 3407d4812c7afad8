"""Fixed-point Decimal with 18 fractional digits.

All values are stored as integers scaled by 10^18:
    Decimal("1.5").value == 1_500_000_000_000_000_000

Inputs of any precision are normalized to that scale on construction.
Digits beyond the 18th fractional place are truncated toward zero, never
rounded. Arithmetic runs on the scaled integers, so results are exact up to
that truncation.

Two behaviors are kept stable on purpose and callers may rely on them:
- Division by zero returns MAX_DECIMAL instead of raising.
- pow() is only correct for exponents >= 1.
"""

from __future__ import annotations

import decimal
from fractions import Fraction
from typing import ClassVar

import structlog

from fixed_decimal.constants import PRECISION, UINT256_MAX
from fixed_decimal.errors import ParseError
from fixed_decimal.math.scaling import (
    abs_int,
    decrease_precision,
    div_trunc,
    increase_precision,
    rescale,
)
from fixed_decimal.math.units import format_units, parse_units

__all__ = [
    # Classes
    "Decimal",
    # Types
    "Numberish",
    # Constants
    "ZERO",
    "ONE",
    "MAX_DECIMAL",
]

logger = structlog.get_logger()


def _to_numeral(value: object) -> str:
    """Convert a native number or string into a positional numeral string.

    Raises:
        TypeError: If value is not a str, float or decimal.Decimal
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, float):
        # Shortest repr, expanded out of exponent notation (1e-07 -> 0.0000001)
        text = repr(value)
        if "e" in text:
            return format(decimal.Decimal(text), "f")
        return text
    if isinstance(value, decimal.Decimal):
        return format(value, "f")
    raise TypeError(f"Unsupported type {type(value).__name__}")


def _parse_numeral(value: object) -> int:
    """Parse numeral input at PRECISION, truncating excess fractional digits.

    Raises:
        ParseError: If value is unsupported, empty or malformed
    """
    try:
        text = _to_numeral(value)
        point = text.find(".")
        if point >= 0:
            text = text[: point + PRECISION + 1]
        return parse_units(text, PRECISION)
    except (TypeError, ValueError) as err:
        raise ParseError(f"Failed to parse {value} when creating Decimal") from err


def _coerce(value: Numberish) -> Decimal:
    """Normalize any accepted input to a Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(value)


def _operand(other: object) -> Decimal | None:
    """Operand for Python operators: Decimal or int, otherwise None."""
    if isinstance(other, Decimal):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return Decimal(other)
    return None


class Decimal:
    """Immutable 18-decimal fixed-point number stored as int.

    Construction:
        Decimal("123.45")           numeral string (excess digits truncated)
        Decimal(123.45)             float, via its shortest repr
        Decimal(5)                  int without precision is a plain number
        Decimal(123_450, 3)         scaled integer with its source precision
        Decimal(other_decimal)      copy

    Attributes:
        value: The underlying integer scaled by 10^18 (read-only)
        precision: Always PRECISION
    """

    PRECISION: ClassVar[int] = PRECISION

    ZERO: ClassVar[Decimal]
    ONE: ClassVar[Decimal]
    MAX_DECIMAL: ClassVar[Decimal]

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: Numberish, precision: int | None = None) -> None:
        """Create a Decimal.

        Args:
            value: Decimal, numeral string, int, float or decimal.Decimal
            precision: Source precision when value is a scaled int. Ignored
                for every other input type.

        Raises:
            ParseError: If value cannot be parsed as a number, or precision
                is a bool
        """
        if isinstance(precision, bool):
            raise ParseError(f"Invalid precision {precision} when creating Decimal from {value}")
        if isinstance(value, Decimal):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            # A bare int is a whole number, i.e. scaled at precision 0
            self._value = rescale(value, 0 if precision is None else precision, PRECISION)
        else:
            self._value = _parse_numeral(value)

    @property
    def value(self) -> int:
        """The underlying integer scaled by 10^18."""
        return self._value

    @property
    def precision(self) -> int:
        """Number of fractional digits carried by value."""
        return PRECISION

    # --- Alternate constructors ---

    @classmethod
    def from_scaled(cls, value: int, precision: int = PRECISION) -> Decimal:
        """Create from an integer scaled by 10^precision."""
        return cls(value, precision)

    @classmethod
    def parse(
        cls,
        value: Numberish,
        default_value: Numberish,
        precision: int | None = None,
    ) -> Decimal:
        """Create from value, falling back to default_value if it does not parse.

        The fallback is not guarded: a malformed default_value raises
        ParseError.
        """
        try:
            return cls(value, precision)
        except ParseError:
            logger.debug(
                "decimal_parse_fallback",
                value=repr(value),
                default_value=repr(default_value),
            )
            return cls(default_value, precision)

    @staticmethod
    def max(a: Numberish, b: Numberish) -> Decimal:
        """Return the larger of a and b (a on ties)."""
        decimal_a = _coerce(a)
        decimal_b = _coerce(b)
        return decimal_b if decimal_b.gt(decimal_a) else decimal_a

    @staticmethod
    def min(a: Numberish, b: Numberish) -> Decimal:
        """Return the smaller of a and b (a on ties)."""
        decimal_a = _coerce(a)
        decimal_b = _coerce(b)
        return decimal_b if decimal_b.lt(decimal_a) else decimal_a

    # --- Arithmetic ---

    def add(self, addend: Numberish) -> Decimal:
        """Add two values."""
        return Decimal(self._value + _coerce(addend)._value, PRECISION)

    def sub(self, subtrahend: Numberish) -> Decimal:
        """Subtract subtrahend from self. Result may be negative."""
        return Decimal(self._value - _coerce(subtrahend)._value, PRECISION)

    def mul(self, multiplicand: Numberish) -> Decimal:
        """Multiply, truncating the 36-digit product back to 18 digits."""
        product = self._value * _coerce(multiplicand)._value
        return Decimal(decrease_precision(product, PRECISION), PRECISION)

    def div(self, divisor: Numberish) -> Decimal:
        """Divide with truncation toward zero.

        Returns MAX_DECIMAL when divisor is zero.
        """
        other = _coerce(divisor)
        if other.is_zero():
            logger.debug("decimal_division_by_zero", dividend=str(self))
            return MAX_DECIMAL
        quotient = div_trunc(increase_precision(self._value, PRECISION), other._value)
        return Decimal(quotient, PRECISION)

    def pow(self, exponent: int) -> Decimal:
        """Raise to an integer power.

        Only exponents >= 1 give the mathematically correct result. An
        exponent of 0 returns ONE; negative exponents truncate the raw
        integer power toward zero and so generally return ZERO.

        Raises:
            TypeError: If exponent is not an int
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Decimal.pow requires int exponent, got {type(exponent).__name__}")

        if exponent >= 0:
            raw = self._value**exponent
        else:
            denominator = self._value**-exponent
            raw = div_trunc(1, denominator) if denominator != 0 else 0
        return Decimal(decrease_precision(raw, (exponent - 1) * PRECISION), PRECISION)

    def abs(self) -> Decimal:
        """Absolute value."""
        return Decimal(abs_int(self._value), PRECISION)

    # --- Comparison ---

    def equals(self, comparable: Numberish) -> bool:
        return self._value == _coerce(comparable)._value

    def approximately_equals(self, comparable: Numberish, relative_offset: Numberish) -> bool:
        """Check |self - comparable| / |self| <= relative_offset.

        The error is relative to self, not to the larger magnitude, so the
        check is not symmetric. A zero self divides into MAX_DECIMAL.
        """
        other = _coerce(comparable)
        diff = Decimal(abs_int(self._value - other._value), PRECISION)
        return diff.div(self.abs()).lte(relative_offset)

    def lt(self, another: Numberish) -> bool:
        return self._value < _coerce(another)._value

    def lte(self, another: Numberish) -> bool:
        return self._value <= _coerce(another)._value

    def gt(self, another: Numberish) -> bool:
        return self._value > _coerce(another)._value

    def gte(self, another: Numberish) -> bool:
        return self._value >= _coerce(another)._value

    def is_zero(self) -> bool:
        return self._value == 0

    # --- Conversion ---

    def to_scaled_int(self, precision: int = PRECISION) -> int:
        """Return value rescaled to precision fractional digits (truncating)."""
        return rescale(self._value, PRECISION, precision)

    def to_decimal(self) -> decimal.Decimal:
        """Convert to the standard library's decimal.Decimal (exact)."""
        return decimal.Decimal(self.to_string())

    def to_string(self) -> str:
        """Canonical decimal string: no trailing zeros, grouping or exponent."""
        return format_units(self._value, PRECISION)

    def to_truncated(self, fraction_digits: int = 0, pad: bool = False) -> str:
        """Render with at most fraction_digits fractional digits, never rounding.

        Args:
            fraction_digits: Digits to keep after the dot
            pad: Right-pad the fraction with zeros to exactly fraction_digits

        Examples:
            Decimal("3.999").to_truncated(2) -> "3.99"
            Decimal("3").to_truncated(2) -> "3"
            Decimal("3").to_truncated(2, pad=True) -> "3.00"
        """
        integral, _, fraction = self.to_string().partition(".")
        if fraction_digits > 0:
            if pad:
                return f"{integral}.{fraction[:fraction_digits].ljust(fraction_digits, '0')}"
            if fraction:
                return f"{integral}.{fraction[:fraction_digits]}"
        return integral

    def to_rounded(self, fraction_digits: int = 0) -> str:
        """Render rounded to fraction_digits, always padded.

        Non-negative values round up when the next digit is 5 or more.
        Negative values round away from zero only when the next digit is
        more than 5, so "-2.5" renders as "-2" while "2.5" renders as "3".

        Examples:
            Decimal("3.999").to_rounded(2) -> "4.00"
            Decimal("-3.999").to_rounded(2) -> "-4.00"
        """
        integral, _, fraction = self.to_string().partition(".")
        last_digit = int(fraction[fraction_digits]) if fraction_digits < len(fraction) else 0

        if self.gte(0):
            if last_digit < 5:
                return self.to_truncated(fraction_digits, pad=True)
            step = 1
        else:
            if last_digit <= 5:
                return self.to_truncated(fraction_digits, pad=True)
            step = -1

        if fraction_digits > 0:
            # Step one unit at the cutoff; carries run through the integer
            scaled = parse_units(f"{integral}.{fraction[:fraction_digits]}", fraction_digits)
            rounded = format_units(scaled + step, fraction_digits)
            rounded_integral, _, rounded_fraction = rounded.partition(".")
            return f"{rounded_integral}.{rounded_fraction.ljust(fraction_digits, '0')}"
        return format_units(parse_units(integral, 0) + step, 0)

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string()}')"

    def __hash__(self) -> int:
        # Matches hash(int) for integral values, as == does
        return hash(Fraction(self._value, 10**PRECISION))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._value == operand._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._value < operand._value

    def __le__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._value <= operand._value

    def __gt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._value > operand._value

    def __ge__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._value >= operand._value

    def __add__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> Decimal:
        return self.__add__(other)

    def __sub__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.sub(operand)

    def __rsub__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.sub(self)

    def __mul__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.mul(operand)

    def __rmul__(self, other: object) -> Decimal:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Decimal:
        """Divide. Division by zero returns MAX_DECIMAL."""
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.div(operand)

    def __rtruediv__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.div(self)

    def __pow__(self, exponent: object) -> Decimal:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Decimal:
        return Decimal(-self._value, PRECISION)

    def __pos__(self) -> Decimal:
        return self

    def __abs__(self) -> Decimal:
        return self.abs()


# Anything a Decimal operation accepts as an operand
Numberish = Decimal | str | int | float | decimal.Decimal

# =============================================================================
# Module-level constants
# =============================================================================

ZERO = Decimal(0)
ONE = Decimal(1)
MAX_DECIMAL = Decimal(UINT256_MAX, PRECISION)  # Division-by-zero sentinel

Decimal.ZERO = ZERO
Decimal.ONE = ONE
Decimal.MAX_DECIMAL = MAX_DECIMAL
