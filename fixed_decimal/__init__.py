"""Exact 18-decimal fixed-point numbers for token amounts."""

from fixed_decimal.constants import PRECISION, UINT256_MAX
from fixed_decimal.errors import FixedDecimalError, InvalidNumeralError, ParseError
from fixed_decimal.fixed_point import MAX_DECIMAL, ONE, ZERO, Decimal, Numberish
from fixed_decimal.math import (
    abs_int,
    decrease_precision,
    div_trunc,
    format_units,
    increase_precision,
    parse_units,
    rescale,
)
from fixed_decimal.types import DecimalAmount

__version__ = "0.1.0"
__all__ = [
    # Core
    "Decimal",
    "Numberish",
    "ZERO",
    "ONE",
    "MAX_DECIMAL",
    "PRECISION",
    "UINT256_MAX",
    # Errors
    "FixedDecimalError",
    "ParseError",
    "InvalidNumeralError",
    # Scaled-integer utilities
    "abs_int",
    "div_trunc",
    "increase_precision",
    "decrease_precision",
    "rescale",
    "format_units",
    "parse_units",
    # Pydantic
    "DecimalAmount",
    "__version__",
]
