"""Scaled-integer utilities for fixed-point decimals.

This package provides the integer primitives the Decimal engine is built on:
- scaling: widen/narrow an integer between precisions (truncating)
- units: format and parse scaled integers as decimal strings
"""

from fixed_decimal.math.scaling import (
    abs_int,
    decrease_precision,
    div_trunc,
    increase_precision,
    rescale,
)
from fixed_decimal.math.units import format_units, is_numeral, parse_units

__all__ = [
    "abs_int",
    "div_trunc",
    "increase_precision",
    "decrease_precision",
    "rescale",
    "format_units",
    "parse_units",
    "is_numeral",
]
