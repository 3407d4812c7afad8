"""Error classes for fixed-point decimal operations."""


class FixedDecimalError(Exception):
    """Base error for fixed-point decimal operations."""

    pass


class ParseError(FixedDecimalError, ValueError):
    """Input could not be turned into a Decimal.

    Raised for empty strings, malformed numerals and unsupported input types.
    The message always names the rejected input.
    """

    pass


class InvalidNumeralError(ParseError):
    """String is not a plain decimal numeral at the requested scale."""

    pass
