"""Pydantic field types for fixed-point decimals.

DecimalAmount lets models carry a Decimal that is validated from any
numberish input and serialized as its canonical string:

    class Quote(BaseModel):
        amount: DecimalAmount

    Quote(amount="1.50").model_dump_json() == '{"amount":"1.5"}'
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from fixed_decimal.fixed_point import Decimal


def validate_decimal(value: Any) -> Decimal:
    """Validate that a value can be turned into a Decimal.

    Args:
        value: Decimal, numeral string, int, float or decimal.Decimal.
            Ints are plain numbers ("5" and 5 are the same amount).

    Returns:
        The parsed Decimal

    Raises:
        ParseError: If value is not a number (a ValueError, reported by
            pydantic as a validation error)
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(value)


class _DecimalAnnotation:
    """Core and JSON schema hooks for Decimal fields."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_decimal,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


# 18-decimal fixed-point amount, serialized as a decimal string
DecimalAmount = Annotated[Decimal, _DecimalAnnotation]

__all__ = ["DecimalAmount", "validate_decimal"]
