"""Tests for the pydantic DecimalAmount field type."""

import decimal

import pytest
from pydantic import BaseModel, ValidationError

from fixed_decimal import Decimal, DecimalAmount, ParseError
from fixed_decimal.types import validate_decimal


class Quote(BaseModel):
    """Minimal model carrying a fixed-point amount."""

    amount: DecimalAmount
    fee: DecimalAmount | None = None


class TestValidateDecimal:
    """Tests for validate_decimal."""

    def test_passes_decimal_through(self):
        d = Decimal("1.5")
        assert validate_decimal(d) is d

    def test_parses_numberish(self):
        assert validate_decimal("1.5") == Decimal("1.5")
        assert validate_decimal(5) == Decimal(5)
        assert validate_decimal(decimal.Decimal("0.25")) == Decimal("0.25")

    def test_invalid_raises(self):
        with pytest.raises(ParseError):
            validate_decimal("1e8")


class TestDecimalAmountField:
    """Tests for DecimalAmount in a model."""

    def test_validates_string(self):
        assert Quote(amount="1.50").amount == Decimal("1.5")

    def test_validates_int_as_number(self):
        assert Quote(amount=5).amount.value == 5 * 10**18

    def test_validates_decimal(self):
        d = Decimal("2")
        assert Quote(amount=d).amount is d

    def test_invalid_input_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Quote(amount="not a number")
        assert "Failed to parse not a number" in str(exc_info.value)

    def test_json_round_trip(self):
        quote = Quote(amount="0.000000000000000001", fee="-2.50")
        payload = quote.model_dump_json()
        assert payload == '{"amount":"0.000000000000000001","fee":"-2.5"}'
        assert Quote.model_validate_json(payload) == quote

    def test_json_number_input(self):
        assert Quote.model_validate_json('{"amount": 1.25}').amount == Decimal("1.25")

    def test_python_dump_keeps_decimal(self):
        dumped = Quote(amount="1.5").model_dump()
        assert dumped == {"amount": Decimal("1.5"), "fee": None}

    def test_json_schema_is_string(self):
        schema = Quote.model_json_schema()
        assert schema["properties"]["amount"]["type"] == "string"
