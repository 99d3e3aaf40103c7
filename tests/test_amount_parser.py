"""Tests for amount parsing."""

import pytest
from decimal import Decimal
from siewriter.utils.amount_parser import parse_amount, to_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(123.45)", Decimal("-123.45")),
        ("$50", Decimal("50")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("-0,24", Decimal("-0.24")),
        ("1.000,00", Decimal("1000.00")),
        ("1 234,56 kr", Decimal("1234.56")),
        ("12", Decimal("12")),
    ],
)
def test_parse_amount_decimal_comma(value, expected):
    assert parse_amount(value, decimal_comma=True) == expected


@pytest.mark.parametrize("value", ["", "  ", "abc", "1.2.3", "NaN"])
def test_parse_amount_invalid(value):
    with pytest.raises(ValueError):
        parse_amount(value)


def test_to_decimal():
    assert to_decimal(-0.24) == Decimal("-0.24")
    assert to_decimal(3) == Decimal(3)
    assert to_decimal(Decimal("1.50")) == Decimal("1.50")
    assert to_decimal("7.25") == Decimal("7.25")


@pytest.mark.parametrize("value", [True, None, [1]])
def test_to_decimal_invalid(value):
    with pytest.raises(ValueError):
        to_decimal(value)
