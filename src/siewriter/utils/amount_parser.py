"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union


def parse_amount(amount_str: str, decimal_comma: bool = False) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)
    - "1.234,56" and "-0,24" when ``decimal_comma`` is set
    - "1 234,56 kr" (spaces and currency markers are ignored)

    Args:
        amount_str: Amount string
        decimal_comma: Treat "," as the decimal mark and "." as a thousands
            separator, as Swedish bookkeeping exports do

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and markers
    amount_str = re.sub(r"[$€£¥]|kr|SEK", "", amount_str, flags=re.IGNORECASE)

    # Remove grouping whitespace (including non-breaking spaces)
    amount_str = re.sub(r"\s", "", amount_str)

    if decimal_comma:
        amount_str = amount_str.replace(".", "").replace(",", ".")
    else:
        amount_str = amount_str.replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a numeric value to Decimal.

    Floats go through their shortest repr, so ``-0.24`` becomes
    ``Decimal("-0.24")`` rather than the exact binary expansion.

    Raises:
        ValueError: If the value is not a number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        return parse_amount(value)
    raise ValueError(f"Not an amount: {value!r}")
