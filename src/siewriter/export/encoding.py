"""Field escaping and code page handling for SIE files.

SIE 4 files use the PC8 character set, i.e. IBM code page 437. Text
fields must not contain control characters (ASCII 0-31 and 127), quotation
marks are preceded by a backslash, and fields are quoted when they contain
a space or are empty.
"""

from datetime import date
from decimal import Decimal
from typing import Union

from siewriter.domain.errors import UnsupportedFieldTypeError
from siewriter.utils.date_parser import format_sie_date

CODEPAGE = "cp437"

Scalar = Union[str, int, float, Decimal, date]


def to_codepage(text: str) -> str:
    """Drop every character that has no representation in the SIE code page."""
    return text.encode(CODEPAGE, errors="ignore").decode(CODEPAGE)


def encode_document(text: str) -> bytes:
    """Encode a rendered SIE document to bytes in the SIE code page."""
    return text.encode(CODEPAGE, errors="ignore")


def format_scalar(value: Scalar) -> str:
    """Render a scalar as unescaped text.

    Raises:
        UnsupportedFieldTypeError: For any type that is not a string,
            number or date
    """
    # bool is an int subclass but has no meaning in a SIE field
    if isinstance(value, bool):
        raise UnsupportedFieldTypeError(f"Unexpected type for field: {type(value).__name__}")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        # whole floats render without a fraction, 100.0 as "100"
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, date):
        return format_sie_date(value)
    raise UnsupportedFieldTypeError(f"Unexpected type for field: {type(value).__name__}")


def escape_field(value: Scalar) -> str:
    """Escape a single field for a SIE record.

    Args:
        value: String, number or date

    Returns:
        Escaped token, quoted if it contains a space or is empty

    Raises:
        UnsupportedFieldTypeError: If the value type cannot be rendered
    """
    encoded = to_codepage(format_scalar(value))

    escaped = []
    add_quotes = False
    for char in encoded:
        code = ord(char)
        if code < 32 or code == 127:
            continue
        if char == '"':
            char = '\\"'
        elif char == " ":
            add_quotes = True
        escaped.append(char)

    result = "".join(escaped)
    if add_quotes or result == "":
        result = f'"{result}"'
    return result
