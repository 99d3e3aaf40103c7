"""Tests for SIE field escaping."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from siewriter.domain.errors import DomainError, UnsupportedFieldTypeError
from siewriter.export.encoding import encode_document, escape_field, to_codepage


def test_plain_token_unquoted():
    assert escape_field("Kundfordringar") == "Kundfordringar"


def test_space_is_quoted():
    assert escape_field("My company") == '"My company"'


def test_empty_is_quoted():
    assert escape_field("") == '""'


def test_quote_is_escaped():
    assert escape_field('say "hi"') == '"say \\"hi\\""'
    assert escape_field('"') == '\\"'


def test_control_characters_removed():
    """Control characters are dropped, a tab does not cause quoting."""
    assert escape_field("a\tb\r\nc\x7f") == "abc"
    assert escape_field("\x01\x1f") == '""'


def test_swedish_characters_kept():
    """Characters of code page 437 survive and encode to single bytes."""
    assert escape_field("Öresutjämning") == "Öresutjämning"
    assert encode_document("Öresutjämning") == b"\x99resutj\x84mning"


def test_unrepresentable_characters_dropped():
    """Characters outside code page 437 are lost."""
    assert to_codepage("Kr€dit") == "Krdit"
    assert escape_field("€") == '""'


@pytest.mark.parametrize(
    "value, expected",
    [
        (1511, "1511"),
        (-1, "-1"),
        (-0.24, "-0.24"),
        (100.0, "100"),
        (-2.0, "-2"),
        (1e-07, "0.0000001"),
        (Decimal("1000.00"), "1000.00"),
        (Decimal("1E+3"), "1000"),
        (date(2015, 1, 5), "20150105"),
        (datetime(2015, 1, 5, 12, 30), "20150105"),
    ],
)
def test_scalar_formatting(value, expected):
    assert escape_field(value) == expected


@pytest.mark.parametrize("value", [None, True, object(), {"a": 1}])
def test_unsupported_types(value):
    with pytest.raises(UnsupportedFieldTypeError):
        escape_field(value)


def test_unsupported_type_is_domain_error():
    with pytest.raises(DomainError):
        escape_field(b"bytes")
