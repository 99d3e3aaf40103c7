"""Tests for date parsing and formatting."""

import pytest
from datetime import date, datetime
from siewriter.utils.date_parser import calendar_year, format_sie_date, parse_date, shift_years


def test_parse_compact_date():
    """Test parsing the 8-digit SIE form."""
    assert parse_date("20150105") == date(2015, 1, 5)


def test_parse_iso_date():
    assert parse_date("2015-01-05") == date(2015, 1, 5)


def test_parse_with_whitespace():
    assert parse_date("  20150105 ") == date(2015, 1, 5)


def test_parse_textual_date():
    assert parse_date("5 January 2015") == date(2015, 1, 5)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_parse_empty(value):
    with pytest.raises(ValueError):
        parse_date(value)


@pytest.mark.parametrize("value", ["20151301", "not a date"])
def test_parse_invalid(value):
    with pytest.raises(ValueError) as excinfo:
        parse_date(value)
    assert "Could not parse date" in str(excinfo.value)


def test_format_sie_date():
    assert format_sie_date(date(2015, 1, 5)) == "20150105"
    assert format_sie_date(datetime(2015, 12, 31, 23, 59)) == "20151231"


def test_calendar_year():
    assert calendar_year(2016) == (date(2016, 1, 1), date(2016, 12, 31))


def test_shift_years():
    assert shift_years(date(2015, 6, 30), -1) == date(2014, 6, 30)
    assert shift_years(date(2016, 2, 29), -1) == date(2015, 2, 28)
