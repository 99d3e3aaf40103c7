"""Date parsing and formatting utilities."""

from datetime import date, datetime
import re
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

SIE_DATE_FORMAT = "%Y%m%d"

_COMPACT_DATE = re.compile(r"^\d{8}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports the compact SIE form ("20150105") as well as anything
    dateutil understands ("2015-01-05", "5 Jan 2015", ...).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if date_str is None or not str(date_str).strip():
        raise ValueError("Empty date string")

    date_str = str(date_str).strip()

    if _COMPACT_DATE.match(date_str):
        try:
            return datetime.strptime(date_str, SIE_DATE_FORMAT).date()
        except ValueError as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}")

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def format_sie_date(value: Union[date, datetime]) -> str:
    """Render a date as the 8-digit YYYYMMDD form used in SIE files."""
    return value.strftime(SIE_DATE_FORMAT)


def calendar_year(year: int) -> tuple[date, date]:
    """Return the first and last day of a calendar year."""
    return (date(year, 1, 1), date(year, 12, 31))


def shift_years(value: date, years: int) -> date:
    """Shift a date by whole years, clamping Feb 29 to Feb 28."""
    return value + relativedelta(years=years)
