"""Parsing and ordering helpers."""

from siewriter.utils.amount_parser import parse_amount, to_decimal
from siewriter.utils.date_parser import format_sie_date, parse_date
from siewriter.utils.identifiers import identifier_sort_key

__all__ = [
    "parse_amount",
    "to_decimal",
    "parse_date",
    "format_sie_date",
    "identifier_sort_key",
]
