"""Ordering helpers for SIE identifiers."""

from typing import Union


def identifier_sort_key(identifier: Union[str, int]) -> tuple[int, int, str]:
    """Return a sort key for an account, object or verification identifier.

    Identifiers made of decimal digits compare numerically and sort before
    identifiers containing other characters, which compare as text.

    Args:
        identifier: Identifier as given by the caller

    Returns:
        Tuple usable as a ``sorted`` key
    """
    text = str(identifier).strip()
    if text.isdecimal():
        return (0, int(text), "")
    return (1, 0, text)
