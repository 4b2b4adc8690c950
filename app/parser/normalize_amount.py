# -*- coding: utf-8 -*-
"""
Amount Normalization

Turns the captured groups of one amount match into a Decimal.
Supported shapes:
- attached fraction:   Спишется 123,20 р.     -> integer=123, fraction="20"
- whole plus subunit:  Спишется 123 руб 20 коп -> integer=123, subunit=20
"""

from decimal import Decimal
from typing import Optional

from app.parser.types import AmountShape


def normalize_attached_fraction(integer: str, fraction: Optional[str]) -> Decimal:
    """
    integer + fraction / 10 ** len(fraction).

    Built from the digit strings, so any number of integer digits is exact.

    Examples:
        >>> normalize_attached_fraction("123", "2")
        Decimal('123.20')
        >>> normalize_attached_fraction("123", "")
        Decimal('123')
    """
    if not integer or not integer.isdecimal():
        raise ValueError(f"Invalid integer part: {integer!r}")
    if not fraction:
        return Decimal(integer)
    if len(fraction) > 2 or not fraction.isdecimal():
        raise ValueError(f"Fraction is not one or two digits: {fraction}")
    # ",5" is five tenths: pad on the right to hundredths
    return Decimal(f"{integer}.{fraction:0<2}")


def normalize_whole_plus_subunit(integer: Optional[str], subunit: Optional[str]) -> Decimal:
    """integer (or 0) + subunit / 100 (or 0); at least one must be given."""
    if integer is None and subunit is None:
        raise ValueError("Neither whole units nor subunits were captured")
    if integer is not None and (not integer or not integer.isdecimal()):
        raise ValueError(f"Invalid integer part: {integer!r}")

    whole = integer if integer is not None else "0"
    if subunit is None:
        return Decimal(whole)

    if not subunit.isdecimal() or len(subunit) > 2:
        raise ValueError(f"Subunit out of range: {subunit}")
    return Decimal(f"{whole}.{int(subunit):02d}")


def normalize_amount(captures: dict, shape: AmountShape) -> Decimal:
    """
    Normalize one amount match.

    Args:
        captures: named groups of the match
        shape: the pattern's amount shape

    Returns:
        Decimal: non-negative amount, two places when a fractional part is present

    Raises:
        ValueError: the captures do not form a valid amount
    """
    if shape is AmountShape.ATTACHED_FRACTION:
        return normalize_attached_fraction(captures["integer"], captures.get("fraction"))
    return normalize_whole_plus_subunit(captures.get("integer"), captures.get("subunit"))
