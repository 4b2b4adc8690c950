# -*- coding: utf-8 -*-
"""
Debited Amount Extraction

Supported formats:
- attached fraction:  Спишется 123,20 р.
- whole amount:       Спишется 123 руб.
- rubles + kopecks:   Спишется 123 руб 20 коп
- kopecks only:       Спишется 20 коп
"""

from decimal import Decimal
from typing import Optional

from app.parser.extract_field import extract_field
from app.parser.types import FieldExtraction, FieldName


def extract_amount_field(text: str) -> FieldExtraction:
    return extract_field(text, FieldName.AMOUNT)


def extract_debited_amount(text: str) -> Optional[Decimal]:
    """
    Extract the debited amount.

    Returns:
        Decimal amount, or None when missing or ambiguous
    """
    return extract_amount_field(text).value
