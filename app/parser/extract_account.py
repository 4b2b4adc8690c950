# -*- coding: utf-8 -*-
"""
Receiver Account Extraction

Exactly one receiver line is accepted, e.g. "Перевод на счет 410011995006381".
Account numbers are 13 to 16 digits; a longer number never matches.
"""

from typing import Optional

from app.parser.extract_field import extract_field
from app.parser.types import FieldExtraction, FieldName


def extract_account_field(text: str) -> FieldExtraction:
    return extract_field(text, FieldName.ACCOUNT)


def extract_receiver_account(text: str) -> Optional[str]:
    """Receiver account digits, or None when missing or ambiguous."""
    return extract_account_field(text).value
