# -*- coding: utf-8 -*-
"""
Payment Password Extraction

Exactly one password line is accepted, e.g. "Пароль: 6062".
"""

from typing import Optional

from app.parser.extract_field import extract_field
from app.parser.types import FieldExtraction, FieldName


def extract_password_field(text: str) -> FieldExtraction:
    return extract_field(text, FieldName.PASSWORD)


def extract_payment_password(text: str) -> Optional[str]:
    """
    Extract the one-time password.

    Returns:
        the digit string, or None when missing or ambiguous

    Examples:
        >>> extract_payment_password("Пароль: 6062")
        '6062'
    """
    return extract_password_field(text).value
