# -*- coding: utf-8 -*-
"""
Confirmation Parser

Extracts the one-time password, the receiver account and the debited amount
from a payment confirmation message. The result is all-or-nothing: when any
of the three fields is missing or ambiguous, nothing is returned.

Main entry points:
- parse_confirmation(text: str) -> Optional[ParsedConfirmation]
- inspect_confirmation(text: str) -> ConfirmationReport

Usage:
    from app.parser import parse_confirmation
    confirmation = parse_confirmation(
        "Пароль: 6062\\nСпишется 123,20р.\\nПеревод на счет 410011995006381"
    )
"""

from typing import Optional

from app.parser.types import (
    AmountShape,
    ConfirmationReport,
    ExtractionStatus,
    FieldExtraction,
    FieldName,
    ParsedConfirmation,
)
from app.parser.errors import PatternRegistryError, PatternRegistryErrorCode


def inspect_confirmation(text: Optional[str]) -> ConfirmationReport:
    """
    Run all three field extractors over a message.

    Every field is evaluated even when another one already failed, so the
    report can say which fields were missing and which were ambiguous.

    Args:
        text: confirmation message (any line endings)

    Returns:
        ConfirmationReport: per-field extractions and the combined result
    """
    from app.parser.extract_password import extract_password_field
    from app.parser.extract_account import extract_account_field
    from app.parser.extract_amount import extract_amount_field

    text = text or ""

    password = extract_password_field(text)
    account = extract_account_field(text)
    amount = extract_amount_field(text)

    result = None
    if password.is_present and account.is_present and amount.is_present:
        result = ParsedConfirmation(
            password=password.value,
            account=account.value,
            amount=amount.value,
        )

    return ConfirmationReport(
        password=password,
        account=account,
        amount=amount,
        result=result,
    )


def parse_confirmation(text: Optional[str]) -> Optional[ParsedConfirmation]:
    """
    Parse a confirmation message.

    Returns:
        ParsedConfirmation, or None if not all three fields were found
    """
    return inspect_confirmation(text).result


# Export
__all__ = [
    "parse_confirmation",
    "inspect_confirmation",
    "ParsedConfirmation",
    "ConfirmationReport",
    "FieldExtraction",
    "FieldName",
    "AmountShape",
    "ExtractionStatus",
    "PatternRegistryError",
    "PatternRegistryErrorCode",
]
