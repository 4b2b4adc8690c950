# -*- coding: utf-8 -*-
"""
Confirmation Parser Types

Shared value types for the confirmation parser: field names, amount shapes,
compiled field patterns, match outcomes and extraction results.
All of them are immutable once built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class FieldName(Enum):
    """Fields extracted from a confirmation message"""

    PASSWORD = "password"
    ACCOUNT = "account"
    AMOUNT = "amount"

    @classmethod
    def from_string(cls, value: str) -> "FieldName":
        """Build a FieldName from its string value"""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown field: {value}")


class AmountShape(Enum):
    """How an amount pattern spells the fractional part"""

    ATTACHED_FRACTION = "attached_fraction"     # 123,20 р.
    WHOLE_PLUS_SUBUNIT = "whole_plus_subunit"   # 123 руб 20 коп


class MatchKind(Enum):
    NONE = "none"
    ONE = "one"
    MANY = "many"


class ExtractionStatus(Enum):
    """Why a field has (or has not) a value"""

    PRESENT = "present"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


# Named groups each field/shape must declare.
REQUIRED_GROUPS: dict = {
    FieldName.PASSWORD: ("password",),
    FieldName.ACCOUNT: ("account",),
    AmountShape.ATTACHED_FRACTION: ("integer", "fraction"),
    AmountShape.WHOLE_PLUS_SUBUNIT: ("integer", "subunit"),
}


@dataclass(frozen=True)
class FieldPattern:
    """One hand-authored pattern for a field, compiled for whole-line matching"""

    name: str
    field: FieldName
    regex: re.Pattern
    line_regex: re.Pattern
    shape: Optional[AmountShape] = None

    @property
    def groups(self) -> tuple[str, ...]:
        if self.shape is not None:
            return REQUIRED_GROUPS[self.shape]
        return REQUIRED_GROUPS[self.field]


@dataclass(frozen=True)
class MatchOutcome:
    """Result of applying one pattern to every line of a message"""

    kind: MatchKind
    count: int = 0
    captures: tuple[dict, ...] = ()

    @classmethod
    def from_captures(cls, captures: list[dict]) -> "MatchOutcome":
        if not captures:
            return cls(kind=MatchKind.NONE)
        if len(captures) == 1:
            return cls(kind=MatchKind.ONE, count=1, captures=tuple(captures))
        return cls(kind=MatchKind.MANY, count=len(captures), captures=tuple(captures))

    @property
    def single(self) -> Optional[dict]:
        """Captured groups when exactly one line matched"""
        if self.kind is MatchKind.ONE:
            return self.captures[0]
        return None


FieldValue = Union[str, Decimal]


@dataclass(frozen=True)
class FieldExtraction:
    """Outcome of extracting one field (value is None unless PRESENT)"""

    field: FieldName
    status: ExtractionStatus
    value: Optional[FieldValue] = None
    pattern_name: Optional[str] = None
    match_count: int = 0

    @property
    def is_present(self) -> bool:
        return self.status is ExtractionStatus.PRESENT


@dataclass(frozen=True)
class ParsedConfirmation:
    """Password, receiver account and debited amount of one confirmation"""

    password: str
    account: str
    amount: Decimal

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dict"""
        return {
            "password": self.password,
            "account": self.account,
            "amount": str(self.amount),
        }


@dataclass(frozen=True)
class ConfirmationReport:
    """Per-field extraction details plus the all-or-nothing result"""

    password: FieldExtraction
    account: FieldExtraction
    amount: FieldExtraction
    result: Optional[ParsedConfirmation] = None

    @property
    def fields(self) -> tuple[FieldExtraction, ...]:
        return (self.password, self.account, self.amount)

    @property
    def ambiguous_fields(self) -> list[FieldExtraction]:
        return [f for f in self.fields if f.status is ExtractionStatus.AMBIGUOUS]

    def to_dict(self) -> dict:
        return {
            "status": "ok" if self.result else "not_found",
            "fields": {
                f.field.value: {
                    "status": f.status.value,
                    "pattern": f.pattern_name,
                    "match_count": f.match_count,
                }
                for f in self.fields
            },
        }
