# -*- coding: utf-8 -*-
"""
Field Extraction Loop

Tries a field's patterns in registry order:
- no match: try the next pattern
- one match: that value wins, later patterns are not tried
- several lines match the same pattern: the field is ambiguous, stop
"""

from typing import Callable, Optional

from app.parser.line_matcher import match_lines
from app.parser.normalize_amount import normalize_amount
from app.parser.registry import get_patterns
from app.parser.types import (
    ExtractionStatus,
    FieldExtraction,
    FieldName,
    FieldPattern,
    FieldValue,
    MatchKind,
)


def _text_value(pattern: FieldPattern, captures: dict) -> FieldValue:
    return captures[pattern.field.value]


def _amount_value(pattern: FieldPattern, captures: dict) -> FieldValue:
    return normalize_amount(captures, pattern.shape)


_VALUE_BUILDERS: dict[FieldName, Callable[[FieldPattern, dict], FieldValue]] = {
    FieldName.PASSWORD: _text_value,
    FieldName.ACCOUNT: _text_value,
    FieldName.AMOUNT: _amount_value,
}


def extract_field(
    text: str,
    field: FieldName,
    patterns: Optional[tuple[FieldPattern, ...]] = None,
) -> FieldExtraction:
    """
    Extract one field from a confirmation message.

    Args:
        text: confirmation message
        field: which field to extract
        patterns: ordered patterns to try (defaults to the registry's)

    Returns:
        FieldExtraction: PRESENT with the value, AMBIGUOUS with the offending
        pattern and its match count, or NOT_FOUND
    """
    if patterns is None:
        patterns = get_patterns(field)
    build_value = _VALUE_BUILDERS[field]

    for pattern in patterns:
        outcome = match_lines(pattern, text)
        if outcome.kind is MatchKind.NONE:
            continue
        if outcome.kind is MatchKind.MANY:
            return FieldExtraction(
                field=field,
                status=ExtractionStatus.AMBIGUOUS,
                pattern_name=pattern.name,
                match_count=outcome.count,
            )
        try:
            value = build_value(pattern, outcome.single)
        except ValueError:
            # Captured text that is not a valid value counts as no match
            continue
        return FieldExtraction(
            field=field,
            status=ExtractionStatus.PRESENT,
            value=value,
            pattern_name=pattern.name,
            match_count=1,
        )

    return FieldExtraction(field=field, status=ExtractionStatus.NOT_FOUND)
