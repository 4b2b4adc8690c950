# -*- coding: utf-8 -*-
"""
Line Matcher

Applies one field pattern to every physical line of a message.

A pattern must describe a whole line: leading/trailing blanks are tolerated,
anything else on the line makes it a non-match. Lines are split with
str.splitlines(), so "\\n", "\\r\\n" and a lone "\\r" each count as a single
break and a match can never run into the next line.
"""

from typing import Optional

from app.parser.types import AmountShape, FieldPattern, MatchOutcome


def _captures(pattern: FieldPattern, line: str) -> Optional[dict]:
    match = pattern.line_regex.fullmatch(line)
    if not match:
        return None

    groups = {name: match.group(name) for name in pattern.groups}
    # Both halves of "123 руб 20 коп" are optional, but not at the same time
    if pattern.shape is AmountShape.WHOLE_PLUS_SUBUNIT:
        if groups["integer"] is None and groups["subunit"] is None:
            return None
    return groups


def match_lines(pattern: FieldPattern, text: str) -> MatchOutcome:
    """
    Match a pattern against each line of the message.

    Args:
        pattern: compiled field pattern
        text: full confirmation message

    Returns:
        MatchOutcome: NONE, ONE (with its captures) or MANY (with the count)
    """
    if not text:
        return MatchOutcome.from_captures([])

    captures = []
    for line in text.splitlines():
        groups = _captures(pattern, line)
        if groups is not None:
            captures.append(groups)
    return MatchOutcome.from_captures(captures)
