# -*- coding: utf-8 -*-
"""
Pattern Registry

Loads the per-field ordered pattern lists from app/parser/patterns.yaml.
The file ships with the package and is read once per process.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from app.parser.errors import PatternRegistryError, PatternRegistryErrorCode
from app.parser.types import AmountShape, FieldName, FieldPattern

_PATTERNS_PATH = Path(__file__).resolve().parent / "patterns.yaml"


def _compile_entry(field: FieldName, entry: Any) -> FieldPattern:
    if not isinstance(entry, dict) or not entry.get("name") or not entry.get("regex"):
        raise PatternRegistryError.from_code(
            PatternRegistryErrorCode.INVALID_ENTRY, field=field.value
        )

    name = str(entry["name"])
    body = str(entry["regex"])

    shape: Optional[AmountShape] = None
    if field is FieldName.AMOUNT:
        try:
            shape = AmountShape(entry.get("shape"))
        except ValueError:
            raise PatternRegistryError.from_code(
                PatternRegistryErrorCode.INVALID_SHAPE, name=name, shape=entry.get("shape")
            )

    flags = re.IGNORECASE if entry.get("ignore_case") else 0
    try:
        regex = re.compile(body, flags)
        # The body must cover a whole line; surrounding blanks are incidental.
        line_regex = re.compile(rf"\s*(?:{body})\s*", flags)
    except re.error as e:
        raise PatternRegistryError.from_code(
            PatternRegistryErrorCode.INVALID_REGEX, name=name, error=str(e)
        )

    pattern = FieldPattern(
        name=name,
        field=field,
        regex=regex,
        line_regex=line_regex,
        shape=shape,
    )
    missing = [g for g in pattern.groups if g not in regex.groupindex]
    if missing:
        raise PatternRegistryError.from_code(
            PatternRegistryErrorCode.MISSING_GROUP, name=name, groups=", ".join(missing)
        )
    return pattern


def build_registry(data: Any) -> dict[FieldName, tuple[FieldPattern, ...]]:
    """
    Validate and compile a pattern document.

    Args:
        data: mapping of field name -> list of pattern entries

    Returns:
        dict: FieldName -> ordered tuple of FieldPattern (every field present)

    Raises:
        PatternRegistryError: the document is malformed
    """
    if not isinstance(data, dict):
        raise PatternRegistryError.from_code(PatternRegistryErrorCode.INVALID_DOCUMENT)

    registry: dict[FieldName, tuple[FieldPattern, ...]] = {f: () for f in FieldName}
    for key, entries in data.items():
        try:
            field = FieldName.from_string(str(key))
        except ValueError:
            raise PatternRegistryError.from_code(
                PatternRegistryErrorCode.UNKNOWN_FIELD, field=key
            )
        if not isinstance(entries, list):
            raise PatternRegistryError.from_code(PatternRegistryErrorCode.INVALID_DOCUMENT)

        patterns: list[FieldPattern] = []
        seen: set[str] = set()
        for entry in entries:
            pattern = _compile_entry(field, entry)
            if pattern.name in seen:
                raise PatternRegistryError.from_code(
                    PatternRegistryErrorCode.DUPLICATE_NAME, field=field.value, name=pattern.name
                )
            seen.add(pattern.name)
            patterns.append(pattern)
        registry[field] = tuple(patterns)
    return registry


def load_registry(path: Path) -> dict[FieldName, tuple[FieldPattern, ...]]:
    """Load and compile a YAML pattern file."""
    if not path.exists():
        raise PatternRegistryError.from_code(PatternRegistryErrorCode.MISSING_FILE, path=str(path))

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return build_registry(data)


@lru_cache(maxsize=1)
def _default_registry() -> dict[FieldName, tuple[FieldPattern, ...]]:
    return load_registry(_PATTERNS_PATH)


def get_patterns(field: FieldName) -> tuple[FieldPattern, ...]:
    """Ordered patterns for a field (first usable match wins)."""
    return _default_registry()[field]
