# -*- coding: utf-8 -*-
"""
Pattern Registry Error Types

Errors raised while loading the hand-authored pattern registry.
Parsing a message never raises: missing or ambiguous fields are reported
as absence instead.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class PatternRegistryErrorCode(Enum):
    """Pattern registry error codes"""

    MISSING_FILE = "missing_file"               # patterns file not found
    INVALID_DOCUMENT = "invalid_document"       # top level is not a mapping
    UNKNOWN_FIELD = "unknown_field"             # field name not in password/account/amount
    INVALID_ENTRY = "invalid_entry"             # entry lacks name/regex
    INVALID_SHAPE = "invalid_shape"             # amount entry with unknown shape
    INVALID_REGEX = "invalid_regex"             # regex failed to compile
    MISSING_GROUP = "missing_group"             # regex lacks a required named group
    DUPLICATE_NAME = "duplicate_name"           # two entries share a name in one field


ERROR_MESSAGES = {
    PatternRegistryErrorCode.MISSING_FILE: "Pattern file not found: {path}",
    PatternRegistryErrorCode.INVALID_DOCUMENT: "Pattern file must map field names to pattern lists",
    PatternRegistryErrorCode.UNKNOWN_FIELD: "Unknown field in pattern file: {field}",
    PatternRegistryErrorCode.INVALID_ENTRY: "Pattern entry for {field} needs 'name' and 'regex'",
    PatternRegistryErrorCode.INVALID_SHAPE: "Pattern {name} has unknown amount shape: {shape}",
    PatternRegistryErrorCode.INVALID_REGEX: "Pattern {name} does not compile: {error}",
    PatternRegistryErrorCode.MISSING_GROUP: "Pattern {name} must declare named group(s): {groups}",
    PatternRegistryErrorCode.DUPLICATE_NAME: "Duplicate pattern name for {field}: {name}",
}


@dataclass
class PatternRegistryError(Exception):
    """Pattern registry authoring error"""

    code: PatternRegistryErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: PatternRegistryErrorCode, **kwargs) -> "PatternRegistryError":
        """Build the error from its code"""
        template = ERROR_MESSAGES.get(code, "Pattern registry error")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
