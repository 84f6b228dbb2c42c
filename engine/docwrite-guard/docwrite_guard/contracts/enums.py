"""
docwrite_guard/contracts/enums.py

Purpose:
    Shared enums used across classifier, sanitizer, validator and reporting to avoid circular imports.
"""

from __future__ import annotations

from enum import Enum


class ValueKind(str, Enum):
    NULL = "NULL"
    BOOL = "BOOL"
    NUMBER = "NUMBER"
    STRING = "STRING"
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"
    FORBIDDEN = "FORBIDDEN"


class ForbiddenReason(str, Enum):
    UNDEFINED = "UNDEFINED"
    FUNCTION = "FUNCTION"
    NON_FINITE = "NON_FINITE"
    CIRCULAR = "CIRCULAR"
    UNSUPPORTED = "UNSUPPORTED"


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class FindingCategory(str, Enum):
    STRUCTURAL_ERROR = "STRUCTURAL_ERROR"
    POLICY_ERROR = "POLICY_ERROR"
    DEPTH_WARNING = "DEPTH_WARNING"
    ADVISORY_WARNING = "ADVISORY_WARNING"


WARNING_CATEGORIES = frozenset({FindingCategory.DEPTH_WARNING, FindingCategory.ADVISORY_WARNING})


class CorrectionAction(str, Enum):
    REMOVED_UNDEFINED = "REMOVED_UNDEFINED"
    REPLACED_UNDEFINED = "REPLACED_UNDEFINED"
    REMOVED_FUNCTION = "REMOVED_FUNCTION"
    REMOVED_UNSUPPORTED = "REMOVED_UNSUPPORTED"
    DROPPED_FIELD_NAME = "DROPPED_FIELD_NAME"
    TRUNCATED = "TRUNCATED"
