"""
docwrite_guard.validation.classifier

Purpose:
    Total, side-effect free classification of arbitrary Python values into storable kinds.

Policy:
    - bool is checked before numbers (bool is an int subclass).
    - NaN and +/-Infinity classify as FORBIDDEN: document stores cannot round-trip them
      through their JSON-ish encodings, so they are reported rather than passed through.
    - Tuples are arrays; any Mapping is an object.
    - Anything unrecognized (sets, bytes, datetimes, arbitrary objects) is FORBIDDEN,
      never an exception.
    - Strings with lone surrogates cannot be stored as UTF-8 and are FORBIDDEN as well.
    - CIRCULAR is never produced here; only a walker knows which containers are on its path.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from docwrite_guard.contracts.enums import ForbiddenReason, ValueKind
from docwrite_guard.contracts.sanitize_policy import UNDEFINED

_CONTAINER_KINDS = (ValueKind.ARRAY, ValueKind.OBJECT)


@dataclass(frozen=True)
class Classification:
    kind: ValueKind
    reason: Optional[ForbiddenReason] = None

    @property
    def sanitizable(self) -> bool:
        """Containers are rebuilt in place by the sanitizer; everything else passes or is removed."""
        return self.kind in _CONTAINER_KINDS


def _utf8_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def describe(value: Any) -> Classification:
    if value is None:
        return Classification(ValueKind.NULL)
    if value is UNDEFINED:
        return Classification(ValueKind.FORBIDDEN, ForbiddenReason.UNDEFINED)
    if isinstance(value, bool):
        return Classification(ValueKind.BOOL)
    if isinstance(value, int):
        return Classification(ValueKind.NUMBER)
    if isinstance(value, float):
        if math.isfinite(value):
            return Classification(ValueKind.NUMBER)
        return Classification(ValueKind.FORBIDDEN, ForbiddenReason.NON_FINITE)
    if isinstance(value, str):
        if not _utf8_encodable(value):
            return Classification(ValueKind.FORBIDDEN, ForbiddenReason.UNSUPPORTED)
        return Classification(ValueKind.STRING)
    if isinstance(value, (list, tuple)):
        return Classification(ValueKind.ARRAY)
    if isinstance(value, Mapping):
        return Classification(ValueKind.OBJECT)
    if callable(value):
        return Classification(ValueKind.FORBIDDEN, ForbiddenReason.FUNCTION)
    return Classification(ValueKind.FORBIDDEN, ForbiddenReason.UNSUPPORTED)


def classify(value: Any) -> ValueKind:
    return describe(value).kind


def forbidden_reason(value: Any) -> Optional[ForbiddenReason]:
    return describe(value).reason


def type_label(value: Any, reason: Optional[ForbiddenReason]) -> str:
    """Short type name used in findings ("function", "set", "datetime", ...)."""
    if reason is ForbiddenReason.FUNCTION:
        return "function"
    if isinstance(value, str):
        return "non-UTF-8 string"
    return type(value).__name__
