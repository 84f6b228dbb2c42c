"""
docwrite_guard.validation.paths

Path addressing for findings: dot notation for object keys, brackets for array indices,
e.g. ``events[0].title``. Also field-name rules of path-addressed document stores.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Tuple

from docwrite_guard.contracts.sanitize_policy import DEFAULT_POLICY, SanitizePolicy

_RESERVED_NAME = re.compile(r"^__.*__$")


def join_key(prefix: str, key: Any) -> str:
    k = str(key)
    return f"{prefix}.{k}" if prefix else k


def join_index(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def display_path(path: str, policy: SanitizePolicy = DEFAULT_POLICY) -> str:
    return path or policy.root_label


def field_name_problem(key: Any, policy: SanitizePolicy = DEFAULT_POLICY) -> Optional[str]:
    """
    Return a short reason if ``key`` cannot be stored as a field name, else None.
    """
    if not isinstance(key, str):
        return f"non-string key of type {type(key).__name__}"
    if not key:
        return "empty field name"
    for ch in policy.reserved_characters:
        if ch in key:
            return f"contains reserved character {ch!r}"
    if _RESERVED_NAME.match(key):
        return "matches reserved pattern __.*__"
    try:
        size = len(key.encode("utf-8"))
    except UnicodeEncodeError:
        return "not valid UTF-8"
    if size > policy.max_field_name_bytes:
        return f"longer than {policy.max_field_name_bytes} bytes"
    return None


def is_valid_field_name(key: Any, policy: SanitizePolicy = DEFAULT_POLICY) -> bool:
    return field_name_problem(key, policy) is None


def field_path_segments(field_path: Any, policy: SanitizePolicy = DEFAULT_POLICY) -> Optional[Tuple[str, ...]]:
    """
    Split a dotted update path ("a.b.c") into segments, or return None when the path is not
    a non-empty string or any segment is not a valid field name.
    """
    if not isinstance(field_path, str) or not field_path:
        return None
    segments = tuple(field_path.split("."))
    if any(field_name_problem(seg, policy) is not None for seg in segments):
        return None
    return segments


def printable(text: Any) -> str:
    """Render keys and paths for messages; unencodable characters become backslash escapes."""
    return str(text).encode("utf-8", "backslashreplace").decode("utf-8")
