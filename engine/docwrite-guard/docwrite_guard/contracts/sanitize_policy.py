# docwrite_guard/contracts/sanitize_policy.py
"""
docwrite_guard.contracts.sanitize_policy

Purpose:
    Defines document-store sanitation conventions.
    Centralizes special token strings, field-name restrictions and the undefined marker.
"""

from __future__ import annotations

from dataclasses import dataclass


class _Undefined:
    """
    Explicit "undefined" marker.

    Python has no undefined value distinct from None; callers that build payloads
    from optional sources put UNDEFINED where a field has no value at all.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class SanitizePolicy:
    max_depth_token: str = "<max_depth_exceeded>"
    reserved_characters: tuple[str, ...] = (".", "/")
    max_field_name_bytes: int = 1500
    root_label: str = "<root>"


DEFAULT_POLICY = SanitizePolicy()
