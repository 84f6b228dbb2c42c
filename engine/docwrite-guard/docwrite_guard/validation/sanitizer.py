"""
docwrite_guard.validation.sanitizer

Purpose:
    Rewrite an arbitrary value graph into a persistable copy, recording every correction.

Rules (depth-first, pre-order; the root sits at depth 0):
    - A non-empty container at depth == max_depth is replaced by the max-depth token,
      so the output never nests deeper than max_depth.
    - Object keys that are not valid field names are dropped (their values are not walked).
    - Forbidden values become REMOVED: omitted from objects, dropped from arrays (arrays stay dense).
      With allow_undefined, the UNDEFINED marker is written as None instead.
    - A container already on the active walk path is a circular reference and is removed.
    - Primitives (including None) pass through unchanged.

The input is never mutated and this module never raises for data problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from docwrite_guard.config.options import ValidationOptions
from docwrite_guard.contracts.enums import CorrectionAction, ForbiddenReason, ValueKind
from docwrite_guard.contracts.sanitize_policy import DEFAULT_POLICY, SanitizePolicy
from docwrite_guard.validation.classifier import describe, type_label
from docwrite_guard.validation.paths import display_path, field_name_problem, join_index, join_key, printable


class _Removed:
    """Internal "removed" marker; never returned to callers."""

    def __repr__(self) -> str:
        return "<removed>"


REMOVED = _Removed()


@dataclass(frozen=True)
class Correction:
    path: str
    action: CorrectionAction
    detail: str = ""


@dataclass(frozen=True)
class SanitizeOutcome:
    clean_value: Any
    removed: bool
    corrections: Tuple[Correction, ...] = field(default_factory=tuple)
    nodes_visited: int = 0

    def count(self, action: CorrectionAction) -> int:
        return sum(1 for c in self.corrections if c.action is action)


class RecursiveSanitizer:
    def __init__(self, options: ValidationOptions, policy: SanitizePolicy = DEFAULT_POLICY):
        self.options = options
        self.policy = policy
        self._corrections: List[Correction] = []
        self._active: Set[int] = set()
        self._visited = 0

    def run(self, value: Any, *, path_prefix: str = "", start_depth: int = 0) -> SanitizeOutcome:
        self._corrections = []
        self._active = set()
        self._visited = 0

        out = self._walk(value, path_prefix, start_depth)
        removed = out is REMOVED
        return SanitizeOutcome(
            clean_value=None if removed else out,
            removed=removed,
            corrections=tuple(self._corrections),
            nodes_visited=self._visited,
        )

    def _record(self, path: str, action: CorrectionAction, detail: str = "") -> None:
        self._corrections.append(Correction(display_path(path, self.policy), action, detail))

    def _walk(self, value: Any, path: str, depth: int) -> Any:
        self._visited += 1
        info = describe(value)

        if info.sanitizable:
            oid = id(value)
            if oid in self._active:
                self._record(path, CorrectionAction.REMOVED_UNSUPPORTED, ForbiddenReason.CIRCULAR.value)
                return REMOVED
            if depth >= self.options.max_depth and len(value) > 0:
                self._record(path, CorrectionAction.TRUNCATED, f"depth {depth}")
                return self.policy.max_depth_token

            self._active.add(oid)
            try:
                if info.kind is ValueKind.OBJECT:
                    return self._walk_object(value, path, depth)
                return self._walk_array(value, path, depth)
            finally:
                self._active.discard(oid)

        if info.kind is ValueKind.FORBIDDEN:
            return self._forbidden(value, info.reason, path)

        return value

    def _walk_object(self, value: Mapping[Any, Any], path: str, depth: int) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key, child in value.items():
            if field_name_problem(key, self.policy) is not None:
                self._record(path, CorrectionAction.DROPPED_FIELD_NAME, printable(key))
                continue
            cleaned = self._walk(child, join_key(path, key), depth + 1)
            if cleaned is REMOVED:
                continue
            out[key] = cleaned
        return out

    def _walk_array(self, value: Any, path: str, depth: int) -> List[Any]:
        out: List[Any] = []
        for i, child in enumerate(value):
            cleaned = self._walk(child, join_index(path, i), depth + 1)
            if cleaned is REMOVED:
                continue
            out.append(cleaned)
        return out

    def _forbidden(self, value: Any, reason: Optional[ForbiddenReason], path: str) -> Any:
        if reason is ForbiddenReason.UNDEFINED:
            if self.options.allow_undefined:
                self._record(path, CorrectionAction.REPLACED_UNDEFINED)
                return None
            self._record(path, CorrectionAction.REMOVED_UNDEFINED)
            return REMOVED

        if reason is ForbiddenReason.FUNCTION:
            self._record(path, CorrectionAction.REMOVED_FUNCTION, type_label(value, reason))
            return REMOVED

        # NON_FINITE / UNSUPPORTED, and any reason added later
        self._record(path, CorrectionAction.REMOVED_UNSUPPORTED, type_label(value, reason))
        return REMOVED


def sanitize(
    value: Any,
    options: ValidationOptions | None = None,
    *,
    path_prefix: str = "",
    start_depth: int = 0,
    policy: SanitizePolicy = DEFAULT_POLICY,
) -> SanitizeOutcome:
    """
    Return a persistable copy of ``value`` plus the correction log.

    ``start_depth`` lets callers sanitize a value that will be written below the document
    root (e.g. the value of update path "a.b" starts at depth 2).
    """
    return RecursiveSanitizer(options or ValidationOptions(), policy).run(
        value, path_prefix=path_prefix, start_depth=start_depth
    )
