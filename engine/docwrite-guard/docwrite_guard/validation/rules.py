"""
docwrite_guard.validation.rules

Purpose:
    Policy rules over the same walk shape as the sanitizer. Produces ordered findings
    (pre-order, depth-first) with path-prefixed messages such as ``events[0].title: ...``.

Rules:
    - UNDEFINED marker            -> policy error unless allow_undefined (then treated as None)
    - None                        -> policy error unless allow_null_values
    - function / unsupported type -> structural error, always
    - NaN / Infinity              -> structural error, always
    - circular reference          -> structural error, always
    - invalid field name          -> structural error at the owning object's path
    - container cut at max depth  -> depth warning (strict mode promotes it later)

Findings are collected, never raised: one bad field must not hide the others.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Set, Tuple

from docwrite_guard.config.options import ValidationOptions
from docwrite_guard.contracts.enums import WARNING_CATEGORIES, FindingCategory, ForbiddenReason, ValueKind
from docwrite_guard.contracts.sanitize_policy import DEFAULT_POLICY, UNDEFINED, SanitizePolicy
from docwrite_guard.validation.classifier import describe, type_label
from docwrite_guard.validation.paths import (
    display_path,
    field_name_problem,
    field_path_segments,
    join_index,
    join_key,
    printable,
)


@dataclass(frozen=True)
class Finding:
    path: str
    message: str
    category: FindingCategory

    @property
    def is_warning(self) -> bool:
        return self.category in WARNING_CATEGORIES

    def render(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class RuleFindings:
    findings: Tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def errors(self) -> List[str]:
        return [f.render() for f in self.findings if not f.is_warning]

    @property
    def warnings(self) -> List[str]:
        return [f.render() for f in self.findings if f.is_warning]


class RuleValidator:
    def __init__(self, options: ValidationOptions, policy: SanitizePolicy = DEFAULT_POLICY):
        self.options = options
        self.policy = policy
        self._findings: List[Finding] = []
        self._active: Set[int] = set()

    def run(self, value: Any, *, path_prefix: str = "", start_depth: int = 0) -> RuleFindings:
        self._findings = []
        self._active = set()
        self._walk(value, path_prefix, start_depth)
        return RuleFindings(tuple(self._findings))

    def _add(self, path: str, message: str, category: FindingCategory) -> None:
        self._findings.append(Finding(display_path(path, self.policy), message, category))

    def _walk(self, value: Any, path: str, depth: int) -> None:
        info = describe(value)

        if info.sanitizable:
            oid = id(value)
            if oid in self._active:
                self._add(path, "circular reference not allowed", FindingCategory.STRUCTURAL_ERROR)
                return
            if depth >= self.options.max_depth and len(value) > 0:
                self._add(path, "truncated at max depth", FindingCategory.DEPTH_WARNING)
                return

            self._active.add(oid)
            try:
                if info.kind is ValueKind.OBJECT:
                    self._walk_object(value, path, depth)
                else:
                    for i, child in enumerate(value):
                        self._walk(child, join_index(path, i), depth + 1)
            finally:
                self._active.discard(oid)
            return

        if info.kind is ValueKind.NULL:
            if not self.options.allow_null_values:
                self._add(path, "null value not allowed", FindingCategory.POLICY_ERROR)
            return

        if info.kind is ValueKind.FORBIDDEN:
            self._forbidden(value, info.reason, path)

    def _walk_object(self, value: Mapping[Any, Any], path: str, depth: int) -> None:
        for key, child in value.items():
            if field_name_problem(key, self.policy) is not None:
                self._add(path, f"invalid field name '{printable(key)}'", FindingCategory.STRUCTURAL_ERROR)
                continue
            self._walk(child, join_key(path, key), depth + 1)

    def _forbidden(self, value: Any, reason: Optional[ForbiddenReason], path: str) -> None:
        if reason is ForbiddenReason.UNDEFINED:
            if not self.options.allow_undefined:
                self._add(path, "undefined value not allowed", FindingCategory.POLICY_ERROR)
            elif not self.options.allow_null_values:
                # allow_undefined writes None, which the null policy still governs
                self._add(path, "null value not allowed", FindingCategory.POLICY_ERROR)
            return
        if reason is ForbiddenReason.NON_FINITE:
            self._add(path, "non-finite number not allowed", FindingCategory.STRUCTURAL_ERROR)
            return
        self._add(
            path,
            f"unsupported value type '{type_label(value, reason)}'",
            FindingCategory.STRUCTURAL_ERROR,
        )


def validate_rules(
    value: Any,
    options: ValidationOptions | None = None,
    path_prefix: str = "",
    *,
    start_depth: int = 0,
    policy: SanitizePolicy = DEFAULT_POLICY,
) -> RuleFindings:
    return RuleValidator(options or ValidationOptions(), policy).run(
        value, path_prefix=path_prefix, start_depth=start_depth
    )


def _resolve(data: Any, segments: Sequence[str]) -> Any:
    cur = data
    for seg in segments:
        if not isinstance(cur, Mapping) or seg not in cur:
            return UNDEFINED
        cur = cur[seg]
    return cur


def check_required_fields(
    data: Any,
    required_fields: Sequence[str],
    *,
    policy: SanitizePolicy = DEFAULT_POLICY,
) -> List[Finding]:
    """
    One finding per dotted path that is absent (or explicitly UNDEFINED) in ``data``.
    A path that is not a valid field path can never be present and is reported missing.
    """
    missing: List[Finding] = []
    for field_path in required_fields:
        segments = field_path_segments(field_path, policy)
        if segments is None or _resolve(data, segments) is UNDEFINED:
            missing.append(Finding(printable(field_path), "required field missing", FindingCategory.POLICY_ERROR))
    return missing


def check_document_size(
    size_bytes: int,
    limit: Optional[int],
    *,
    path: str = "",
    policy: SanitizePolicy = DEFAULT_POLICY,
) -> List[Finding]:
    if limit is None or size_bytes <= limit:
        return []
    return [
        Finding(
            display_path(path, policy),
            f"document size {size_bytes} bytes exceeds limit {limit} bytes",
            FindingCategory.STRUCTURAL_ERROR,
        )
    ]
