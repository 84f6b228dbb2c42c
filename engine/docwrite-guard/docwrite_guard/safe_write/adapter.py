"""
docwrite_guard.safe_write.adapter

Purpose:
    Prepare write payloads for a path-addressed document store.
    Partial updates ({"a.b": value, ...}) are validated one field path at a time and merged
    into a single flat update payload; whole documents go through the engine entrypoint.

Notes:
    - The actual write belongs to the caller's store client; nothing here performs I/O.
    - Each update value is walked with its field path as prefix and starting depth equal to
      its number of segments, so messages and depth limits match the stored document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from docwrite_guard.api.validate import OptionsLike, validate_for_firestore_like_store
from docwrite_guard.config.options import coerce_options
from docwrite_guard.contracts.enums import FindingCategory, Operation
from docwrite_guard.contracts.result import ValidationResult
from docwrite_guard.contracts.sanitize_policy import DEFAULT_POLICY, SanitizePolicy
from docwrite_guard.errors import UnsafeWriteError
from docwrite_guard.reporting.report_builder import build_context, build_result
from docwrite_guard.utils.logging import get_logger, write_logger
from docwrite_guard.validation.paths import field_path_segments, printable
from docwrite_guard.validation.rules import Finding, RuleValidator, check_document_size
from docwrite_guard.validation.sanitizer import Correction, RecursiveSanitizer
from docwrite_guard.validation.size import estimate_document_bytes

_log = get_logger(__name__)


@dataclass(frozen=True)
class SafeWritePayload:
    data: Dict[str, Any] = field(default_factory=dict)
    validation: Optional[ValidationResult] = None


def _conflicts(paths: List[str]) -> Dict[str, str]:
    """Map each path to an earlier path it overlaps with ("a" vs "a.b"); the store rejects both."""
    out: Dict[str, str] = {}
    for i, later in enumerate(paths):
        for earlier in paths[:i]:
            if later.startswith(earlier + ".") or earlier.startswith(later + "."):
                out[later] = earlier
                break
    return out


class SafeWriteAdapter:
    def __init__(
        self,
        path: str,
        options: OptionsLike = None,
        *,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
        policy: SanitizePolicy = DEFAULT_POLICY,
    ):
        self.path = path
        self.options = coerce_options(options)
        self.policy = policy
        self._logger = logger or _log

    def prepare_safe_update(self, field_paths_to_values: Mapping[str, Any]) -> SafeWritePayload:
        """
        Validate and sanitize each dotted field path independently, then merge.

        Invalid or conflicting field paths and values that sanitize away are left out of
        the payload; every problem is reported on the combined ValidationResult.
        """
        opts = self.options
        findings: List[Finding] = []
        corrections: List[Correction] = []
        nodes = 0
        merged: Dict[str, Any] = {}

        sanitizer = RecursiveSanitizer(opts, self.policy)
        validator = RuleValidator(opts, self.policy)

        segments_by_path = {p: field_path_segments(p, self.policy) for p in field_paths_to_values}
        conflicts = _conflicts([p for p, segs in segments_by_path.items() if segs is not None])

        for field_path, value in field_paths_to_values.items():
            shown = printable(field_path)
            label = shown or self.policy.root_label
            segments = segments_by_path[field_path]
            if segments is None:
                findings.append(Finding(label, f"invalid field path '{shown}'", FindingCategory.STRUCTURAL_ERROR))
                continue
            if field_path in conflicts:
                findings.append(
                    Finding(
                        label,
                        f"conflicts with field path '{conflicts[field_path]}'",
                        FindingCategory.STRUCTURAL_ERROR,
                    )
                )
                continue

            depth = len(segments)
            if depth > opts.max_depth:
                findings.append(Finding(label, "field path exceeds max depth", FindingCategory.STRUCTURAL_ERROR))
                continue

            findings.extend(validator.run(value, path_prefix=field_path, start_depth=depth).findings)
            outcome = sanitizer.run(value, path_prefix=field_path, start_depth=depth)
            corrections.extend(outcome.corrections)
            nodes += outcome.nodes_visited
            if not outcome.removed:
                merged[field_path] = outcome.clean_value

        size = estimate_document_bytes(merged)
        findings.extend(check_document_size(size, opts.max_document_bytes, policy=self.policy))

        result = build_result(
            merged,
            build_context(corrections, nodes_visited=nodes, estimated_size_bytes=size),
            findings,
            strict=opts.strict,
            include_sanitized=True,
            path=self.path,
            operation=Operation.UPDATE,
        )

        log = write_logger(self._logger, self.path, Operation.UPDATE.value, strict=opts.strict)
        log.debug(
            "prepared update fields=%d kept=%d errors=%d warnings=%d",
            len(field_paths_to_values),
            len(merged),
            len(result.errors),
            len(result.warnings),
        )
        return SafeWritePayload(data=dict(result.sanitized_data or {}), validation=result)

    def prepare_safe_document(
        self,
        data: Mapping[str, Any],
        operation: Union[str, Operation] = Operation.CREATE,
    ) -> SafeWritePayload:
        """Whole-document variant: one walk from the document root."""
        result = validate_for_firestore_like_store(
            data,
            self.path,
            operation,
            self.options.model_copy(update={"sanitize_on_validation": True}),
            logger=self._logger,
            policy=self.policy,
        )
        clean = result.sanitized_data
        return SafeWritePayload(data=dict(clean) if isinstance(clean, Mapping) else {}, validation=result)


def require_valid(payload: SafeWritePayload) -> Dict[str, Any]:
    """
    Return the payload data, or raise UnsafeWriteError when validation failed.
    For callers whose policy is "reject the write" rather than "write the cleaned version".
    """
    result = payload.validation
    if result is not None and not result.is_valid:
        raise UnsafeWriteError(path=result.path, errors=result.errors)
    return payload.data
