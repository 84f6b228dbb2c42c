"""
docwrite_guard.api.validate

Purpose:
    Programmatic entrypoints for pre-write validation of document-store payloads.
    Shared execution path for:
      - SafeWriteAdapter (partial updates and whole documents)
      - write-path services calling the engine directly

Design Notes:
    - No stdout printing (callers decide how to present results).
    - No environment reads; options arrive explicitly (see config.settings for env loading).
    - Raises ConfigError (ValueError) only for caller misuse: bad options or unknown operation.
    - Data problems never raise; they land in ValidationResult.errors / warnings.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from docwrite_guard.config.options import ValidationOptions, coerce_options
from docwrite_guard.contracts.enums import FindingCategory, Operation
from docwrite_guard.contracts.result import ValidationContext, ValidationResult
from docwrite_guard.contracts.sanitize_policy import DEFAULT_POLICY, SanitizePolicy
from docwrite_guard.errors import ConfigError
from docwrite_guard.reporting.report_builder import build_context, build_result, render_report
from docwrite_guard.utils.logging import get_logger, write_logger
from docwrite_guard.validation.rules import Finding, RuleValidator, check_document_size, check_required_fields
from docwrite_guard.validation.sanitizer import RecursiveSanitizer
from docwrite_guard.validation.size import estimate_document_bytes

_log = get_logger(__name__)

OptionsLike = Union[ValidationOptions, Mapping[str, Any], None]


def normalize_operation(operation: Union[str, Operation, None]) -> Operation:
    if isinstance(operation, Operation):
        return operation
    if isinstance(operation, str):
        op = operation.strip().lower()
        for candidate in Operation:
            if op == candidate.value:
                return candidate
    raise ConfigError(f"Unknown write operation: {operation!r}")


def validate_for_firestore_like_store(
    data: Any,
    path: str,
    operation: Union[str, Operation],
    options: OptionsLike = None,
    *,
    logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    policy: SanitizePolicy = DEFAULT_POLICY,
) -> ValidationResult:
    """
    Validate and sanitize one candidate document.

    Args:
        data: Arbitrary value graph (dict for a document, but any value is accepted).
        path: Caller label for the write target (e.g. "jobs/123" or "timeline-storage:123").
        operation: "create" | "update" | "delete".
        options: ValidationOptions, an options mapping, or None for defaults.
        logger: Optional logger handle; defaults to the docwrite_guard namespace logger.

    Returns:
        ValidationResult with is_valid == (not errors).

    Raises:
        ConfigError: For invalid options or an unknown operation.
    """
    op = normalize_operation(operation)
    opts = coerce_options(options)
    log = write_logger(logger or _log, path, op.value, strict=opts.strict)

    if op is Operation.DELETE:
        return _validate_delete(data, path, log, policy)

    outcome = RecursiveSanitizer(opts, policy).run(data)
    findings = list(RuleValidator(opts, policy).run(data).findings)

    if op is Operation.CREATE and opts.required_fields:
        findings.extend(check_required_fields(data, opts.required_fields, policy=policy))

    size = estimate_document_bytes(outcome.clean_value)
    findings.extend(check_document_size(size, opts.max_document_bytes, policy=policy))

    context = build_context(outcome.corrections, nodes_visited=outcome.nodes_visited, estimated_size_bytes=size)
    result = build_result(
        outcome.clean_value,
        context,
        findings,
        strict=opts.strict,
        include_sanitized=opts.sanitize_on_validation,
        path=path,
        operation=op,
    )

    _log_summary(log, result)
    return result


def _validate_delete(data: Any, path: str, log: logging.LoggerAdapter, policy: SanitizePolicy) -> ValidationResult:
    findings = []
    if data is not None:
        findings.append(
            Finding(policy.root_label, "data ignored for delete operation", FindingCategory.ADVISORY_WARNING)
        )
    result = build_result(
        None,
        ValidationContext(),
        findings,
        strict=False,
        include_sanitized=False,
        path=path,
        operation=Operation.DELETE,
    )
    _log_summary(log, result)
    return result


def _log_summary(log: logging.LoggerAdapter, result: ValidationResult) -> None:
    ctx = result.validation_context
    level = logging.DEBUG if result.is_valid else logging.INFO
    log.log(
        level,
        "validation %s errors=%d warnings=%d nodes=%d undefined_removed=%d invalid_names=%d truncated=%s",
        "passed" if result.is_valid else "failed",
        len(result.errors),
        len(result.warnings),
        ctx.nodes_visited,
        ctx.undefined_fields_removed,
        ctx.invalid_field_names_found,
        ctx.max_depth_reached,
    )


def create_validation_report(result: ValidationResult) -> str:
    return render_report(result)
