"""
docwrite_guard.reporting.report_builder

Purpose:
    Combine the sanitizer's correction log and the validator's findings into a ValidationResult,
    and render a deterministic human-readable report. No decision logic beyond strict promotion.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from docwrite_guard.config.default_config import DEFAULT_CONFIG
from docwrite_guard.contracts.enums import CorrectionAction, Operation
from docwrite_guard.contracts.result import ValidationContext, ValidationResult
from docwrite_guard.validation.rules import Finding
from docwrite_guard.validation.sanitizer import Correction


def build_context(
    corrections: Sequence[Correction],
    *,
    nodes_visited: int,
    estimated_size_bytes: int = 0,
) -> ValidationContext:
    def _count(action: CorrectionAction) -> int:
        return sum(1 for c in corrections if c.action is action)

    return ValidationContext(
        undefined_fields_removed=_count(CorrectionAction.REMOVED_UNDEFINED),
        invalid_field_names_found=_count(CorrectionAction.DROPPED_FIELD_NAME),
        max_depth_reached=_count(CorrectionAction.TRUNCATED) > 0,
        functions_removed=_count(CorrectionAction.REMOVED_FUNCTION),
        unsupported_values_removed=_count(CorrectionAction.REMOVED_UNSUPPORTED),
        nodes_visited=nodes_visited,
        estimated_size_bytes=estimated_size_bytes,
    )


def build_result(
    sanitized: Any,
    context: ValidationContext,
    findings: Sequence[Finding],
    *,
    strict: bool,
    include_sanitized: bool,
    path: str,
    operation: Operation,
) -> ValidationResult:
    """
    Assemble the final result. Findings keep traversal order; in strict mode every
    warning is reported as an error in place, and sanitized data is withheld when invalid.
    """
    errors: List[str] = []
    warnings: List[str] = []
    for f in findings:
        if f.is_warning and not strict:
            warnings.append(f.render())
        else:
            errors.append(f.render())

    is_valid = not errors
    keep_data = include_sanitized and (is_valid or not strict)

    return ValidationResult(
        is_valid=is_valid,
        errors=tuple(errors),
        warnings=tuple(warnings),
        sanitized_data=sanitized if keep_data else None,
        validation_context=context,
        path=path,
        operation=operation,
    )


def _enumerate(title: str, items: Sequence[str]) -> List[str]:
    lines = [f"{title} ({len(items)}):"]
    if not items:
        lines.append("  (none)")
    for i, s in enumerate(items, 1):
        lines.append(f"  {i}. {s}")
    return lines


def render_report(result: ValidationResult, *, title: Optional[str] = None) -> str:
    """Return a human-readable validation block for logs or CLI output."""
    heading = title or DEFAULT_CONFIG["report"]["title"]
    ctx = result.validation_context
    operation = getattr(result.operation, "value", str(result.operation))

    lines = [
        heading,
        "=" * len(heading),
        f"Path:      {result.path}",
        f"Operation: {operation}",
        f"Status:    {'PASSED' if result.is_valid else 'FAILED'}",
        "",
    ]
    lines += _enumerate("Errors", result.errors)
    lines.append("")
    lines += _enumerate("Warnings", result.warnings)
    lines += [
        "",
        "Context",
        "-------",
        f"Nodes visited:              {ctx.nodes_visited}",
        f"Undefined fields removed:   {ctx.undefined_fields_removed}",
        f"Invalid field names found:  {ctx.invalid_field_names_found}",
        f"Functions removed:          {ctx.functions_removed}",
        f"Unsupported values removed: {ctx.unsupported_values_removed}",
        f"Max depth reached:          {'yes' if ctx.max_depth_reached else 'no'}",
        f"Estimated size (bytes):     {ctx.estimated_size_bytes}",
        f"Sanitized data:             {'included' if result.sanitized_data is not None else 'not included'}",
    ]
    return "\n".join(lines) + "\n"
