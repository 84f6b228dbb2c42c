"""
docwrite_guard.contracts.result

Purpose:
    Immutable result contracts returned to callers of the validation engine.

Notes:
    Any change here is a breaking change for write-path callers and the report renderer
    and must be accompanied by regression tests.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from docwrite_guard.contracts.enums import Operation


class ValidationContext(BaseModel):
    """Counters derived from the sanitizer's correction log once the walk completes."""

    model_config = ConfigDict(frozen=True)

    undefined_fields_removed: int = 0
    invalid_field_names_found: int = 0
    max_depth_reached: bool = False
    functions_removed: int = 0
    unsupported_values_removed: int = 0
    nodes_visited: int = 0
    estimated_size_bytes: int = 0


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    sanitized_data: Optional[Any] = None
    validation_context: ValidationContext = Field(default_factory=ValidationContext)

    # Caller-supplied labels, echoed so a report can be rendered from the result alone.
    path: str = ""
    operation: Operation = Operation.UPDATE

    @model_validator(mode="after")
    def _validity_matches_errors(self) -> "ValidationResult":
        if self.is_valid != (not self.errors):
            raise ValueError("is_valid must be True exactly when errors is empty.")
        return self
