"""
docwrite_guard.config.options

Purpose:
    ValidationOptions: the per-call policy knobs for the validation engine.

Notes:
    - Frozen so a single options object can be shared across threads.
    - extra="forbid" prevents silent caller typos (e.g., "alowUndefined").
    - Accepts snake_case and camelCase keys so payload-style option dicts work unchanged.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel, to_snake

from docwrite_guard.config.default_config import DEFAULT_CONFIG
from docwrite_guard.errors import ConfigError

# Walks recurse once per level; the ceiling keeps them well inside the interpreter limit.
MAX_DEPTH_CEILING = 100


class ValidationOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    strict: bool = Field(
        default=False,
        description="Promote warnings to errors and withhold sanitized data when invalid.",
    )
    sanitize_on_validation: bool = Field(
        default=True,
        description="Return a cleaned copy of the input in ValidationResult.sanitized_data.",
    )
    allow_undefined: bool = Field(default=False)
    allow_null_values: bool = Field(default=True)
    max_depth: int = Field(
        default=20,
        ge=1,
        le=MAX_DEPTH_CEILING,
        description="Deepest nesting level written out; deeper containers are truncated.",
    )
    required_fields: Tuple[str, ...] = Field(
        default=(),
        description="Dotted field paths that must be present for create operations.",
    )
    max_document_bytes: Optional[int] = Field(default=1_048_576, ge=1)

    @field_validator("required_fields", mode="before")
    @classmethod
    def _coerce_required_fields(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("required_fields")
    @classmethod
    def _strip_required_fields(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        cleaned = tuple(s.strip() for s in v)
        if any(not s for s in cleaned):
            raise ValueError("required_fields entries must be non-empty field paths.")
        return cleaned

    @classmethod
    def from_config(cls, overrides: Mapping[str, Any] | None = None) -> "ValidationOptions":
        """
        Build options from DEFAULT_CONFIG["validation"] with caller overrides applied on top.
        Raises ConfigError for unknown keys or invalid values.
        """
        merged: dict[str, Any] = dict(DEFAULT_CONFIG["validation"])
        for key, value in (overrides or {}).items():
            # Overrides may be camelCase; defaults are snake_case. Key on the field name.
            merged[to_snake(str(key))] = value
        return coerce_options(merged)


def coerce_options(raw: ValidationOptions | Mapping[str, Any] | None) -> ValidationOptions:
    """
    Normalize None | mapping | ValidationOptions into ValidationOptions.
    Pydantic errors surface as ConfigError (a ValueError) so callers can render cleanly.
    """
    if raw is None:
        return ValidationOptions()
    if isinstance(raw, ValidationOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Options must be a mapping or ValidationOptions, got {type(raw).__name__}")

    try:
        return ValidationOptions.model_validate(dict(raw))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in e.errors()
        )
        raise ConfigError(f"Invalid validation options: {problems}") from e
