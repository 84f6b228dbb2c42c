# docwrite_guard/config/settings.py
"""
docwrite_guard.config.settings

Purpose:
    Optional environment-driven defaults for ValidationOptions.
    The engine never reads the environment itself; services call load_options_from_env()
    once at startup and pass the result into each validation call.

Environment:
    DOCWRITE_GUARD_STRICT, DOCWRITE_GUARD_SANITIZE_ON_VALIDATION, DOCWRITE_GUARD_ALLOW_UNDEFINED,
    DOCWRITE_GUARD_ALLOW_NULL_VALUES, DOCWRITE_GUARD_MAX_DEPTH, DOCWRITE_GUARD_MAX_DOCUMENT_BYTES
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping

from docwrite_guard.config.options import ValidationOptions
from docwrite_guard.errors import ConfigError

ENV_PREFIX = "DOCWRITE_GUARD_"

_BOOL_FIELDS = ("strict", "sanitize_on_validation", "allow_undefined", "allow_null_values")
_INT_FIELDS = ("max_depth", "max_document_bytes")


def _as_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    v = value.strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    return None


def _as_int(raw: str | None, *, default: int | None = None) -> int | None:
    """
    Parse an environment variable-ish value into an int.

    Accepts:
      - None / "" -> default
      - "30" -> 30
    Raises:
      ValueError for non-integer strings.
    """
    if raw is None:
        return default
    s = str(raw).strip()
    if not s:
        return default
    return int(s)


def load_options_from_env(environ: Mapping[str, str] | None = None) -> ValidationOptions:
    """
    Build ValidationOptions from DEFAULT_CONFIG with DOCWRITE_GUARD_* overrides.

    Unparseable booleans are ignored (default wins); unparseable integers raise ConfigError.
    """
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    for name in _BOOL_FIELDS:
        parsed = _as_bool(env.get(f"{ENV_PREFIX}{name.upper()}"))
        if parsed is not None:
            overrides[name] = parsed

    for name in _INT_FIELDS:
        key = f"{ENV_PREFIX}{name.upper()}"
        try:
            parsed_int = _as_int(env.get(key))
        except ValueError as e:
            raise ConfigError(f"{key} must be an integer, got {env.get(key)!r}") from e
        if parsed_int is not None:
            overrides[name] = parsed_int

    return ValidationOptions.from_config(overrides)
