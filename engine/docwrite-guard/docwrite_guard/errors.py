"""
docwrite_guard.errors

Purpose:
    Exception types for caller misuse.
    Data problems are never raised; they are collected into ValidationResult.errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Invalid options or operation supplied by the caller."""


@dataclass(frozen=True)
class UnsafeWriteError(RuntimeError):
    path: str
    errors: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"write to {self.path} rejected: {'; '.join(self.errors)}"
