"""
Pre-write validation and sanitization for path-addressed document stores.
"""

__version__ = "0.1.0"

from .api.validate import create_validation_report, validate_for_firestore_like_store
from .config.options import ValidationOptions
from .contracts.enums import Operation, ValueKind
from .contracts.result import ValidationContext, ValidationResult
from .contracts.sanitize_policy import UNDEFINED, SanitizePolicy
from .errors import ConfigError, UnsafeWriteError
from .safe_write import SafeWriteAdapter, SafeWritePayload, require_valid

__all__ = [
    "__version__",
    "UNDEFINED",
    "ConfigError",
    "Operation",
    "SafeWriteAdapter",
    "SafeWritePayload",
    "SanitizePolicy",
    "UnsafeWriteError",
    "ValidationContext",
    "ValidationOptions",
    "ValidationResult",
    "ValueKind",
    "create_validation_report",
    "require_valid",
    "validate_for_firestore_like_store",
]
