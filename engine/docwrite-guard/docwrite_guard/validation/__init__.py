# Purpose: Classifier, sanitizer and rule validator over arbitrary value graphs.

from .classifier import Classification, classify, describe, forbidden_reason
from .rules import Finding, RuleFindings, RuleValidator, validate_rules
from .sanitizer import Correction, RecursiveSanitizer, SanitizeOutcome, sanitize

__all__ = [
    "Classification",
    "Correction",
    "Finding",
    "RecursiveSanitizer",
    "RuleFindings",
    "RuleValidator",
    "SanitizeOutcome",
    "classify",
    "describe",
    "forbidden_reason",
    "sanitize",
    "validate_rules",
]
