"""
Default configuration for docwrite-guard.

This file acts as the control plane for validation defaults:
- which values are tolerated (undefined / null)
- structural limits (depth, document size)
- report presentation

Callers should READ from this config but never mutate it.
"""

DEFAULT_CONFIG = {
    # ------------------------------------------------------------------
    # Validation policy (mirrors ValidationOptions fields)
    # ------------------------------------------------------------------
    "validation": {
        "strict": False,
        "sanitize_on_validation": True,
        # Document stores keep null but have no "missing" value to persist.
        "allow_undefined": False,
        "allow_null_values": True,
        # Firestore rejects maps nested more than 20 levels deep.
        "max_depth": 20,
        "required_fields": [],
        # 1 MiB document limit; None disables the size estimate.
        "max_document_bytes": 1_048_576,
    },
    # ------------------------------------------------------------------
    # Report rendering
    # ------------------------------------------------------------------
    "report": {
        "title": "Document Write Validation Report",
    },
}
