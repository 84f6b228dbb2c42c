from __future__ import annotations

import json
from typing import Any


def estimate_document_bytes(clean_value: Any) -> int:
    """
    Approximate stored size as compact UTF-8 JSON.

    Only meaningful for sanitizer output (JSON-compatible by construction). The store's own
    accounting differs per type, so treat this as an estimate for limit checks.
    """
    if clean_value is None:
        return 0
    encoded = json.dumps(clean_value, ensure_ascii=False, separators=(",", ":"))
    return len(encoded.encode("utf-8"))
