# Purpose: Safe-write package entrypoint (payload preparation for the store client).

from .adapter import SafeWriteAdapter, SafeWritePayload, require_valid

__all__ = ["SafeWriteAdapter", "SafeWritePayload", "require_valid"]
