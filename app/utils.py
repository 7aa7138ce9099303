"""
Utility functions for the folio builder.
"""

import hashlib


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def stable_id(prefix: str, *parts: object, length: int = 10) -> str:
    """Short deterministic id, e.g. zoom-3f2a9c01de."""
    return f"{prefix}-{_sha('|'.join(str(p) for p in parts))[:length]}"
