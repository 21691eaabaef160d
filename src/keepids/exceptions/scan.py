"""Traversal-related exceptions."""

from __future__ import annotations

from keepids.exceptions.base import KeepIdsError


class ScanIOError(KeepIdsError, OSError):
    """Raised when the proposals tree cannot be traversed completely."""
