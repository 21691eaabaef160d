"""Base exception for keep-ids."""

from __future__ import annotations


class KeepIdsError(Exception):
    """Base class for all keep-ids errors."""
