"""Configuration-related exceptions."""

from __future__ import annotations

from keepids.exceptions.base import KeepIdsError


class ConfigError(KeepIdsError, ValueError):
    """Raised when keep-ids configuration is invalid."""
