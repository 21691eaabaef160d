"""Shared exception hierarchy for keep-ids."""

from __future__ import annotations

from .base import KeepIdsError
from .config import ConfigError
from .scan import ScanIOError

__all__ = ["ConfigError", "KeepIdsError", "ScanIOError"]
