"""Configuration loading and normalization for keep-ids runs."""

from __future__ import annotations

from keepids.config.loader import load_config
from keepids.config.model import KeepIdsConfig

__all__ = ["KeepIdsConfig", "load_config"]
