"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "keep-ids"
CLI_DESCRIPTION: str = "Check that every KEEP proposal file claims a unique KEEP-<number>- identifier."
