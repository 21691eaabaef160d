"""keep-ids: duplicate KEEP proposal identifier checker."""

from __future__ import annotations

from keepids.scanner import scan

__version__ = "1.0.0"

__all__ = ["__version__", "scan"]
