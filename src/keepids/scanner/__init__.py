"""Duplicate-ID scanning pipeline."""

from __future__ import annotations

from .discovery import discover_files
from .extraction import extract_ids, find_duplicates, index_ids, tally_from_index, tally_ids
from .orchestrator import scan

__all__ = ["discover_files", "extract_ids", "find_duplicates", "index_ids", "scan", "tally_from_index", "tally_ids"]
