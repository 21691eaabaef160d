"""Core data models for keep-ids."""

from .entities import DuplicateId, FileEntry, ScanResult

__all__ = ["DuplicateId", "FileEntry", "ScanResult"]
