"""Frozen result and discovery entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """A regular file discovered under the proposals root."""

    path: Path

    @property
    def name(self) -> str:
        """Base filename without any directory component."""
        return self.path.name


@dataclass(frozen=True)
class DuplicateId:
    """An identifier claimed by more than one file."""

    identifier: str
    count: int
    paths: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "identifier": self.identifier,
            "count": self.count,
            "paths": list(self.paths),
        }


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a duplicate-ID scan.

    A result is *clean* when ``violations`` is empty. Otherwise ``violations``
    lists every disallowed duplicate identifier in lexicographic order and
    ``duplicates`` carries the same identifiers with the files claiming them.
    """

    root: str
    violations: tuple[str, ...]
    duplicates: tuple[DuplicateId, ...]
    allowed_duplicates: tuple[str, ...]
    scanned_files: int
    matched_files: int
    unique_ids: int
    duration_seconds: float

    @property
    def is_clean(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, object]:
        """Serialize to the JSON report payload."""
        return {
            "root": self.root,
            "clean": self.is_clean,
            "violations": list(self.violations),
            "duplicates": [duplicate.to_dict() for duplicate in self.duplicates],
            "allowed_duplicates": list(self.allowed_duplicates),
            "scanned_files": self.scanned_files,
            "matched_files": self.matched_files,
            "unique_ids": self.unique_ids,
            "duration_seconds": round(self.duration_seconds, 6),
        }
