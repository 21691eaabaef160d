"""Identifier extraction and tallying helpers."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from keepids.constants.ids import KEEP_ID_PATTERN
from keepids.model import FileEntry


def extract_ids(name: str, pattern: re.Pattern[str] = KEEP_ID_PATTERN) -> list[str]:
    """Return every non-overlapping identifier match in *name*, left to right.

    Matches are not anchored to the start of the name, so a name containing
    two identifiers yields both.
    """
    return pattern.findall(name)


def index_ids(entries: Iterable[FileEntry]) -> dict[str, list[Path]]:
    """Map each identifier to the entry paths claiming it, one path per match."""
    index: dict[str, list[Path]] = {}
    for entry in entries:
        for identifier in extract_ids(entry.name):
            index.setdefault(identifier, []).append(entry.path)
    return index


def tally_from_index(index: dict[str, list[Path]]) -> Counter[str]:
    return Counter({identifier: len(paths) for identifier, paths in index.items()})


def tally_ids(entries: Iterable[FileEntry]) -> Counter[str]:
    """Count identifier occurrences across all entry base names."""
    return tally_from_index(index_ids(entries))


def find_duplicates(tally: Counter[str], exceptions: Iterable[str] = ()) -> list[str]:
    """Return identifiers counted more than once and not exempted, sorted."""
    exempt = frozenset(exceptions)
    return sorted(identifier for identifier, count in tally.items() if count > 1 and identifier not in exempt)
