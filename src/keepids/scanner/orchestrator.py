"""Scan orchestration for a proposals tree."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from keepids.constants.ids import ALLOWED_DUPLICATE_IDS
from keepids.model import DuplicateId, ScanResult
from keepids.scanner.discovery import discover_files
from keepids.scanner.extraction import find_duplicates, index_ids, tally_from_index

logger = logging.getLogger(__name__)


def scan(root: Path | str, exceptions: Iterable[str] = ALLOWED_DUPLICATE_IDS) -> ScanResult:
    """Scan *root* for KEEP identifiers claimed by more than one file.

    Identifiers listed in *exceptions* may be shared without being reported.
    Raises ``ScanIOError`` when the tree cannot be traversed.
    """
    started = time.perf_counter()
    root = Path(root)
    exempt = frozenset(exceptions)

    entries = discover_files(root)
    index = index_ids(entries)
    tally = tally_from_index(index)
    violations = find_duplicates(tally, exempt)
    matched_files = len({path for paths in index.values() for path in paths})

    duplicates = tuple(
        DuplicateId(
            identifier=identifier,
            count=tally[identifier],
            paths=tuple(sorted(path.as_posix() for path in index[identifier])),
        )
        for identifier in violations
    )
    allowed = tuple(sorted(identifier for identifier in exempt if tally.get(identifier, 0) > 1))
    for identifier in allowed:
        logger.info("Allowed duplicate %s claimed by %d files", identifier, tally[identifier])

    result = ScanResult(
        root=root.as_posix(),
        violations=tuple(violations),
        duplicates=duplicates,
        allowed_duplicates=allowed,
        scanned_files=len(entries),
        matched_files=matched_files,
        unique_ids=len(tally),
        duration_seconds=time.perf_counter() - started,
    )
    logger.info(
        "Scanned %d files under %s: %d unique IDs, %d duplicated",
        result.scanned_files,
        result.root,
        result.unique_ids,
        len(result.violations),
    )
    return result
