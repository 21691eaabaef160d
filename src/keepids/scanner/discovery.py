"""Read-only recursive discovery of proposal files."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from keepids.exceptions import ScanIOError
from keepids.model import FileEntry

logger = logging.getLogger(__name__)


def discover_files(root: Path | str) -> list[FileEntry]:
    """Return every regular file reachable from *root*, sorted by path.

    Symlinked directories are followed; a directory reached more than once
    through links is only walked the first time. Any listing or stat failure
    aborts the whole discovery with ``ScanIOError``.
    """
    root = Path(root)
    try:
        root_mode = os.stat(root).st_mode
    except FileNotFoundError as exc:
        raise ScanIOError(f"Proposals root does not exist: {root}") from exc
    except OSError as exc:
        raise ScanIOError(f"Cannot stat proposals root {root}: {exc.strerror or exc}") from exc
    if not stat.S_ISDIR(root_mode):
        raise ScanIOError(f"Proposals root is not a directory: {root}")

    entries: list[FileEntry] = []
    visited: set[str] = set()

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error, followlinks=True):
        real_dir = os.path.realpath(dirpath)
        if real_dir in visited:
            logger.debug("Skipping already visited directory: %s", dirpath)
            dirnames[:] = []
            continue
        visited.add(real_dir)

        for filename in filenames:
            path = Path(dirpath) / filename
            if _is_regular_file(path):
                entries.append(FileEntry(path=path))

    return sorted(entries, key=lambda entry: entry.path.as_posix())


def _is_regular_file(path: Path) -> bool:
    """Return True for regular files (following links); dangling links are skipped."""
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        logger.debug("Skipping dangling entry: %s", path)
        return False
    except OSError as exc:
        raise ScanIOError(f"Cannot stat {path}: {exc.strerror or exc}") from exc
    return stat.S_ISREG(mode)


def _raise_walk_error(exc: OSError) -> None:
    raise ScanIOError(f"Cannot traverse {exc.filename}: {exc.strerror or exc}") from exc
