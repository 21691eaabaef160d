"""Config data model for keep-ids runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from keepids.constants.ids import ALLOWED_DUPLICATE_IDS, DEFAULT_PROPOSALS_DIR


@dataclass(frozen=True)
class KeepIdsConfig:
    """Resolved run config."""

    root: Path = Path(DEFAULT_PROPOSALS_DIR)
    output_dir: Path | None = None
    allowed_duplicates: frozenset[str] = field(default=ALLOWED_DUPLICATE_IDS, init=False)
