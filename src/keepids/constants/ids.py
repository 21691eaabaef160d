"""Constants for KEEP identifier extraction and the default scan root."""

from __future__ import annotations

import re

KEEP_ID_PATTERN: re.Pattern[str] = re.compile(r"KEEP-\d+-")

# Two related proposals were intentionally allocated the same number.
ALLOWED_DUPLICATE_IDS: frozenset[str] = frozenset({"KEEP-0412-"})

DEFAULT_PROPOSALS_DIR: str = "proposals"
