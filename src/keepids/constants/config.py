"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "keep-ids.yaml"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"root", "output_dir"})
