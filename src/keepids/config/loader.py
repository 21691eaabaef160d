"""Config loading for keep-ids runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from keepids.config.model import KeepIdsConfig
from keepids.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME
from keepids.exceptions import ConfigError


def load_config(base_dir: Path, config_path: Path | None = None) -> KeepIdsConfig:
    """Load config from ``keep-ids.yaml`` in *base_dir* or an explicit path.

    A missing implicit config yields defaults; a missing explicit one is an
    error. Relative paths inside the file resolve against its directory.
    """
    path = config_path if config_path is not None else (base_dir / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return KeepIdsConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s): {', '.join(unknown)}. Allowed keys: {', '.join(sorted(CONFIG_ALLOWED_KEYS))}"
        )

    config_dir = path.parent
    root = _optional_path(raw.get("root"), "root", config_dir)
    output_dir = _optional_path(raw.get("output_dir"), "output_dir", config_dir)

    if root is None:
        return KeepIdsConfig(output_dir=output_dir)
    return KeepIdsConfig(root=root, output_dir=output_dir)


def _optional_path(value: Any, key_name: str, config_dir: Path) -> Path | None:
    """Coerce a config value to a path relative to *config_dir*, or None."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    path = Path(value.strip())
    return path if path.is_absolute() else config_dir / path
