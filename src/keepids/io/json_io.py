"""JSON report persistence."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_atomic(*, path: Path, payload: object, temp_prefix: str, temp_suffix: str) -> None:
    """Write *payload* beside *path* under a temp name, then rename it into place.

    Readers never observe a partially written report; the temp file is removed
    if serialization fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(payload, indent=2, sort_keys=True) + "\n"

    fd, temp_name = tempfile.mkstemp(prefix=temp_prefix, suffix=temp_suffix, dir=path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
