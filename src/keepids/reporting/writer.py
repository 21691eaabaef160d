"""JSON report writer for scan results."""

from __future__ import annotations

from pathlib import Path

from keepids.constants.reporting import (
    REPORT_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
)
from keepids.io import write_json_atomic
from keepids.model import ScanResult


def build_report(result: ScanResult) -> dict[str, object]:
    """Build the versioned report payload for *result*."""
    return {"schema_version": SCHEMA_VERSION, **result.to_dict()}


def write_report(out_dir: Path, result: ScanResult) -> Path:
    """Write the JSON report into *out_dir* and return its path."""
    path = out_dir / REPORT_FILENAME
    write_json_atomic(
        path=path,
        payload=build_report(result),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
