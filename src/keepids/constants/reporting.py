"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

DUPLICATES_BANNER: str = "!!! Duplicated KEEP IDs found !!!"
CLEAN_SUMMARY_TEMPLATE: str = "No duplicated KEEP IDs ({unique_ids} unique IDs across {scanned_files} files)"

REPORT_FILENAME: str = "keep-ids-report.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

DETAIL_INDENT: str = "    "
