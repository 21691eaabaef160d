"""Plain-text stdout rendering for scan results."""

from __future__ import annotations

from keepids.constants.reporting import CLEAN_SUMMARY_TEMPLATE, DETAIL_INDENT, DUPLICATES_BANNER
from keepids.model import ScanResult


def render_violations(result: ScanResult, *, verbose: bool = False) -> str:
    """Render the duplicate banner followed by one offending ID per line.

    With *verbose*, each ID is followed by the files that claim it.
    """
    lines = [DUPLICATES_BANNER]
    for duplicate in result.duplicates:
        lines.append(duplicate.identifier)
        if verbose:
            lines.extend(f"{DETAIL_INDENT}{path}" for path in duplicate.paths)
    return "\n".join(lines)


def render_summary(result: ScanResult) -> str:
    return CLEAN_SUMMARY_TEMPLATE.format(unique_ids=result.unique_ids, scanned_files=result.scanned_files)
