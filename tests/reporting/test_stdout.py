"""Tests for plain-text rendering of scan results."""

from __future__ import annotations

from keepids.constants.reporting import DUPLICATES_BANNER
from keepids.model import DuplicateId, ScanResult
from keepids.reporting import render_summary, render_violations


def _result(*duplicates: DuplicateId) -> ScanResult:
    return ScanResult(
        root="proposals",
        violations=tuple(duplicate.identifier for duplicate in duplicates),
        duplicates=duplicates,
        allowed_duplicates=(),
        scanned_files=4,
        matched_files=4,
        unique_ids=2,
        duration_seconds=0.01,
    )


def test_render_violations_one_id_per_line() -> None:
    result = _result(
        DuplicateId("KEEP-0001-", 2, ("proposals/KEEP-0001-a.md", "proposals/KEEP-0001-b.md")),
        DuplicateId("KEEP-0002-", 2, ("proposals/KEEP-0002-a.md", "proposals/KEEP-0002-b.md")),
    )

    assert render_violations(result) == f"{DUPLICATES_BANNER}\nKEEP-0001-\nKEEP-0002-"


def test_render_violations_verbose_indents_paths() -> None:
    result = _result(DuplicateId("KEEP-0001-", 2, ("proposals/KEEP-0001-a.md", "proposals/js/KEEP-0001-b.md")))

    lines = render_violations(result, verbose=True).splitlines()

    assert lines == [
        DUPLICATES_BANNER,
        "KEEP-0001-",
        "    proposals/KEEP-0001-a.md",
        "    proposals/js/KEEP-0001-b.md",
    ]


def test_render_summary() -> None:
    assert render_summary(_result()) == "No duplicated KEEP IDs (2 unique IDs across 4 files)"
