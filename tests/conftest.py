"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def corpus_root(fixtures_root: Path) -> Path:
    """Return the sample proposals tree, which shares only KEEP-0412-."""
    return fixtures_root / "corpus" / "proposals"


@pytest.fixture()
def make_proposals(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates empty files under ``tmp_path/proposals``."""

    def _make(*relative_paths: str) -> Path:
        root = tmp_path / "proposals"
        root.mkdir(exist_ok=True)
        for relative in relative_paths:
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("# Proposal\n", encoding="utf-8")
        return root

    return _make
