"""Rendering and persistence of scan results."""

from .stdout import render_summary, render_violations
from .writer import build_report, write_report

__all__ = ["build_report", "render_summary", "render_violations", "write_report"]
