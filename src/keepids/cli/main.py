"""CLI entrypoint for keep-ids."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from keepids import __version__
from keepids.config import KeepIdsConfig, load_config
from keepids.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from keepids.exceptions import ConfigError, KeepIdsError
from keepids.model import ScanResult
from keepids.reporting import render_summary, render_violations, write_report
from keepids.scanner import scan

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Proposals directory to scan (default: proposals)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Write a JSON report into this directory (no file written if omitted)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="List the files claiming each duplicate and print a summary when clean",
    )
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = scan(config.root, config.allowed_duplicates)
        if config.output_dir is not None:
            report_path = write_report(config.output_dir, result)
            logger.info("Wrote report to %s", report_path)
    except KeepIdsError as exc:
        print(f"Scan error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 1

    return _emit_result(result, verbose=args.verbose)


def _resolve_config(args: argparse.Namespace) -> KeepIdsConfig:
    """Merge config file values with CLI overrides."""
    config = load_config(Path.cwd(), args.config)
    root = args.root if args.root is not None else config.root
    output_dir = args.output_dir if args.output_dir is not None else config.output_dir
    return KeepIdsConfig(root=root, output_dir=output_dir)


def _emit_result(result: ScanResult, *, verbose: bool) -> int:
    if result.is_clean:
        if verbose:
            print(render_summary(result))
        return 0

    print(render_violations(result, verbose=verbose))
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
