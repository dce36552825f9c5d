#!/usr/bin/env python3
"""Generate an interactive HTML test runner from manual test markdown files.

Reads every ``*.md`` file in the input directory, extracts its test cases,
and writes a single self-contained HTML page with checkboxes and progress
totals.

Usage:
    python3 scripts/generate_test_runner.py --input-dir manual-tests/

    # Custom output path, report heading and parallel parsing
    python3 scripts/generate_test_runner.py --input-dir manual-tests/ \
      --output build/test-runner.html --title "Combat QA" --workers 4

    # Report text from a JSON config, suites also dumped as JSON
    python3 scripts/generate_test_runner.py --input-dir manual-tests/ \
      --config runner.json --json build/suites.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from runbook.case_types import Suite
from runbook.config import load_report_config
from runbook.discovery import build_suites, find_markdown_files, load_suite
from runbook.io_utils import save_json, write_text
from runbook.report import render_report
from runbook.suite import suite_stats

log = logging.getLogger("generate_test_runner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an interactive HTML test runner from markdown test cases."
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory containing *.md test case files (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML path (default: <input-dir>/<output_name from config>)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with report text (page_title, heading, subtitle, ...)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Report heading and page title (overrides --config).",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Optional path to also write the parsed suites as JSON.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of parallel parser processes (default: 1)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def _load_all(paths: list[Path], workers: int) -> tuple[list[Suite], int]:
    """Load suites in input order. Unreadable files are logged and skipped."""
    if workers > 1:
        for p in paths:
            log.info("  Parsing: %s", p.name)
        try:
            return build_suites(paths, workers=workers), 0
        except OSError as exc:
            log.warning("Parallel load failed (%s); retrying file by file", exc)

    suites: list[Suite] = []
    errors = 0
    for p in paths:
        if workers <= 1:
            log.info("  Parsing: %s", p.name)
        try:
            suites.append(load_suite(p))
        except OSError as exc:
            log.error("Failed to read %s: %s", p, exc)
            errors += 1
    return suites, errors


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_report_config(
            args.config, page_title=args.title, heading=args.title,
        )
    except (OSError, ValueError) as exc:
        log.error("Invalid config: %s", exc)
        return 1

    input_dir: Path = args.input_dir
    try:
        files = find_markdown_files(input_dir)
    except (FileNotFoundError, NotADirectoryError) as exc:
        log.error("ERROR: %s", exc)
        return 1
    log.info("Found %d markdown test files", len(files))

    suites, errors = _load_all(files, args.workers)
    for s in suites:
        log.debug("  %s: %d tests", s.id, len(s.tests))

    output: Path = args.output or input_dir / config.output_name
    write_text(render_report(suites, config), output)
    if args.json is not None:
        save_json([s.to_dict() for s in suites], args.json)
        log.info("Wrote suites JSON: %s", args.json)

    stats = suite_stats(suites)
    log.info("")
    log.info("Generated: %s", output)
    log.info("   Test suites: %d", stats.suites)
    log.info("   Total tests: %d", stats.tests)
    if errors:
        log.error("%d file(s) could not be read", errors)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
