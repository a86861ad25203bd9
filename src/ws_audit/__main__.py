"""CLI entry-point for ws_audit.

Usage:
    python -m ws_audit
    python -m ws_audit --json
    python -m ws_audit -v --jobs 4

Run from inside a git checkout.  Every file tracked at HEAD (minus
``.ico``/``.png``) is checked for lines ending in spaces or tabs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema

from ws_audit import __version__
from ws_audit.analyzers.trailing_whitespace import LINE_NOT_FOUND
from ws_audit.contracts.load import validate_instance
from ws_audit.core.config import ScanConfig
from ws_audit.core.discover import ListingError
from ws_audit.core.runner import run_scan
from ws_audit.model.finding import Finding
from ws_audit.model.run_result import RunResult
from ws_audit.utils.exit_codes import ExitCode
from ws_audit.utils.json_norm import stable_json_dumps


def _format_finding(finding: Finding) -> str:
    line = "?" if finding.line == LINE_NOT_FOUND else str(finding.line)
    return f"Found trailing whitespaces: {finding.path}:{line}"


def _report(result: RunResult) -> None:
    """One stderr line per offending file, in listing order."""
    for finding in result.findings:
        print(_format_finding(finding), file=sys.stderr)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ws-audit",
        description="Report git-tracked files containing trailing whitespace.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full RunResult JSON to stdout.",
    )
    p.add_argument(
        "-j",
        "--jobs",
        dest="jobs",
        type=_positive_int,
        default=None,
        help="Number of files to read in parallel (1 = sequential).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log progress and skipped (unreadable) files to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = violations, 2 = error)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options: dict = {}
    if args.jobs is not None:
        options["max_workers"] = args.jobs
    try:
        config = ScanConfig(root=Path("."), **options)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        result = run_scan(config)
    except ListingError as e:
        print(f"Unexpected error occurred: {e}", file=sys.stderr)
        return ExitCode.ERROR

    _report(result)

    if args.json_out:
        result_dict = result.to_dict()
        try:
            validate_instance(result_dict, "run_result.schema.json")
        except jsonschema.ValidationError as e:
            print(f"ERROR: report failed schema validation: {e.message}", file=sys.stderr)
            return ExitCode.ERROR
        sys.stdout.write(stable_json_dumps(result_dict))

    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
