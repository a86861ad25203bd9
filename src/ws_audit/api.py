"""
ws_audit.api
============

Programmatic entrypoint for using ws_audit from other tools.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly output that matches ``run_result.schema.json``

Usage::

    from ws_audit.api import scan_repository

    result, result_dict = scan_repository(".")
    if result.has_violations:
        ...
"""

from __future__ import annotations

from pathlib import Path

from ws_audit.contracts.load import validate_instance
from ws_audit.core.config import ScanConfig
from ws_audit.core.discover import DEFAULT_IGNORE_EXTS, DiscoverConfig
from ws_audit.core.runner import run_scan
from ws_audit.model.run_result import RunResult


def scan_repository(
    root: str | Path = ".",
    *,
    ignore_exts: tuple[str, ...] = DEFAULT_IGNORE_EXTS,
    max_workers: int | None = None,
) -> tuple[RunResult, dict]:
    """Scan the git checkout at *root* and return the result plus its dict.

    The dict is validated against ``run_result.schema.json``.  Raises
    ``ListingError`` when git cannot list the tracked files, and
    ``ValueError`` when *max_workers* is omitted and
    ``WS_AUDIT_MAX_WORKERS`` is malformed.
    """
    options: dict = {}
    if max_workers is not None:
        options["max_workers"] = max_workers
    config = ScanConfig(
        root=Path(root),
        discover=DiscoverConfig(ignore_exts=tuple(ignore_exts)),
        **options,
    )
    result = run_scan(config)
    result_dict = result.to_dict()
    validate_instance(result_dict, "run_result.schema.json")
    return result, result_dict
