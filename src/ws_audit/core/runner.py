"""Runner — lists tracked files, scans them concurrently, builds RunResult."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from ws_audit.analyzers.trailing_whitespace import TrailingWhitespaceAnalyzer
from ws_audit.core.config import ScanConfig
from ws_audit.core.discover import filter_ignored, list_tracked_files
from ws_audit.model.run_result import RunResult

if TYPE_CHECKING:
    from ws_audit.analyzers import Analyzer

_logger = logging.getLogger(__name__)


def run_scan(
    config: ScanConfig | None = None,
    *,
    analyzer: Analyzer | None = None,
) -> RunResult:
    """Scan every tracked, non-ignored file under ``config.root``.

    Raises ``ListingError`` before any file is read if git cannot list
    the tracked files.  Otherwise returns only once every file has been
    scanned; findings keep git's listing order.
    """
    config = config or ScanConfig()
    analyzer = analyzer or TrailingWhitespaceAnalyzer(encoding=config.encoding)

    tracked = list_tracked_files(config.root, config.discover)
    to_scan = filter_ignored(tracked, config.discover.ignore_exts)
    _logger.info(
        "Scanning %d of %d tracked files (%d ignored by extension)",
        len(to_scan),
        len(tracked),
        len(tracked) - len(to_scan),
    )

    # ── scan with bounded parallelism; map() joins before returning ──
    if config.max_workers == 1:
        outcomes = [analyzer.scan_file(config.root, p) for p in to_scan]
    else:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            outcomes = list(
                pool.map(lambda p: analyzer.scan_file(config.root, p), to_scan)
            )

    result = RunResult.from_outcomes(
        outcomes,
        files_listed=len(tracked),
        files_ignored=len(tracked) - len(to_scan),
        config=config.to_dict(),
    )
    if result.files_skipped:
        _logger.info("%d files could not be read and were skipped", result.files_skipped)
    return result
