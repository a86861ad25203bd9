"""Analyzers produce findings from tracked file contents.

Each analyzer exposes ``id``, ``version`` and
``scan_file(root, rel_path) -> FileOutcome``.  ``core.runner`` calls
``scan_file`` once per tracked, non-ignored path from a worker pool.

Available analyzers:
    - TrailingWhitespaceAnalyzer: first line ending in spaces or tabs
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ws_audit.model.run_result import FileOutcome


class Analyzer(Protocol):
    """Every analyzer must expose ``id``, ``version``, and ``scan_file()``."""

    id: str
    version: str

    def scan_file(self, root: Path, rel_path: str) -> FileOutcome:
        """Scan one file under *root* and report its outcome."""
        ...


from ws_audit.analyzers.trailing_whitespace import TrailingWhitespaceAnalyzer  # noqa: E402

__all__ = ["Analyzer", "TrailingWhitespaceAnalyzer"]
