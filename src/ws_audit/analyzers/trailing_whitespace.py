"""Trailing whitespace analyzer — finds lines ending in spaces or tabs."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ws_audit.model import FileStatus
from ws_audit.model.finding import Finding, Location
from ws_audit.model.run_result import FileOutcome

_logger = logging.getLogger(__name__)

# One or more spaces/tabs right before a line terminator or end of content.
TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)

LINE_NOT_FOUND = -1


def find_trailing_whitespace(content: str) -> int | None:
    """Return the offset where the first trailing-whitespace run starts."""
    match = TRAILING_WS_RE.search(content)
    return match.start() if match else None


def find_line_number(content: str, index: int) -> int:
    """Map a character offset in *content* to a 1-based line number.

    Each line spans ``len(line) + 1`` characters (its ``\\n`` included).
    Returns ``LINE_NOT_FOUND`` when *index* falls outside every span.
    """
    if index < 0:
        return LINE_NOT_FOUND
    current = 0
    for number, line in enumerate(content.split("\n"), start=1):
        current += len(line) + 1
        if current > index:
            return number
    return LINE_NOT_FOUND


def _line_text(content: str, line_number: int) -> str:
    if line_number == LINE_NOT_FOUND:
        return ""
    return content.split("\n")[line_number - 1]


class TrailingWhitespaceAnalyzer:
    """Reports the first line with trailing whitespace in each file.

    Files that cannot be read or decoded are skipped: they are logged at
    DEBUG and never counted as violations.
    """

    id: str = "trailing_whitespace"
    version: str = "1.0.0"

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def scan_text(self, rel_path: str, content: str) -> Finding | None:
        index = find_trailing_whitespace(content)
        if index is None:
            return None
        line = find_line_number(content, index)
        return Finding(
            location=Location(path=rel_path, line_start=line, line_end=line),
            snippet=_line_text(content, line),
        )

    def scan_file(self, root: Path, rel_path: str) -> FileOutcome:
        try:
            content = (root / rel_path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            _logger.debug("Skipping %s: %s", rel_path, e)
            return FileOutcome(path=rel_path, status=FileStatus.SKIPPED)

        finding = self.scan_text(rel_path, content)
        if finding is None:
            return FileOutcome(path=rel_path, status=FileStatus.CLEAN)
        return FileOutcome(path=rel_path, status=FileStatus.OFFENDING, finding=finding)
