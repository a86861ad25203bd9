"""File discovery — list git-tracked files and drop ignored extensions."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

_logger = logging.getLogger(__name__)

# Binary assets that are never scanned.
DEFAULT_IGNORE_EXTS: tuple[str, ...] = (".ico", ".png")


class ListingError(RuntimeError):
    """``git ls-tree`` failed; the scan cannot proceed."""

    def __init__(self, message: str, *, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


@dataclass(frozen=True)
class DiscoverConfig:
    """Configuration for tracked-file discovery."""

    revision: str = "HEAD"
    ignore_exts: tuple[str, ...] = DEFAULT_IGNORE_EXTS
    git: str = "git"


def _ls_tree_command(cfg: DiscoverConfig) -> list[str]:
    # -z: NUL-separated, unquoted paths
    return [cfg.git, "ls-tree", "-r", cfg.revision, "--name-only", "-z"]


def list_tracked_files(
    cwd: Path | str | None = None,
    cfg: DiscoverConfig | None = None,
) -> list[str]:
    """Return every path tracked at ``cfg.revision``, in git's order.

    Any stderr output from git is fatal, whatever git's exit status.  A
    non-zero exit status with a silent stderr is fatal too, as is a
    missing ``git`` executable.

    Raises
    ------
    ListingError
        With the text to show the user.
    """
    cfg = cfg or DiscoverConfig()
    cmd = _ls_tree_command(cfg)
    _logger.debug("Listing tracked files: %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
        )
    except OSError as e:
        raise ListingError(f"could not run {cfg.git!r}: {e}") from e

    if result.stderr:
        raise ListingError(result.stderr, returncode=result.returncode)
    if result.returncode != 0:
        raise ListingError(
            f"{' '.join(cmd)} exited with status {result.returncode}",
            returncode=result.returncode,
        )

    paths = [p for p in result.stdout.split("\0") if p]
    _logger.debug("git reported %d tracked files", len(paths))
    return paths


def is_ignored(path: str, ignore_exts: Iterable[str] = DEFAULT_IGNORE_EXTS) -> bool:
    """True when *path* ends with one of *ignore_exts* (case-sensitive)."""
    return any(path.endswith(ext) for ext in ignore_exts)


def filter_ignored(
    paths: Iterable[str],
    ignore_exts: Iterable[str] = DEFAULT_IGNORE_EXTS,
) -> list[str]:
    """Drop paths with an ignored extension, preserving order."""
    exts = tuple(ignore_exts)
    return [p for p in paths if not is_ignored(p, exts)]
