"""Scan configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ws_audit.core.discover import DiscoverConfig

# Override the worker pool size without touching the CLI (0 or unset = default).
MAX_WORKERS_ENV = "WS_AUDIT_MAX_WORKERS"


def _max_workers_from_env() -> int | None:
    raw = os.environ.get(MAX_WORKERS_ENV, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_WORKERS_ENV} must be an integer, got {raw!r}") from None
    return value if value > 0 else None


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    ``root`` is the working directory git runs in; reported paths are
    relative to it.  ``max_workers=None`` lets ``ThreadPoolExecutor``
    choose, ``1`` scans sequentially.
    """

    root: Path = field(default_factory=lambda: Path("."))
    discover: DiscoverConfig = field(default_factory=DiscoverConfig)
    max_workers: int | None = field(default_factory=_max_workers_from_env)
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def to_dict(self) -> dict:
        return {
            "root": self.root.as_posix(),
            "revision": self.discover.revision,
            "ignore_exts": list(self.discover.ignore_exts),
            "max_workers": self.max_workers,
        }
