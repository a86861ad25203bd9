"""RunResult — the immutable, schema-aligned scan artifact."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from ws_audit import __version__
from ws_audit.model import FileStatus
from ws_audit.model.finding import Finding
from ws_audit.utils.exit_codes import ExitCode


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of scanning a single file, returned by each worker task."""

    path: str
    status: FileStatus
    finding: Finding | None = None


@dataclass(slots=True)
class RunResult:
    """Assembled scan result matching ``run_result.schema.json``.

    Built by ``core.runner`` only after every worker task has returned.
    """

    # ── run metadata ────────────────────────────────────────────────
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    tool_version: str = __version__
    config: dict = field(default_factory=dict)

    # ── counts ──────────────────────────────────────────────────────
    files_listed: int = 0
    files_ignored: int = 0
    files_scanned: int = 0
    files_skipped: int = 0
    findings: list[Finding] = field(default_factory=list)

    @classmethod
    def from_outcomes(
        cls,
        outcomes: Iterable[FileOutcome],
        *,
        files_listed: int,
        files_ignored: int,
        config: dict | None = None,
    ) -> RunResult:
        """Fold per-file outcomes into one result, keeping listing order."""
        result = cls(
            config=dict(config or {}),
            files_listed=files_listed,
            files_ignored=files_ignored,
        )
        for outcome in outcomes:
            if outcome.status is FileStatus.SKIPPED:
                result.files_skipped += 1
                continue
            result.files_scanned += 1
            if outcome.finding is not None:
                result.findings.append(outcome.finding)
        return result

    @property
    def has_violations(self) -> bool:
        return bool(self.findings)

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.VIOLATION if self.has_violations else ExitCode.SUCCESS

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the JSON report matching the schema."""
        return {
            "schema_version": "run_result_v1",
            "run": {
                "created_at": self.created_at,
                "tool_version": self.tool_version,
                "config": self.config,
            },
            "summary": {
                "exit_code": int(self.exit_code),
                "counts": {
                    "files_listed": self.files_listed,
                    "files_ignored": self.files_ignored,
                    "files_scanned": self.files_scanned,
                    "files_skipped": self.files_skipped,
                    "findings_total": len(self.findings),
                },
            },
            "findings_raw": [f.to_dict() for f in self.findings],
        }
