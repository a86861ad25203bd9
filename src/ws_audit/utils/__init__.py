"""Shared utilities for ws_audit."""

from ws_audit.utils.exit_codes import ExitCode
from ws_audit.utils.json_norm import stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dumps",
]
