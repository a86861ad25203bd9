"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — no trailing whitespace detected
  1   Violation — at least one tracked file has trailing whitespace
  2   Error — git listing failed, internal runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
