"""Enums shared across the scanner and reporting layers."""

from __future__ import annotations

from enum import Enum


class FileStatus(str, Enum):
    """Outcome of scanning one tracked file."""

    CLEAN = "clean"
    OFFENDING = "offending"
    SKIPPED = "skipped"  # unreadable or undecodable; never a violation
