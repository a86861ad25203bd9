"""Finding — the normalized output for a single trailing-whitespace hit."""

from __future__ import annotations

from dataclasses import dataclass

RULE_ID = "WS-TRAIL-001"


@dataclass(frozen=True, slots=True)
class Location:
    """Source location for a finding. ``line_start`` is -1 when unknown."""

    path: str
    line_start: int
    line_end: int


@dataclass(frozen=True, slots=True)
class Finding:
    """First line with trailing whitespace in one file."""

    location: Location
    message: str = "Found trailing whitespaces"
    rule_id: str = RULE_ID
    snippet: str = ""

    @property
    def path(self) -> str:
        return self.location.path

    @property
    def line(self) -> int:
        return self.location.line_start

    def to_dict(self) -> dict:
        d: dict = {
            "rule_id": self.rule_id,
            "message": self.message,
            "location": {
                "path": self.location.path,
                "line_start": self.location.line_start,
                "line_end": self.location.line_end,
            },
        }
        if self.snippet:
            d["snippet"] = self.snippet
        return d
