"""Shared fixtures: throwaway git repositories with committed files."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Mapping

import pytest


_GIT_IDENTITY = (
    "-c", "user.name=ws-audit tests",
    "-c", "user.email=ws-audit@example.invalid",
    "-c", "commit.gpgsign=false",
    "-c", "core.autocrlf=false",
)


def git(repo: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *_GIT_IDENTITY, *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )


def write_files(repo: Path, files: Mapping[str, str | bytes]) -> None:
    for rel, content in files.items():
        path = repo / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            # newline="" keeps the exact bytes the test asked for
            path.write_text(content, encoding="utf-8", newline="")


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[[Mapping[str, str | bytes]], Path]:
    """Return a factory that commits *files* into a fresh repo and returns its root."""

    def _make(files: Mapping[str, str | bytes]) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir()
        git(repo, "init", "-q")
        write_files(repo, files)
        git(repo, "add", "-A")
        git(repo, "commit", "-q", "-m", "initial")
        return repo

    return _make
