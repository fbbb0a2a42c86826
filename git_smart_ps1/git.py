"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import GitCommandError


def run_git(
    args: Sequence[str],
    *,
    cwd: Path,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure.

    A missing git binary or an unusable ``cwd`` surface as ``GitCommandError``
    as well, so callers only have one failure type to handle.
    """

    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd),
            text=True,
            errors="replace",
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise GitCommandError(command, -1, stderr=str(exc)) from exc
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stderr=result.stderr)
    return result


def show_toplevel(path: Path) -> Path:
    proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    return Path(proc.stdout.strip())


def head_exists(path: Path) -> bool:
    proc = run_git(["rev-parse", "--verify", "-q", "HEAD"], cwd=path, check=False)
    return proc.returncode == 0


def head_ref(path: Path) -> str | None:
    """Return the full ref HEAD points at, or None when detached."""

    proc = run_git(["symbolic-ref", "-q", "HEAD"], cwd=path, check=False)
    if proc.returncode == 0:
        return proc.stdout.strip()
    return None


def worktree_changes(path: Path) -> list[tuple[str, str]]:
    """List work-tree changes against the index.

    Files whose stat data changed are compared by content, and the refreshed
    stat data is never written back to the index.
    """

    proc = run_git(
        ["--no-optional-locks", "diff", "--no-color", "--no-ext-diff", "--name-status"],
        cwd=path,
    )
    changes: list[tuple[str, str]] = []
    for raw in proc.stdout.splitlines():
        if not raw.strip():
            continue
        code, _, name = raw.partition("\t")
        # Renames and copies carry a similarity score, e.g. R100.
        changes.append((code[:1], name))
    return changes


def untracked_files(path: Path) -> list[str]:
    proc = run_git(
        ["ls-files", "--others", "--exclude-standard", "--directory", "--no-empty-directory"],
        cwd=path,
    )
    return [line for line in proc.stdout.splitlines() if line.strip()]


__all__ = [
    "run_git",
    "show_toplevel",
    "head_exists",
    "head_ref",
    "worktree_changes",
    "untracked_files",
]
