"""Inspect the git repository owning a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from . import git
from .exceptions import GitCommandError
from .models import RepoStatus, StatusEntry

LOCAL_BRANCH_PREFIX = "refs/heads/"
REMOTE_BRANCH_PREFIX = "refs/remotes/"
DETACHED_HEAD = "HEAD"


def inspect_repo_status(path: str, *, discover: bool = True) -> RepoStatus | None:
    """Return the branch and cleanliness for ``path``, or None outside a repository.

    With ``discover`` the repository is searched for in ``path`` and its
    parents; otherwise ``path`` must be the work tree root. Git failures of any
    kind yield None.
    """

    if not path:
        return None
    try:
        return _inspect(Path(path), discover=discover)
    except GitCommandError as exc:
        logging.debug("No repository status for %s: %s", path, exc)
        return None


def _inspect(path: Path, *, discover: bool) -> RepoStatus | None:
    root = find_repo_root(path, discover=discover)
    if root is None or not git.head_exists(root):
        return None
    ref = git.head_ref(root) or DETACHED_HEAD
    entries = working_tree_entries(root)
    return RepoStatus(
        branch_name=branch_display_name(ref),
        is_remote=ref.startswith(REMOTE_BRANCH_PREFIX),
        is_dirty=len(entries) > 0,
        root=str(root),
        entries=tuple(entries),
    )


def find_repo_root(path: Path, *, discover: bool = True) -> Path | None:
    if not path.is_dir():
        return None
    top = git.show_toplevel(path)
    if not discover and top.resolve() != path.resolve():
        logging.debug("%s is inside %s but is not its root", path, top)
        return None
    return top


def branch_display_name(ref: str) -> str:
    if ref.startswith(LOCAL_BRANCH_PREFIX):
        return ref[len(LOCAL_BRANCH_PREFIX):]
    return ref


def working_tree_entries(root: Path) -> list[StatusEntry]:
    """Pending work tree changes, untracked files included and ignored files excluded."""

    entries = [StatusEntry(code=code, path=name) for code, name in git.worktree_changes(root)]
    entries.extend(StatusEntry(code="??", path=name) for name in git.untracked_files(root))
    return entries


__all__ = [
    "inspect_repo_status",
    "find_repo_root",
    "branch_display_name",
    "working_tree_entries",
]
