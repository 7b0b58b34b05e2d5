from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .exceptions import GitError, RepositoryAccessError

logger = logging.getLogger(__name__)


def _run_git(*args: str, input: str | None = None) -> str:
    logger.debug("git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git", *args],
            input=input,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"git {' '.join(args)} failed: {e.stderr.strip()}") from e
    except FileNotFoundError:
        raise GitError("git is not installed or not in PATH")
    return result.stdout


def get_repo_root() -> Path:
    try:
        return Path(_run_git("rev-parse", "--show-toplevel").strip())
    except GitError as e:
        raise RepositoryAccessError(f"Failed to open repository: {e}") from e


def ensure_repository() -> Path:
    """Fail with RepositoryAccessError unless the cwd is inside a git work tree."""
    root = get_repo_root()
    logger.debug("Repository root: %s", root)
    return root


def get_current_branch() -> str:
    """Return the short name of the checked-out branch.

    Works on an unborn branch (no commits yet). Returns ``"HEAD"`` when
    HEAD is detached.
    """
    try:
        branch = _run_git("branch", "--show-current").strip()
    except GitError as e:
        raise RepositoryAccessError(f"Failed to get HEAD: {e}") from e
    return branch or "HEAD"


def has_changes() -> bool:
    """True if any tracked file is modified or any untracked file exists."""
    try:
        status = _run_git("status", "--porcelain", "--untracked-files=all")
    except GitError as e:
        raise RepositoryAccessError(f"Failed to get statuses: {e}") from e
    return bool(status.strip())


def stage_all() -> None:
    _run_git("add", "--all")


def write_tree() -> str:
    return _run_git("write-tree").strip()


def resolve_tip() -> str | None:
    """Return the commit HEAD points at, or None on an unborn branch."""
    logger.debug("git rev-parse --verify --quiet HEAD^{commit}")
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD^{commit}"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not in PATH")
    if result.returncode == 0:
        return result.stdout.strip()
    # --quiet exits 1 silently when HEAD does not resolve; anything else is a real error
    if result.returncode == 1 and not result.stderr.strip():
        return None
    raise GitError(f"git rev-parse HEAD failed: {result.stderr.strip()}")


def create_commit(tree: str, message: str, parent: str | None = None) -> str:
    args = ["commit-tree", tree]
    if parent:
        args += ["-p", parent]
    return _run_git(*args, "-F", "-", input=message.rstrip("\n") + "\n").strip()


def update_head(new: str, old: str | None, reflog_message: str) -> None:
    """Point the current branch at ``new``.

    ``old`` is the expected current value; None means the branch must not
    exist yet.
    """
    _run_git("update-ref", "-m", reflog_message, "HEAD", new, old or "")
