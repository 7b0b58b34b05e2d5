from __future__ import annotations

import logging
from dataclasses import dataclass

from . import git
from .exceptions import CommitCreationError, GitError, RepositoryAccessError, StagingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitResult:
    sha: str
    tree: str
    parent: str | None
    message: str

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


def commit_all(message: str) -> CommitResult:
    """Stage the whole working tree and commit it on the current branch.

    The commit gets the current tip of HEAD as its only parent, or no parent
    at all when the branch has no commits yet. Any failing step aborts the
    whole operation; nothing is retried.

    Raises:
        StagingError: ``git add`` or ``git write-tree`` failed.
        RepositoryAccessError: HEAD exists but could not be resolved.
        CommitCreationError: the commit object or the branch update failed.
    """
    try:
        git.stage_all()
    except GitError as e:
        raise StagingError("Staging working tree", str(e)) from e

    try:
        tree = git.write_tree()
    except GitError as e:
        raise StagingError("Writing index tree", str(e)) from e
    logger.debug("Wrote tree %s", tree)

    try:
        parent = git.resolve_tip()
    except GitError as e:
        raise RepositoryAccessError(f"Failed to resolve HEAD: {e}") from e
    logger.debug("Parent commit: %s", parent or "none (root commit)")

    try:
        sha = git.create_commit(tree, message, parent)
    except GitError as e:
        raise CommitCreationError("Creating commit", str(e)) from e

    subject = message.split("\n", 1)[0]
    reflog = f"commit{' (initial)' if parent is None else ''}: {subject}"
    try:
        git.update_head(sha, parent, reflog)
    except GitError as e:
        raise CommitCreationError("Updating branch", str(e)) from e
    logger.debug("Advanced HEAD to %s", sha)

    return CommitResult(sha=sha, tree=tree, parent=parent, message=message)
