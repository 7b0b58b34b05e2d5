from __future__ import annotations


class CommitmentError(Exception):
    """Base exception for commitment."""


class CompositionError(CommitmentError):
    """No valid commit message could be built from branch and message."""


class TicketMismatchError(CompositionError):
    """Branch and message name different tickets."""

    def __init__(self, branch_ticket: str, message_ticket: str) -> None:
        self.branch_ticket = branch_ticket
        self.message_ticket = message_ticket
        super().__init__(
            f"Branch and message tickets do not match: "
            f"branch has {branch_ticket}, message has {message_ticket}"
        )


class EmptyMessageError(CompositionError):
    """Nothing left to use as the commit message."""


class GitError(CommitmentError):
    """git failed or is not available."""


class RepositoryAccessError(GitError):
    """Repository could not be opened, read, or its HEAD resolved."""


class NoChangesError(GitError):
    """Working tree has nothing to commit."""


class TransactionError(GitError):
    """A step of the commit transaction failed."""

    def __init__(self, step: str, detail: str) -> None:
        self.step = step
        self.detail = detail
        super().__init__(f"{step} failed: {detail}")


class StagingError(TransactionError):
    """Staging the working tree or writing the index tree failed."""


class CommitCreationError(TransactionError):
    """Creating the commit object or moving the branch failed."""
