"""Build the final commit message from the branch name and the user's text.

    branch          message               result
    ABC-123         message               ABC-123 Message
    ABC-123-NOPE    Tail                  ABC-123 Tail
    ABC-123x        ABC-123 Tail          ABC-123 Tail
    feature         message               Message
    ABC-123         DEF-456 Tail          TicketMismatchError
    ABC-123         (empty)               EmptyMessageError
"""
from __future__ import annotations

import logging

from .exceptions import EmptyMessageError, TicketMismatchError
from .ticket import capitalize_first, to_ticket

logger = logging.getLogger(__name__)


def compose_message(branch: str, message: str) -> str:
    branch_ticket, _ = to_ticket(branch)
    message_ticket, remainder = to_ticket(message.rstrip())
    logger.debug(
        "Parsed branch %r -> ticket=%r; message %r -> ticket=%r remainder=%r",
        branch, branch_ticket, message, message_ticket, remainder,
    )

    # Order matters: a message that states its own ticket and text wins
    # over the branch ticket, but only once a mismatch has been ruled out.
    if branch_ticket and message_ticket and branch_ticket != message_ticket:
        raise TicketMismatchError(branch_ticket, message_ticket)
    if branch_ticket and not message_ticket and remainder is not None:
        return f"{branch_ticket} {capitalize_first(remainder)}"
    if message_ticket and remainder is not None:
        return f"{message_ticket} {capitalize_first(remainder)}"
    if remainder is None:
        raise EmptyMessageError("Failed to parse commit message: no message text given")

    return capitalize_first(remainder)
