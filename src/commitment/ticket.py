from __future__ import annotations

import re
from typing import NamedTuple

# Ticket, then any glued non-whitespace suffix (dropped), then the remainder.
_TICKET_PATTERN = re.compile(r"([A-Z]+-\d+)(\S*)(?:\s+(.*))?")


class ParsedTicket(NamedTuple):
    ticket: str | None
    remainder: str | None


def to_ticket(text: str) -> ParsedTicket:
    """Split a leading ticket such as ``ABC-123`` off a string.

    ``ABC-123x tail`` and ``ABC-123-NOPE tail`` both give ``("ABC-123", "tail")``.
    A string that does not start with a ticket is returned whole as the
    remainder; an empty string gives ``(None, None)``.
    """
    if not text:
        return ParsedTicket(None, None)

    match = _TICKET_PATTERN.fullmatch(text)
    if match:
        return ParsedTicket(match.group(1), match.group(3))
    return ParsedTicket(None, text)


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
