"""Ticket extraction from branch names and commit message text.

Contains functions for:
- Extracting the ticket number from a branch name
- Extracting the ticket number from a commit message
- Detecting messages that already carry a ticket
- Resolving which ticket a hook run should use
"""

import re
from enum import Enum
from typing import Optional

from ticket_hook.constants import TICKET_TRAILER_KEY


class TicketSource(Enum):
    """Where a ticket number was found."""

    BRANCH = "branch"
    MESSAGE = "message"


def is_scissors_line(line: str) -> bool:
    """Check for git's '# ---- >8 ----' line; everything below it is dropped by git."""
    return line.startswith("# ") and ">8" in line


def _strip_comments(message: str) -> str:
    """Drop git comment lines ('#' prefixed) and anything below the scissors line."""
    kept = []
    for line in message.splitlines():
        if is_scissors_line(line):
            break
        if not line.startswith("#"):
            kept.append(line)
    return "\n".join(kept)


def extract_ticket_from_branch(branch: Optional[str], prefix: str) -> Optional[str]:
    """Extract the ticket number from a branch name.

    The branch must start with the prefix followed by digits, e.g.
    'DX-1234-fix-bug' gives '1234'. Matching is case-insensitive.

    Args:
        branch: The branch name, or None on detached HEAD.
        prefix: Ticket prefix, e.g. "DX-".

    Returns:
        The ticket digits or None.
    """
    if not branch:
        return None
    match = re.match(rf"^{re.escape(prefix)}(\d+).*", branch, re.IGNORECASE)
    if match:
        return match.group(1)
    return None


def find_trailer_ticket(message: str, prefix: str) -> Optional[str]:
    """Find the ticket number of the last 'Ticket: <prefix><digits>' line.

    Args:
        message: The commit message text.
        prefix: Ticket prefix, e.g. "DX-".

    Returns:
        The ticket digits or None.
    """
    pattern = rf"^{TICKET_TRAILER_KEY}:[ \t]*{re.escape(prefix)}(\d+)[ \t]*$"
    matches = re.findall(pattern, _strip_comments(message), re.IGNORECASE | re.MULTILINE)
    if matches:
        return matches[-1]
    return None


def extract_ticket_from_message(message: str, prefix: str) -> Optional[str]:
    """Extract the ticket number from commit message text.

    A 'Ticket:' trailer line wins over free text. Among several candidates
    the last one is used.

    Args:
        message: The commit message text.
        prefix: Ticket prefix, e.g. "DX-".

    Returns:
        The ticket digits or None.
    """
    ticket = find_trailer_ticket(message, prefix)
    if ticket:
        return ticket

    matches = re.findall(rf"{re.escape(prefix)}(\d+)", _strip_comments(message), re.IGNORECASE)
    if matches:
        return matches[-1]
    return None


def has_leading_ticket(message: str, prefix: str) -> bool:
    """Check whether the message already starts with a ticket.

    Both 'DX-12 ...' and the prefix-strategy form 'DX12 ...' count.

    Args:
        message: The commit message text.
        prefix: Ticket prefix, e.g. "DX-".

    Returns:
        True if the first line begins with the ticket.
    """
    stem = re.escape(prefix.rstrip("-"))
    pattern = rf"^\s*{stem}-?\d+\b"
    return re.match(pattern, _strip_comments(message), re.IGNORECASE) is not None


def is_already_tagged(message: str, prefix: str) -> bool:
    """Check whether a previous run (or the author) already tagged the message."""
    return has_leading_ticket(message, prefix) or find_trailer_ticket(message, prefix) is not None


def resolve_ticket(
    branch: Optional[str],
    message: str,
    prefix: str,
) -> tuple[Optional[str], Optional[TicketSource]]:
    """Pick the ticket for this commit, preferring the branch over the message.

    Args:
        branch: The branch name, or None on detached HEAD.
        message: The commit message text.
        prefix: Ticket prefix, e.g. "DX-".

    Returns:
        Tuple of (ticket digits, source), both None if nothing was found.
    """
    ticket = extract_ticket_from_branch(branch, prefix)
    if ticket:
        return ticket, TicketSource.BRANCH

    ticket = extract_ticket_from_message(message, prefix)
    if ticket:
        return ticket, TicketSource.MESSAGE

    return None, None
