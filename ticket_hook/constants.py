"""Constants for ticket-hook.

Contains:
- TICKET_PREFIX: Issue-tracker namespace recognized in branches and messages
- TICKET_TRAILER_KEY: Key used for the structured trailer line
- AnnotationStrategy: How a found ticket is written into the message
- HOOK_MARKER: Line identifying a commit-msg script installed by ticket-hook
"""

from enum import Enum


# Change this value to use a different issue tracker namespace.
TICKET_PREFIX = "DX-"

TICKET_TRAILER_KEY = "Ticket"

HOOK_NAME = "commit-msg"

HOOK_MARKER = "# installed by ticket-hook"

EXIT_NOTICE = "commit-msg hook is exiting with exit code 0 to not block the commit."


class AnnotationStrategy(Enum):
    """Ways of embedding the ticket in the commit message."""

    TRAILER = "trailer"
    PREFIX = "prefix"

