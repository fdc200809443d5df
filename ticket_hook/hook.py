"""The commit-msg hook run.

The run is a single pass: read the message, skip it if it is already
tagged, find a ticket (branch first, then message text) and write it into
the message. Every failure ends in a warning, never an exception, so the
caller can always exit 0.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

import typer

from ticket_hook.annotate import (
    TrailerWriter,
    annotate_message_file,
    format_message_prefix,
    format_trailer_value,
)
from ticket_hook.constants import EXIT_NOTICE, AnnotationStrategy
from ticket_hook.extract import TicketSource, is_already_tagged, resolve_ticket
from ticket_hook.git import GitError, get_current_branch
from ticket_hook.git import append_trailer as git_append_trailer
from ticket_hook.settings import HookSettings


class HookStatus(Enum):
    """How a hook run ended."""

    ANNOTATED = "annotated"
    ALREADY_TAGGED = "already_tagged"
    NO_TICKET = "no_ticket"
    NO_FILE = "no_file"
    ERROR = "error"


@dataclass
class HookOutcome:
    """Result of a hook run."""

    status: HookStatus
    ticket: Optional[str] = None
    source: Optional[TicketSource] = None
    warning: Optional[str] = None


def print_warning(message: Optional[str]) -> None:
    """Print a warning and the exit notice to stderr in yellow.

    Args:
        message: Warning text; only the exit notice is printed if empty.
    """
    if message:
        typer.secho(f"WARNING: {message}", fg=typer.colors.YELLOW, err=True)
    typer.secho(EXIT_NOTICE, fg=typer.colors.YELLOW, err=True)


def _safe_current_branch(current_branch: Callable[[], Optional[str]]) -> Optional[str]:
    """Look up the branch, treating any failure as 'no branch'."""
    try:
        return current_branch()
    except (GitError, OSError):
        return None


def _run(
    message_file: Optional[Union[str, Path]],
    settings: HookSettings,
    current_branch: Callable[[], Optional[str]],
    append_trailer: TrailerWriter,
) -> HookOutcome:
    if not message_file:
        return HookOutcome(
            HookStatus.NO_FILE,
            warning="Unable to determine git commit message file.",
        )

    try:
        with open(message_file, "r", encoding="utf-8") as f:
            message = f.read()
    except OSError as e:
        return HookOutcome(
            HookStatus.ERROR,
            warning=f"Unable to read commit message file: {e}",
        )

    if is_already_tagged(message, settings.prefix):
        return HookOutcome(HookStatus.ALREADY_TAGGED)

    branch = _safe_current_branch(current_branch)
    ticket, source = resolve_ticket(branch, message, settings.prefix)
    if not ticket:
        found = f"found branch '{branch}'" if branch else "no branch found (detached HEAD?)"
        return HookOutcome(
            HookStatus.NO_TICKET,
            warning=(
                f"Unable to find a ticket number. Your branch or commit message "
                f"needs to include {settings.expected_format}, {found}."
            ),
        )

    try:
        annotate_message_file(message_file, settings, ticket, append_trailer)
    except (OSError, GitError) as e:
        if settings.strategy == AnnotationStrategy.PREFIX:
            value = format_message_prefix(settings.prefix, ticket).strip()
        else:
            value = format_trailer_value(settings.prefix, ticket)
        return HookOutcome(
            HookStatus.ERROR,
            ticket=ticket,
            source=source,
            warning=f"Unable to add {value} to the commit message: {e}",
        )

    return HookOutcome(HookStatus.ANNOTATED, ticket=ticket, source=source)


def run_hook(
    message_file: Optional[Union[str, Path]],
    settings: Optional[HookSettings] = None,
    current_branch: Optional[Callable[[], Optional[str]]] = None,
    append_trailer: Optional[TrailerWriter] = None,
) -> HookOutcome:
    """Run the commit-msg hook against a message file.

    Args:
        message_file: Path to the commit message file (git's first hook argument).
        settings: Hook settings; defaults to the built-in prefix and strategy.
        current_branch: Branch lookup, returning None on detached HEAD.
        append_trailer: Trailer writer used by the trailer strategy.

    Returns:
        The outcome. This function does not raise.
    """
    settings = settings or HookSettings()
    current_branch = current_branch or get_current_branch
    append_trailer = append_trailer or git_append_trailer
    try:
        return _run(message_file, settings, current_branch, append_trailer)
    except Exception as e:
        return HookOutcome(HookStatus.ERROR, warning=f"Error in commit-msg hook: {e}")
