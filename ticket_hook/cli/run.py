"""CLI command executed by git as the commit-msg hook."""

from typing import Optional

import typer

from ticket_hook.constants import TICKET_PREFIX, AnnotationStrategy
from ticket_hook.hook import print_warning, run_hook
from ticket_hook.settings import HookSettings


def run_command(
    message_file: Optional[str] = typer.Argument(
        None,
        help="Path to the commit message file (passed by git)",
        show_default=False,
    ),
    prefix: str = typer.Option(
        TICKET_PREFIX,
        "--prefix",
        help="Ticket prefix to look for",
    ),
    strategy: str = typer.Option(
        AnnotationStrategy.TRAILER.value,
        "--strategy",
        help="How to write the ticket: 'trailer' or 'prefix'",
    ),
) -> None:
    """Add the ticket reference to a commit message. Always exits 0."""
    try:
        settings = HookSettings(prefix=prefix, strategy=strategy)
    except ValueError as e:
        print_warning(f"Invalid hook settings: {e}")
        raise typer.Exit(0)

    outcome = run_hook(message_file, settings)
    if outcome.warning:
        print_warning(outcome.warning)
    raise typer.Exit(0)
