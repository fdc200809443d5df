"""CLI command showing which ticket the hook would use."""

from pathlib import Path
from typing import Optional

import typer

from ticket_hook.constants import TICKET_PREFIX
from ticket_hook.extract import is_already_tagged, resolve_ticket
from ticket_hook.git import get_current_branch
from ticket_hook.settings import HookSettings


def show_command(
    message_file: Optional[Path] = typer.Argument(
        None,
        help="Commit message file to scan as well",
        show_default=False,
    ),
    prefix: str = typer.Option(
        TICKET_PREFIX,
        "--prefix",
        help="Ticket prefix to look for",
    ),
) -> None:
    """Show the ticket the hook would use, without changing anything."""
    try:
        settings = HookSettings(prefix=prefix)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    message = ""
    if message_file is not None:
        try:
            message = message_file.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Unable to read {message_file}: {e}", err=True)
            raise typer.Exit(1)

    branch = get_current_branch()
    typer.echo(f"Branch: {branch or '(detached HEAD)'}")

    if message and is_already_tagged(message, settings.prefix):
        typer.echo("Message is already tagged; the hook would leave it unchanged.")
        return

    ticket, source = resolve_ticket(branch, message, settings.prefix)
    if ticket:
        typer.echo(f"Ticket: {settings.prefix.upper()}{ticket} (from {source.value})")
    else:
        typer.echo(f"Ticket: none (expected {settings.expected_format})")
