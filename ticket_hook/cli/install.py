"""CLI commands for installing and removing the commit-msg hook."""

import typer

from ticket_hook.constants import TICKET_PREFIX, AnnotationStrategy
from ticket_hook.git import GitError, get_hooks_dir
from ticket_hook.install import HookInstallError, install_hook, uninstall_hook
from ticket_hook.settings import HookSettings


def install_command(
    prefix: str = typer.Option(
        TICKET_PREFIX,
        "--prefix",
        help="Ticket prefix the installed hook looks for",
    ),
    strategy: AnnotationStrategy = typer.Option(
        AnnotationStrategy.TRAILER,
        "--strategy",
        help="How the installed hook writes the ticket: 'trailer' or 'prefix'",
        case_sensitive=False,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing commit-msg hook",
    ),
) -> None:
    """Install the commit-msg hook into the current repository."""
    try:
        settings = HookSettings(prefix=prefix, strategy=strategy)
        hook_file = install_hook(get_hooks_dir(), settings, force=force)
    except (GitError, HookInstallError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Installed commit-msg hook: {hook_file}")
    typer.echo(f"  Prefix: {settings.prefix}")
    typer.echo(f"  Strategy: {settings.strategy.value}")


def uninstall_command() -> None:
    """Remove the commit-msg hook from the current repository."""
    try:
        removed = uninstall_hook(get_hooks_dir())
    except (GitError, HookInstallError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo("Removed commit-msg hook.")
    else:
        typer.echo("No commit-msg hook installed.")
