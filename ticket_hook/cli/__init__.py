"""CLI entry point for ticket-hook."""

from typing import Optional

import typer

from ticket_hook import __version__
from ticket_hook.cli.install import install_command, uninstall_command
from ticket_hook.cli.run import run_command
from ticket_hook.cli.show import show_command

app = typer.Typer(
    name="ticket-hook",
    help="ticket-hook: tag commit messages with the ticket from your branch",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ticket-hook {__version__}")
        raise typer.Exit(0)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """ticket-hook: tag commit messages with the ticket from your branch."""


app.command("run")(run_command)
app.command("install")(install_command)
app.command("uninstall")(uninstall_command)
app.command("show")(show_command)


__all__ = [
    "app",
    "run_command",
    "install_command",
    "uninstall_command",
    "show_command",
]
