"""Writing the ticket into the commit message file.

Two strategies:
- trailer: append 'Ticket:DX-1234' to git's trailer block
- prefix: prepend 'DX1234 ' to the message, leaving the rest verbatim
"""

from pathlib import Path
from typing import Callable, Optional, Union

from ticket_hook.constants import TICKET_TRAILER_KEY, AnnotationStrategy
from ticket_hook.extract import is_scissors_line
from ticket_hook.git import append_trailer as git_append_trailer
from ticket_hook.settings import HookSettings


TrailerWriter = Callable[[Union[str, Path], str, str], None]


def format_trailer_value(prefix: str, ticket: str) -> str:
    """Format the trailer value, e.g. 'DX-1234'."""
    return f"{prefix.upper()}{ticket}"


def format_message_prefix(prefix: str, ticket: str) -> str:
    """Format the message prefix, e.g. 'DX1234 '."""
    return f"{prefix.upper().rstrip('-')}{ticket} "


def apply_trailer(
    message_file: Union[str, Path],
    prefix: str,
    ticket: str,
    append_trailer: Optional[TrailerWriter] = None,
) -> None:
    """Append the ticket trailer to the message file.

    Raises:
        GitError: If the trailer could not be written.
    """
    append_trailer = append_trailer or git_append_trailer
    append_trailer(message_file, TICKET_TRAILER_KEY, format_trailer_value(prefix, ticket))


def _insert_prefix(content: str, marker: str) -> str:
    """Put the marker in front of the subject, skipping git comments and blank lines."""
    lines = content.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if is_scissors_line(line):
            break
        if line.startswith("#") or not line.strip():
            continue
        lines[i] = marker + line
        return "".join(lines)
    # No subject yet: the marker becomes its own line above any comments
    if not content:
        return marker
    return marker.rstrip() + "\n" + content


def apply_prefix(message_file: Union[str, Path], prefix: str, ticket: str) -> None:
    """Prepend the ticket to the subject line of the message file.

    Raises:
        OSError: If the file could not be read or written.
    """
    path = Path(message_file)
    # newline="" keeps the original line endings untouched
    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(_insert_prefix(content, format_message_prefix(prefix, ticket)))


def annotate_message_file(
    message_file: Union[str, Path],
    settings: HookSettings,
    ticket: str,
    append_trailer: Optional[TrailerWriter] = None,
) -> None:
    """Write the ticket into the message file using the configured strategy.

    Args:
        message_file: Path to the commit message file.
        settings: Hook settings (prefix and strategy).
        ticket: The ticket digits.
        append_trailer: Trailer writer used by the trailer strategy
            (defaults to git interpret-trailers).
    """
    if settings.strategy == AnnotationStrategy.PREFIX:
        apply_prefix(message_file, settings.prefix, ticket)
    else:
        apply_trailer(message_file, settings.prefix, ticket, append_trailer)
