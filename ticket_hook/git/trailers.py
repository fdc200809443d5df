"""Trailer editing through git interpret-trailers."""

from pathlib import Path
from typing import Union

from ticket_hook.git.runner import _run_git_command


def append_trailer(message_file: Union[str, Path], key: str, value: str) -> None:
    """Add a `key:value` trailer to a commit message file in place.

    git places the trailer in the message's trailer block, keeping the body
    and any existing trailers.

    Args:
        message_file: Path to the commit message file.
        key: Trailer key, e.g. "Ticket".
        value: Trailer value, e.g. "DX-1234".

    Raises:
        GitError: If git interpret-trailers fails.
    """
    _run_git_command([
        "interpret-trailers",
        "--in-place",
        "--trailer",
        f"{key}:{value}",
        str(message_file),
    ])
