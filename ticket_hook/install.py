"""Installation of the commit-msg hook script into a repository.

The installed script is a small shell wrapper around `ticket-hook run`. It
carries a marker line so that later installs and uninstalls can tell it
apart from hooks written by someone else.
"""

import os
import shlex
import stat
from pathlib import Path

from ticket_hook.constants import HOOK_MARKER, HOOK_NAME
from ticket_hook.settings import HookSettings


class HookInstallError(Exception):
    """Raised when the hook script cannot be installed or removed."""

    pass


def render_hook_script(settings: HookSettings) -> str:
    """Render the commit-msg shell script for the given settings.

    Args:
        settings: Prefix and strategy baked into the script.

    Returns:
        The script text.
    """
    command = " ".join([
        "ticket-hook",
        "run",
        "--prefix",
        shlex.quote(settings.prefix),
        "--strategy",
        settings.strategy.value,
    ])
    return (
        "#!/bin/sh\n"
        f"{HOOK_MARKER}\n"
        f'{command} "$1"\n'
        "exit 0\n"
    )


def is_managed_hook(hook_file: Path) -> bool:
    """Check whether a hook script was written by ticket-hook."""
    try:
        return HOOK_MARKER in hook_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def install_hook(hooks_dir: Path, settings: HookSettings, force: bool = False) -> Path:
    """Write the commit-msg hook into a hooks directory.

    Args:
        hooks_dir: The repository's hooks directory.
        settings: Prefix and strategy for the installed hook.
        force: Overwrite a commit-msg hook that ticket-hook did not write.

    Returns:
        Path to the installed hook.

    Raises:
        HookInstallError: If a foreign hook exists or the file cannot be written.
    """
    hook_file = hooks_dir / HOOK_NAME
    if hook_file.exists() and not force and not is_managed_hook(hook_file):
        raise HookInstallError(
            f"{hook_file} already exists and was not installed by ticket-hook. "
            "Use --force to overwrite it."
        )

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        hook_file.write_text(render_hook_script(settings), encoding="utf-8")
        mode = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH
        os.chmod(hook_file, mode)
    except OSError as e:
        raise HookInstallError(f"Failed to write {hook_file}: {e}")

    return hook_file


def uninstall_hook(hooks_dir: Path) -> bool:
    """Remove the commit-msg hook if ticket-hook installed it.

    Args:
        hooks_dir: The repository's hooks directory.

    Returns:
        True if a hook was removed, False if none was installed.

    Raises:
        HookInstallError: If the existing hook was not written by ticket-hook.
    """
    hook_file = hooks_dir / HOOK_NAME
    if not hook_file.exists():
        return False
    if not is_managed_hook(hook_file):
        raise HookInstallError(f"{hook_file} was not installed by ticket-hook; leaving it alone.")
    try:
        hook_file.unlink()
    except OSError as e:
        raise HookInstallError(f"Failed to remove {hook_file}: {e}")
    return True
