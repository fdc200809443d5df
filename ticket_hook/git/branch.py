"""Current branch lookup."""

from typing import Optional

from ticket_hook.git.exceptions import GitError
from ticket_hook.git.runner import _run_git_command


def get_current_branch() -> Optional[str]:
    """Get the short name of the checked-out branch.

    Returns:
        The branch name, or None when HEAD is detached or the lookup fails.
    """
    try:
        branch = _run_git_command(["symbolic-ref", "--short", "HEAD"])
    except GitError:
        # Detached HEAD: symbolic-ref exits non-zero
        return None
    return branch or None
