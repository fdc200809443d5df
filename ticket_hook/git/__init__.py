"""Git collaborators for ticket-hook.

This package provides the narrow git surface the hook depends on:
- exceptions: GitError
- runner: _run_git_command, get_repo_root, get_hooks_dir
- branch: get_current_branch
- trailers: append_trailer
"""

from ticket_hook.git.exceptions import GitError

from ticket_hook.git.runner import (
    _run_git_command,
    get_repo_root,
    get_hooks_dir,
)

from ticket_hook.git.branch import get_current_branch

from ticket_hook.git.trailers import append_trailer


__all__ = [
    "GitError",
    "_run_git_command",
    "get_repo_root",
    "get_hooks_dir",
    "get_current_branch",
    "append_trailer",
]
