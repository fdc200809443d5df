"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- get_hooks_dir: Get the directory git reads hook scripts from
"""

import subprocess
from pathlib import Path

from ticket_hook.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")


def get_hooks_dir() -> Path:
    """Get the hooks directory of the current repository.

    Honors core.hooksPath and worktrees, since git resolves both for
    `rev-parse --git-path hooks`.

    Returns:
        Absolute path to the hooks directory.

    Raises:
        GitError: If not in a git repository.
    """
    get_repo_root()
    hooks = Path(_run_git_command(["rev-parse", "--git-path", "hooks"]))
    if not hooks.is_absolute():
        # git prints paths relative to the current directory
        hooks = Path.cwd() / hooks
    return hooks
