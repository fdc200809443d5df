"""Git commit-msg hook that tags commit messages with a ticket reference."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ticket-hook")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
