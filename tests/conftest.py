"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_message_file(temp_dir):
    """Factory writing a COMMIT_EDITMSG file with the given content."""

    def _make(content: str = "") -> Path:
        path = temp_dir / "COMMIT_EDITMSG"
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def trailer_writer():
    """Stand-in for git interpret-trailers that records its calls."""
    return MagicMock(return_value=None)


@pytest.fixture
def git_result():
    """Factory building a successful subprocess.run result."""

    def _make(stdout: str = "") -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.returncode = 0
        return result

    return _make
