"""Tests for ticket_hook.install module."""

import os

import pytest

from ticket_hook.constants import HOOK_MARKER, AnnotationStrategy
from ticket_hook.install import (
    HookInstallError,
    install_hook,
    is_managed_hook,
    render_hook_script,
    uninstall_hook,
)
from ticket_hook.settings import HookSettings


class TestRenderHookScript:
    """Tests for render_hook_script function."""

    def test_default_script(self):
        """Test the script for default settings."""
        script = render_hook_script(HookSettings())

        assert script.startswith("#!/bin/sh\n")
        assert HOOK_MARKER in script
        assert 'ticket-hook run --prefix DX- --strategy trailer "$1"' in script
        assert script.rstrip().endswith("exit 0")

    def test_prefix_strategy(self):
        """Test that the strategy is baked into the command."""
        script = render_hook_script(HookSettings(strategy=AnnotationStrategy.PREFIX))

        assert "--strategy prefix" in script

    def test_prefix_is_quoted(self):
        """Test that unusual prefixes are shell-quoted."""
        script = render_hook_script(HookSettings(prefix="MY TEAM-"))

        assert "--prefix 'MY TEAM-'" in script


class TestInstallHook:
    """Tests for install_hook function."""

    def test_writes_executable_hook(self, temp_dir):
        """Test a fresh install."""
        hook_file = install_hook(temp_dir, HookSettings())

        assert hook_file == temp_dir / "commit-msg"
        assert is_managed_hook(hook_file)
        assert os.access(hook_file, os.X_OK)

    def test_creates_hooks_dir(self, temp_dir):
        """Test that a missing hooks directory is created."""
        hooks_dir = temp_dir / "custom" / "hooks"

        hook_file = install_hook(hooks_dir, HookSettings())

        assert hook_file.exists()

    def test_reinstall_over_own_hook(self, temp_dir):
        """Test that our own hook can be replaced without --force."""
        install_hook(temp_dir, HookSettings())

        hook_file = install_hook(temp_dir, HookSettings(strategy=AnnotationStrategy.PREFIX))

        assert "--strategy prefix" in hook_file.read_text(encoding="utf-8")

    def test_refuses_foreign_hook(self, temp_dir):
        """Test that another tool's hook is not overwritten."""
        foreign = temp_dir / "commit-msg"
        foreign.write_text("#!/bin/sh\necho other\n", encoding="utf-8")

        with pytest.raises(HookInstallError) as exc_info:
            install_hook(temp_dir, HookSettings())

        assert "--force" in str(exc_info.value)
        assert foreign.read_text(encoding="utf-8") == "#!/bin/sh\necho other\n"

    def test_force_overwrites_foreign_hook(self, temp_dir):
        """Test --force replaces another tool's hook."""
        (temp_dir / "commit-msg").write_text("#!/bin/sh\necho other\n", encoding="utf-8")

        hook_file = install_hook(temp_dir, HookSettings(), force=True)

        assert is_managed_hook(hook_file)


class TestUninstallHook:
    """Tests for uninstall_hook function."""

    def test_removes_own_hook(self, temp_dir):
        """Test removing an installed hook."""
        install_hook(temp_dir, HookSettings())

        assert uninstall_hook(temp_dir) is True
        assert not (temp_dir / "commit-msg").exists()

    def test_nothing_installed(self, temp_dir):
        """Test uninstall when no hook exists."""
        assert uninstall_hook(temp_dir) is False

    def test_refuses_foreign_hook(self, temp_dir):
        """Test that another tool's hook is kept."""
        foreign = temp_dir / "commit-msg"
        foreign.write_text("#!/bin/sh\necho other\n", encoding="utf-8")

        with pytest.raises(HookInstallError):
            uninstall_hook(temp_dir)

        assert foreign.exists()


class TestIsManagedHook:
    """Tests for is_managed_hook function."""

    def test_missing_file(self, temp_dir):
        """Test a path that does not exist."""
        assert is_managed_hook(temp_dir / "commit-msg") is False

    def test_binary_file(self, temp_dir):
        """Test a file that is not valid UTF-8."""
        hook = temp_dir / "commit-msg"
        hook.write_bytes(b"\xff\xfe\x00binary")

        assert is_managed_hook(hook) is False


class TestHookInstallError:
    """Tests for HookInstallError."""

    def test_is_exception(self):
        """Test that the error carries its message."""
        error = HookInstallError("cannot write hook")

        assert isinstance(error, Exception)
        assert str(error) == "cannot write hook"
