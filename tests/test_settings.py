"""Tests for ticket_hook.settings module."""

import pytest
from pydantic import ValidationError

from ticket_hook.constants import TICKET_PREFIX, AnnotationStrategy
from ticket_hook.settings import HookSettings


class TestHookSettings:
    """Tests for HookSettings model."""

    def test_default_values(self):
        """Test default settings."""
        settings = HookSettings()
        assert settings.prefix == TICKET_PREFIX == "DX-"
        assert settings.strategy == AnnotationStrategy.TRAILER

    def test_strategy_from_string(self):
        """Test strategy names are parsed case-insensitively."""
        assert HookSettings(strategy="PREFIX").strategy == AnnotationStrategy.PREFIX
        assert HookSettings(strategy="trailer").strategy == AnnotationStrategy.TRAILER

    def test_invalid_strategy(self):
        """Test that unknown strategies are rejected."""
        with pytest.raises(ValidationError):
            HookSettings(strategy="suffix")

    def test_prefix_is_stripped(self):
        """Test surrounding whitespace is removed from the prefix."""
        assert HookSettings(prefix="  ABC-  ").prefix == "ABC-"

    def test_empty_prefix_rejected(self):
        """Test that an empty prefix is rejected."""
        with pytest.raises(ValidationError):
            HookSettings(prefix="   ")

    def test_none_prefix_uses_default(self):
        """Test that None falls back to the built-in prefix."""
        assert HookSettings(prefix=None).prefix == TICKET_PREFIX

    def test_expected_format(self):
        """Test the human-readable format."""
        assert HookSettings().expected_format == "DX-[NUMBER]"
        assert HookSettings(prefix="proj-").expected_format == "PROJ-[NUMBER]"
