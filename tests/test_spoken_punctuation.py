"""
Tests for Spoken Punctuation
============================
"""

import pytest

from spoken_punctuation import process_voice_commands


class TestProcessVoiceCommands:
    """Spoken words become symbols with tidy spacing."""

    @pytest.mark.parametrize("spoken,written", [
        ("hello comma world period", "hello, world."),
        ("is it done question mark", "is it done?"),
        ("the end full stop", "the end."),
        ("wow exclamation point", "wow!"),
        ("first line new line second line", "first line\nsecond line"),
        ("one new paragraph two", "one\n\ntwo"),
        ("Hello Comma there", "Hello, there"),
        ("items colon apples semicolon pears", "items: apples; pears"),
    ])
    def test_replacements(self, spoken, written):
        """Test replacements."""
        assert process_voice_commands(spoken) == written

    @pytest.mark.parametrize("text", ["a periodic table", "the commander spoke", "plain text"])
    def test_whole_words_only(self, text):
        """Test whole words only."""
        assert process_voice_commands(text) == text

    def test_empty(self):
        """Test empty."""
        assert process_voice_commands("") == ""
