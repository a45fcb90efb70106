"""
Tests for Voice Edit Command Parser
===================================
Classification of every command family and the order they are tried in.
"""

import pytest

from edit_commands import (
    ReplaceCommand, DeleteCommand, InsertCommand, CapitalizeCommand, ScratchCommand,
    WordCountCommand, ReadCommand, UndoCommand, RedoCommand, UnknownCommand,
    ReadType, InsertPosition, parse_edit_command,
)


class TestClassification:
    """Examples from each pattern family."""

    def test_replace_example(self):
        """Test replace example."""
        assert parse_edit_command("replace hello with goodbye").to_dict() == {
            "type": "replace", "target": "hello", "replacement": "goodbye",
        }

    def test_undo_example(self):
        """Test undo example."""
        assert parse_edit_command("undo").to_dict() == {"type": "undo"}

    def test_unknown_example(self):
        """Test unknown example."""
        command = parse_edit_command("banana")
        assert command.to_dict() == {"type": "unknown"}
        assert command.utterance == "banana"

    @pytest.mark.parametrize("utterance,expected", [
        ("undo", UndoCommand()),
        ("Undo that", UndoCommand()),
        ("go back", UndoCommand()),
        ("redo", RedoCommand()),
        ("redo that", RedoCommand()),
        ("go forward", RedoCommand()),
        ("scratch that", ScratchCommand()),
        ("scratch", ScratchCommand()),
        ("word count", WordCountCommand()),
        ("how many words", WordCountCommand()),
        ("count words", WordCountCommand()),
    ])
    def test_simple_phrases(self, utterance, expected):
        """Test simple phrases."""
        assert parse_edit_command(utterance) == expected

    @pytest.mark.parametrize("utterance,read_type,stop", [
        ("stop", ReadType.BACK, True),
        ("stop reading", ReadType.BACK, True),
        ("read back", ReadType.BACK, False),
        ("read that", ReadType.BACK, False),
        ("read the last sentence", ReadType.BACK, False),
        ("read all", ReadType.ALL, False),
        ("read everything", ReadType.ALL, False),
        ("read document", ReadType.ALL, False),
        ("read selection", ReadType.SELECTION, False),
        ("read selected", ReadType.SELECTION, False),
    ])
    def test_read_phrases(self, utterance, read_type, stop):
        """Test read phrases."""
        assert parse_edit_command(utterance) == ReadCommand(read_type, stop=stop)

    @pytest.mark.parametrize("utterance,target", [
        ("capitalize that", None),
        ("caps that", None),
        ("capitalize paris", "paris"),
        ("caps london bridge", "london bridge"),
    ])
    def test_capitalize(self, utterance, target):
        """Test capitalize."""
        assert parse_edit_command(utterance) == CapitalizeCommand(target)

    @pytest.mark.parametrize("utterance,target,replacement", [
        ("change cat to dog", "cat", "dog"),
        ("swap red for blue", "red", "blue"),
        ("make this say that", "this", "that"),
        ("substitute big with large", "big", "large"),
        ("REPLACE Foo WITH Bar", "Foo", "Bar"),
        ("replace the cat with the dog with a hat", "the cat", "the dog with a hat"),
    ])
    def test_replace_variants(self, utterance, target, replacement):
        """Test replace variants."""
        assert parse_edit_command(utterance) == ReplaceCommand(target, replacement)

    @pytest.mark.parametrize("utterance", ["delete the cat", "remove the cat", "erase the cat"])
    def test_delete_variants(self, utterance):
        """Test delete variants."""
        assert parse_edit_command(utterance) == DeleteCommand("the cat")

    @pytest.mark.parametrize("utterance,expected", [
        ("insert very much after cats", InsertCommand("very much", "cats", InsertPosition.AFTER)),
        ("add quickly after ran", InsertCommand("quickly", "ran", InsertPosition.AFTER)),
        ("insert really before like", InsertCommand("really", "like", InsertPosition.BEFORE)),
        ("add milk before tea", InsertCommand("milk", "tea", InsertPosition.BEFORE)),
    ])
    def test_insert_variants(self, utterance, expected):
        """Test insert variants."""
        assert parse_edit_command(utterance) == expected

    def test_insert_to_dict(self):
        """Test insert to dict."""
        assert parse_edit_command("insert very much after cats").to_dict() == {
            "type": "insert", "insertion": "very much", "target": "cats", "position": "after",
        }


class TestOrderingAndEdgeCases:
    """First matching family wins; partial commands are unknown."""

    def test_capitalize_checked_before_replace(self):
        """Test capitalize checked before replace."""
        assert parse_edit_command("capitalize replace a with b") == CapitalizeCommand("replace a with b")

    def test_surrounding_whitespace_ignored(self):
        """Test surrounding whitespace ignored."""
        assert parse_edit_command("   undo  ") == UndoCommand()

    @pytest.mark.parametrize("utterance", ["read", "delete", "add milk", "make coffee", "undo it all", ""])
    def test_incomplete_commands_are_unknown(self, utterance):
        """Test incomplete commands are unknown."""
        assert isinstance(parse_edit_command(utterance), UnknownCommand)

    def test_payload_keeps_case(self):
        """Test payload keeps case."""
        command = parse_edit_command("Replace Paris with London")
        assert (command.target, command.replacement) == ("Paris", "London")
