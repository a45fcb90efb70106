#!/usr/bin/env python3
"""
Voice Edit Command Parser v1.0.0
================================
Classifies a spoken utterance into a structured edit command.

Each command type is its own dataclass, so a replace always carries a
replacement and an undo never carries a target. Classification walks
COMMAND_PATTERNS in order and the first match wins; anything else is an
UnknownCommand. Parsing never raises for unrecognized input.

Usage:
    from edit_commands import parse_edit_command

    cmd = parse_edit_command("replace hello with goodbye")
    cmd.to_dict()   # {'type': 'replace', 'target': 'hello', 'replacement': 'goodbye'}
"""

import re
from enum import Enum
from typing import List, Dict, Any, Optional, Callable, Tuple, ClassVar, Union
from dataclasses import dataclass

from config_logging import get_logger

__version__ = "1.0.0"

logger = get_logger('edit_commands')


class ReadType(str, Enum):
    BACK = 'back'
    ALL = 'all'
    SELECTION = 'selection'


class InsertPosition(str, Enum):
    BEFORE = 'before'
    AFTER = 'after'


@dataclass(frozen=True)
class ReplaceCommand:
    type: ClassVar[str] = 'replace'
    target: str
    replacement: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'target': self.target, 'replacement': self.replacement}


@dataclass(frozen=True)
class DeleteCommand:
    type: ClassVar[str] = 'delete'
    target: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'target': self.target}


@dataclass(frozen=True)
class InsertCommand:
    """Insert ``insertion`` immediately before or after ``target``."""
    type: ClassVar[str] = 'insert'
    insertion: str
    target: str
    position: InsertPosition

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'insertion': self.insertion,
            'target': self.target,
            'position': self.position.value,
        }


@dataclass(frozen=True)
class CapitalizeCommand:
    """Capitalize ``target``; a None target means the last word of the document."""
    type: ClassVar[str] = 'capitalize'
    target: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'type': self.type}
        if self.target is not None:
            result['target'] = self.target
        return result


@dataclass(frozen=True)
class ReadCommand:
    """Read aloud. ``stop`` is set for "stop"/"stop reading"."""
    type: ClassVar[str] = 'read'
    read_type: ReadType = ReadType.BACK
    stop: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'readType': self.read_type.value, 'stop': self.stop}


@dataclass(frozen=True)
class _SimpleCommand:
    type: ClassVar[str] = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type}


@dataclass(frozen=True)
class ScratchCommand(_SimpleCommand):
    type: ClassVar[str] = 'scratch'


@dataclass(frozen=True)
class WordCountCommand(_SimpleCommand):
    type: ClassVar[str] = 'word-count'


@dataclass(frozen=True)
class UndoCommand(_SimpleCommand):
    type: ClassVar[str] = 'undo'


@dataclass(frozen=True)
class RedoCommand(_SimpleCommand):
    type: ClassVar[str] = 'redo'


@dataclass(frozen=True)
class UnknownCommand:
    type: ClassVar[str] = 'unknown'
    utterance: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type}


EditCommand = Union[
    ReplaceCommand, DeleteCommand, InsertCommand, CapitalizeCommand, ScratchCommand,
    WordCountCommand, ReadCommand, UndoCommand, RedoCommand, UnknownCommand,
]

MUTATING_COMMAND_TYPES = frozenset({'replace', 'delete', 'insert', 'capitalize'})


def _phrase(*phrases: str) -> re.Pattern:
    return re.compile(r'(?:' + '|'.join(phrases) + r')', re.IGNORECASE)


def _pattern(source: str) -> re.Pattern:
    return re.compile(source, re.IGNORECASE)


# (pattern, constructor) pairs in classification order. Patterns are
# matched against the whole trimmed utterance; constructors receive the
# stripped capture groups.
COMMAND_PATTERNS: List[Tuple[re.Pattern, Callable[..., Any]]] = [
    (_phrase(r'undo', r'undo that', r'go back'), lambda: UndoCommand()),
    (_phrase(r'redo', r'redo that', r'go forward'), lambda: RedoCommand()),
    (_phrase(r'scratch that', r'scratch'), lambda: ScratchCommand()),
    (_phrase(r'word count', r'how many words', r'count words'), lambda: WordCountCommand()),

    (_phrase(r'stop reading', r'stop'), lambda: ReadCommand(ReadType.BACK, stop=True)),
    (_phrase(r'read back', r'read that', r'read the last sentence'),
     lambda: ReadCommand(ReadType.BACK)),
    (_phrase(r'read all', r'read everything', r'read document'),
     lambda: ReadCommand(ReadType.ALL)),
    (_phrase(r'read selection', r'read selected'), lambda: ReadCommand(ReadType.SELECTION)),

    (_phrase(r'capitalize that', r'caps that'), lambda: CapitalizeCommand()),
    (_pattern(r'capitalize\s+(.+)'), lambda target: CapitalizeCommand(target)),
    (_pattern(r'caps\s+(.+)'), lambda target: CapitalizeCommand(target)),

    (_pattern(r'replace\s+(.+?)\s+with\s+(.+)'), ReplaceCommand),
    (_pattern(r'change\s+(.+?)\s+to\s+(.+)'), ReplaceCommand),
    (_pattern(r'swap\s+(.+?)\s+for\s+(.+)'), ReplaceCommand),
    (_pattern(r'make\s+(.+?)\s+say\s+(.+)'), ReplaceCommand),
    (_pattern(r'substitute\s+(.+?)\s+with\s+(.+)'), ReplaceCommand),

    (_pattern(r'delete\s+(.+)'), DeleteCommand),
    (_pattern(r'remove\s+(.+)'), DeleteCommand),
    (_pattern(r'erase\s+(.+)'), DeleteCommand),

    (_pattern(r'insert\s+(.+?)\s+after\s+(.+)'),
     lambda insertion, target: InsertCommand(insertion, target, InsertPosition.AFTER)),
    (_pattern(r'add\s+(.+?)\s+after\s+(.+)'),
     lambda insertion, target: InsertCommand(insertion, target, InsertPosition.AFTER)),
    (_pattern(r'insert\s+(.+?)\s+before\s+(.+)'),
     lambda insertion, target: InsertCommand(insertion, target, InsertPosition.BEFORE)),
    (_pattern(r'add\s+(.+?)\s+before\s+(.+)'),
     lambda insertion, target: InsertCommand(insertion, target, InsertPosition.BEFORE)),
]


def parse_edit_command(utterance: str) -> EditCommand:
    """
    Classify an utterance.

    Args:
        utterance: Final transcription of a spoken command

    Returns:
        The first command whose pattern matches the whole trimmed
        utterance, or UnknownCommand
    """
    text = utterance.strip()

    for pattern, build in COMMAND_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            command = build(*(group.strip() for group in match.groups()))
            logger.debug("Parsed edit command", command_type=command.type)
            return command

    logger.info("Unrecognized edit command", utterance=text)
    return UnknownCommand(utterance=text)
