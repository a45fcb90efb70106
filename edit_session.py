#!/usr/bin/env python3
"""
Edit Session v1.0.0
===================
Owns one document being dictated and edited by voice.

The session holds the current text in an UndoStack, a per-session
SessionDictionary of ignored words, and the last dictated phrase (the
target of "scratch that"). handle_utterance() turns a spoken command
into a CommandOutcome carrying the new text, a user-facing message and,
for read commands, the text to speak.

Usage:
    session = EditSession()
    session.dictate("I like cats period")
    outcome = session.handle_utterance("insert very much after cats")
    outcome.text      # 'I like cats very much.'
"""

import re
import uuid
import threading
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass

from config_logging import get_logger, handle_errors, DEFAULT_UNDO_LIMIT, DEFAULT_MAX_SUGGESTIONS
from text_segmentation import SegmentedText, segment_text
from spell_checker import SpellChecker, SpellCheckResult, SessionDictionary, get_spell_checker
from grammar_checker import GrammarChecker, GrammarCheckResult
from spoken_punctuation import process_voice_commands
from undo_stack import UndoStack
from edit_commands import (
    EditCommand, ReadCommand, ReadType, CapitalizeCommand, InsertCommand,
    ReplaceCommand, DeleteCommand, UnknownCommand, parse_edit_command,
)
from edit_executor import apply_edit_command, get_last_sentence, get_text_stats

__version__ = "1.0.0"

logger = get_logger('edit_session')

COMMAND_HINT = 'Try: "Replace X with Y", "Delete X", or "Insert X after Y"'

_LEADING_PUNCT_RE = re.compile(r'^[.,!?;:)]')


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return value


@dataclass
class CommandOutcome:
    """Result of one spoken command."""
    command: EditCommand
    success: bool
    message: str
    text: str
    speak_text: Optional[str] = None
    stop_speaking: bool = False
    match_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'command': self.command.to_dict(),
            'success': self.success,
            'message': self.message,
            'text': self.text,
            'speakText': self.speak_text,
            'stopSpeaking': self.stop_speaking,
            'matchCount': self.match_count,
        }


@dataclass
class Analysis:
    segmented: SegmentedText
    spelling: SpellCheckResult
    grammar: GrammarCheckResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'segmented': self.segmented.to_dict(),
            'spelling': [e.to_dict() for e in self.spelling.errors],
            'grammar': [e.to_dict() for e in self.grammar.errors],
        }


def join_dictation(text: str, phrase: str) -> str:
    """Append a dictated phrase, adding a space unless one is not wanted."""
    if not text or text[-1].isspace() or _LEADING_PUNCT_RE.match(phrase):
        return text + phrase
    return text + ' ' + phrase


class EditSession:
    """A document plus its history, ignore list and last dictated phrase."""

    def __init__(
        self,
        text: str = '',
        undo_limit: int = DEFAULT_UNDO_LIMIT,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        spell_checker: Optional[SpellChecker] = None,
        grammar_checker: Optional[GrammarChecker] = None,
        session_id: Optional[str] = None
    ):
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.max_suggestions = max_suggestions
        self.history = UndoStack(text, limit=undo_limit)
        self.dictionary = SessionDictionary()
        self.spell_checker = spell_checker or get_spell_checker()
        self.grammar_checker = grammar_checker or GrammarChecker()
        self.last_utterance = ''
        self._lock = threading.RLock()

        self._handlers: Dict[str, Callable[[EditCommand, Optional[str]], CommandOutcome]] = {
            'undo': self._handle_undo,
            'redo': self._handle_redo,
            'scratch': self._handle_scratch,
            'word-count': self._handle_word_count,
            'read': self._handle_read,
            'capitalize': self._handle_edit,
            'replace': self._handle_edit,
            'delete': self._handle_edit,
            'insert': self._handle_edit,
            'unknown': self._handle_unknown,
        }

    @property
    def text(self) -> str:
        return self.history.current

    @handle_errors(logger)
    def set_text(self, text: str) -> str:
        """Replace the whole document (typed edits), keeping it undoable."""
        _require_str(text, 'text')
        with self._lock:
            if text != self.text:
                self.history.push(text)
            return self.text

    @handle_errors(logger)
    def dictate(self, utterance: str) -> str:
        """Append dictated speech with spoken punctuation converted."""
        _require_str(utterance, 'utterance')
        with self._lock:
            phrase = process_voice_commands(utterance.strip())
            if not phrase:
                return self.text
            self.history.push(join_dictation(self.text, phrase))
            self.last_utterance = phrase
            logger.debug("Dictated phrase", session_id=self.session_id, length=len(phrase))
            return self.text

    def ignore_word(self, word: str):
        """Stop flagging word in this session only."""
        self.dictionary.add(word)

    def analyze(self) -> Analysis:
        """Segment the document and run spelling and grammar checks."""
        segmented = segment_text(self.text)
        spelling = self.spell_checker.safe_check(
            segmented, session=self.dictionary, max_suggestions=self.max_suggestions
        )
        grammar = self.grammar_checker.safe_check(segmented)
        return Analysis(segmented=segmented, spelling=spelling, grammar=grammar)

    @handle_errors(logger)
    def handle_utterance(self, utterance: str, selected_text: Optional[str] = None) -> CommandOutcome:
        """
        Parse a spoken command and apply it to the document.

        Args:
            utterance: Final transcription of the command
            selected_text: Text the user has selected, for "read selection"

        Returns:
            CommandOutcome; success is False for not-found targets, empty
            history and unrecognized commands
        """
        _require_str(utterance, 'utterance')
        cleaned = process_voice_commands(utterance.strip())
        command = parse_edit_command(cleaned)
        with self._lock:
            with logger.log_operation('handle_utterance', session_id=self.session_id,
                                      command_type=command.type):
                return self._handlers[command.type](command, selected_text)

    # -------------------------------------------------------------------------
    # Command handlers
    # -------------------------------------------------------------------------

    def _outcome(self, command: EditCommand, success: bool, message: str, **kwargs) -> CommandOutcome:
        return CommandOutcome(command=command, success=success, message=message,
                              text=self.text, **kwargs)

    def _handle_undo(self, command, selected_text):
        if self.history.undo() is None:
            return self._outcome(command, False, 'Nothing to undo')
        return self._outcome(command, True, 'Undid last change')

    def _handle_redo(self, command, selected_text):
        if self.history.redo() is None:
            return self._outcome(command, False, 'Nothing to redo')
        return self._outcome(command, True, 'Redid last change')

    def _handle_scratch(self, command, selected_text):
        phrase = self.last_utterance
        if phrase:
            trailing = re.compile(re.escape(phrase) + r'\s*$')
            if trailing.search(self.text):
                self.history.push(trailing.sub('', self.text, count=1).strip())
                self.last_utterance = ''
                return self._outcome(command, True, f'Removed: "{phrase}"')
        return self._outcome(command, False, 'No recent phrase to scratch')

    def _handle_word_count(self, command, selected_text):
        stats = get_text_stats(self.text)
        message = f"{stats['words']} words, {stats['characters']} characters, {stats['sentences']} sentences"
        return self._outcome(command, True, message, speak_text=message)

    def _handle_read(self, command: ReadCommand, selected_text):
        if command.stop:
            return self._outcome(command, True, 'Stopped reading', stop_speaking=True)

        if command.read_type == ReadType.SELECTION:
            if not selected_text:
                return self._outcome(command, False, 'No text selected')
            return self._outcome(command, True, 'Reading selection', speak_text=selected_text)

        if command.read_type == ReadType.ALL:
            to_read, message = self.text, 'Reading document'
        else:
            to_read, message = get_last_sentence(self.text), 'Reading last sentence'

        if not to_read.strip():
            return self._outcome(command, False, 'Nothing to read')
        return self._outcome(command, True, message, speak_text=to_read)

    def _handle_edit(self, command, selected_text):
        result = apply_edit_command(self.text, command)
        if result is None:
            if isinstance(command, CapitalizeCommand) and command.target is None:
                return self._outcome(command, False, 'No word to capitalize')
            return self._outcome(command, False, f'Could not find "{command.target}" in the document')

        self.history.push(result.new_text)
        match_count = getattr(result, 'match_count', 1)
        return self._outcome(command, True, self._describe_edit(command, result, match_count),
                             match_count=match_count)

    @staticmethod
    def _describe_edit(command, result, match_count: int) -> str:
        if isinstance(command, ReplaceCommand):
            if match_count > 1:
                return f'Replaced "{command.target}" ({match_count} matches, used last)'
            return f'Replaced "{command.target}" with "{command.replacement}"'
        if isinstance(command, DeleteCommand):
            if match_count > 1:
                return f'Deleted "{command.target}" ({match_count} matches, removed last)'
            return f'Deleted "{command.target}"'
        if isinstance(command, InsertCommand):
            message = f'Inserted "{command.insertion}" {command.position.value} "{command.target}"'
            if match_count > 1:
                message += f' ({match_count} matches, used last)'
            return message
        return f'Capitalized "{result.word}"'

    def _handle_unknown(self, command: UnknownCommand, selected_text):
        return self._outcome(command, False,
                             f'Command not recognized: "{command.utterance}". {COMMAND_HINT}')
