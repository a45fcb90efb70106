#!/usr/bin/env python3
"""
Edit Command Executor v1.0.0
============================
Pure text transformations behind the mutating voice commands.

Matching policy shared by every function:
- the target is matched literally and case-insensitively
- all occurrences are counted, only the LAST one is edited
- no occurrence returns None; the document is never changed in place

The caller turns match_count > 1 into an ambiguity notice
("3 matches, used last") and None into a not-found message.
"""

import re
from typing import List, Dict, Any, Optional, Union
from dataclasses import dataclass, asdict

from config_logging import get_logger
from text_segmentation import segment_text
from edit_commands import (
    EditCommand, ReplaceCommand, DeleteCommand, InsertCommand, CapitalizeCommand,
    InsertPosition,
)

__version__ = "1.0.0"

logger = get_logger('edit_executor')

_WHITESPACE_RE = re.compile(r'\s+')
_WORD_TOKEN_RE = re.compile(r'\b\w+\b')
_SENTENCE_CHUNK_RE = re.compile(r'[^.!?]+[.!?]+')

# Read-back falls back to this many trailing characters when no sentence ends
READ_BACK_FALLBACK_CHARS = 100


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


class _ResultMixin:
    def to_dict(self) -> Dict[str, Any]:
        return {_camel(key): value for key, value in asdict(self).items()}


@dataclass(frozen=True)
class ReplaceResult(_ResultMixin):
    new_text: str
    match_count: int
    replaced_index: int


@dataclass(frozen=True)
class DeleteResult(_ResultMixin):
    new_text: str
    match_count: int
    deleted_index: int


@dataclass(frozen=True)
class InsertResult(_ResultMixin):
    new_text: str
    match_count: int
    inserted_index: int


@dataclass(frozen=True)
class CapitalizeResult(_ResultMixin):
    new_text: str
    word: str


EditOutcome = Union[ReplaceResult, DeleteResult, InsertResult, CapitalizeResult]


def find_all_matches(full_text: str, target: str) -> List[re.Match]:
    """All case-insensitive literal occurrences of target, left to right."""
    if not target:
        return []
    return list(re.finditer(re.escape(target), full_text, re.IGNORECASE))


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def execute_replace_command(full_text: str, target: str, replacement: str) -> Optional[ReplaceResult]:
    """
    Replace the last occurrence of target.

    When the matched text starts uppercase and the replacement starts
    lowercase, the replacement's first letter is upper-cased so a
    sentence-initial word keeps its capital.
    """
    matches = find_all_matches(full_text, target)
    if not matches:
        logger.info("Replace target not found", target=target)
        return None

    last = matches[-1]
    matched_text = last.group()

    final_replacement = replacement
    if matched_text[0].isupper() and replacement[:1].islower():
        final_replacement = _capitalize_first(replacement)

    new_text = full_text[:last.start()] + final_replacement + full_text[last.end():]
    logger.debug("Replaced text", match_count=len(matches), index=last.start())
    return ReplaceResult(new_text=new_text, match_count=len(matches), replaced_index=last.start())


def execute_delete_command(full_text: str, target: str) -> Optional[DeleteResult]:
    """
    Delete the last occurrence of target.

    The remaining document has every whitespace run collapsed to one
    space and is trimmed, so newlines elsewhere in the text are lost.
    """
    matches = find_all_matches(full_text, target)
    if not matches:
        logger.info("Delete target not found", target=target)
        return None

    last = matches[-1]
    remaining = full_text[:last.start()] + full_text[last.end():]
    new_text = _WHITESPACE_RE.sub(' ', remaining).strip()
    logger.debug("Deleted text", match_count=len(matches), index=last.start())
    return DeleteResult(new_text=new_text, match_count=len(matches), deleted_index=last.start())


def execute_insert_command(full_text: str, target: str, insertion: str,
                           position: Union[InsertPosition, str]) -> Optional[InsertResult]:
    """Insert text immediately before or after the last occurrence of target."""
    position = InsertPosition(position)
    matches = find_all_matches(full_text, target)
    if not matches:
        logger.info("Insert target not found", target=target)
        return None

    last = matches[-1]
    if position == InsertPosition.BEFORE:
        index = last.start()
        new_text = full_text[:index] + insertion + ' ' + full_text[index:]
        inserted_index = index
    else:
        index = last.end()
        new_text = full_text[:index] + ' ' + insertion + full_text[index:]
        inserted_index = index + 1

    logger.debug("Inserted text", match_count=len(matches), index=inserted_index,
                 position=position.value)
    return InsertResult(new_text=new_text, match_count=len(matches), inserted_index=inserted_index)


def execute_capitalize_command(full_text: str, target: Optional[str] = None) -> Optional[CapitalizeResult]:
    """
    Capitalize the first letter of the last occurrence of target.

    Without a target the last word token of the whole document is
    capitalized. Returns None when the target is absent or the document
    has no words.
    """
    if target:
        matches = find_all_matches(full_text, target)
        if not matches:
            logger.info("Capitalize target not found", target=target)
            return None
        last = matches[-1]
    else:
        last = None
        for last in _WORD_TOKEN_RE.finditer(full_text):
            pass
        if last is None:
            return None

    capitalized = _capitalize_first(last.group())
    new_text = full_text[:last.start()] + capitalized + full_text[last.end():]
    return CapitalizeResult(new_text=new_text, word=capitalized)


def apply_edit_command(full_text: str, command: EditCommand) -> Optional[EditOutcome]:
    """
    Run a mutating command against the document.

    Raises:
        ValueError: command is not replace, delete, insert or capitalize
    """
    if isinstance(command, ReplaceCommand):
        return execute_replace_command(full_text, command.target, command.replacement)
    if isinstance(command, DeleteCommand):
        return execute_delete_command(full_text, command.target)
    if isinstance(command, InsertCommand):
        return execute_insert_command(full_text, command.target, command.insertion, command.position)
    if isinstance(command, CapitalizeCommand):
        return execute_capitalize_command(full_text, command.target)
    raise ValueError(f"'{command.type}' is not an executable edit command")


def get_last_sentence(text: str) -> str:
    """The last punctuated sentence, or the trailing characters when none ends."""
    chunks = _SENTENCE_CHUNK_RE.findall(text)
    if chunks:
        return chunks[-1].strip()
    return text[-READ_BACK_FALLBACK_CHARS:].strip()


def get_text_stats(text: str) -> Dict[str, int]:
    """Word and sentence counts from the segmenter, plus raw character count."""
    segmented = segment_text(text)
    return {
        'words': segmented.word_count,
        'characters': len(text),
        'sentences': segmented.sentence_count,
    }
