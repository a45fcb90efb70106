#!/usr/bin/env python3
"""
Text Segmentation Engine v1.0.0
===============================
Converts raw dictated text into character-indexed words and sentences.

Every offset is relative to the *normalized* text returned in
SegmentedText.original_text: zero-width characters and control
characters are removed and runs of non-newline whitespace are collapsed
to a single space. The result is an immutable value; callers recompute
it whenever the document changes.

Usage:
    from text_segmentation import segment_text

    seg = segment_text("Dr. Smith arrived. He sat down")
    seg.sentences[0].text        # 'Dr. Smith arrived.'
    seg.all_words[3].word        # 'He'
"""

import re
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass

__version__ = "1.0.0"


# Tokens whose trailing period does not end a sentence
ABBREVIATIONS = frozenset({
    'mr', 'mrs', 'ms', 'dr', 'prof', 'sr', 'jr', 'vs', 'etc', 'inc', 'ltd',
    'st', 'ave', 'blvd', 'rd', 'jan', 'feb', 'mar', 'apr', 'jun', 'jul',
    'aug', 'sep', 'oct', 'nov', 'dec', 'i.e', 'e.g', 'cf', 'al', 'no',
})

SENTENCE_TERMINATORS = '.!?'

_ZERO_WIDTH_RE = re.compile('[\u200B-\u200D\uFEFF]')
_HORIZONTAL_SPACE_RE = re.compile(r'[^\S\n]+')
_CONTROL_CHARS_RE = re.compile('[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
# Alphanumeric runs joined by single apostrophes or hyphens: don't, well-known
_WORD_RE = re.compile(r"[A-Za-z0-9]+(?:['’-][A-Za-z0-9]+)*")


@dataclass(frozen=True)
class Word:
    """A word token with half-open offsets into the normalized text."""
    word: str
    char_start: int
    char_end: int
    word_index: int
    sentence_id: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'charStart': self.char_start,
            'charEnd': self.char_end,
            'wordIndex': self.word_index,
            'sentenceId': self.sentence_id,
        }


@dataclass(frozen=True)
class Sentence:
    """
    A sentence span.

    Attributes:
        sentence_id: 0-based position in SegmentedText.sentences
        sentence_start: Offset of the first character of the sentence
        sentence_end: Offset just past the terminal punctuation (or end of text)
        text: The span with surrounding whitespace trimmed
        words: Words inside the span, in text order
    """
    sentence_id: int
    sentence_start: int
    sentence_end: int
    text: str
    words: Tuple[Word, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sentenceId': self.sentence_id,
            'sentenceStart': self.sentence_start,
            'sentenceEnd': self.sentence_end,
            'text': self.text,
            'words': [w.to_dict() for w in self.words],
        }


@dataclass(frozen=True)
class SegmentedText:
    """Sentences and words of a document plus the normalized text they index."""
    sentences: Tuple[Sentence, ...] = ()
    all_words: Tuple[Word, ...] = ()
    original_text: str = ""

    @property
    def word_count(self) -> int:
        return len(self.all_words)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sentences': [s.to_dict() for s in self.sentences],
            'allWords': [w.to_dict() for w in self.all_words],
            'originalText': self.original_text,
        }


def normalize_text(text: str) -> str:
    """Remove hidden characters and collapse horizontal whitespace, keeping newlines."""
    text = _ZERO_WIDTH_RE.sub('', text)
    text = _HORIZONTAL_SPACE_RE.sub(' ', text)
    text = _CONTROL_CHARS_RE.sub('', text)
    # Removing a control character can leave two spaces side by side
    return _HORIZONTAL_SPACE_RE.sub(' ', text)


def _is_abbreviation_char(char: str) -> bool:
    return char == '.' or (char.isascii() and char.isalpha())


def is_abbreviation(text: str, period_index: int) -> bool:
    """
    Check whether the period at period_index belongs to a known abbreviation.

    The token is read across letters and periods on both sides, so the
    inner period of "e.g." is recognized as well as the final one.
    """
    word_start = period_index
    while word_start > 0 and _is_abbreviation_char(text[word_start - 1]):
        word_start -= 1

    word_end = period_index + 1
    while word_end < len(text) and _is_abbreviation_char(text[word_end]):
        word_end += 1

    token = text[word_start:word_end].lower().strip('.')
    if not token:
        return False
    return token in ABBREVIATIONS or token.replace('.', '') in ABBREVIATIONS


def split_sentences(text: str) -> List[Tuple[int, int, str]]:
    """
    Split normalized text into (start, end, trimmed_text) sentence spans.

    A run of terminal punctuation ("...", "?!") closes one sentence.
    Whitespace after a boundary belongs to neither sentence. Trailing
    text without terminal punctuation becomes a final sentence.
    """
    spans: List[Tuple[int, int, str]] = []
    if not text.strip():
        return spans

    length = len(text)
    current_start = 0
    i = 0

    while i < length:
        char = text[i]
        if char not in SENTENCE_TERMINATORS:
            i += 1
            continue

        if char == '.' and is_abbreviation(text, i):
            i += 1
            continue

        end_punct = i
        while end_punct + 1 < length and text[end_punct + 1] in SENTENCE_TERMINATORS:
            end_punct += 1
        sentence_end = end_punct + 1

        next_start = sentence_end
        while next_start < length and text[next_start].isspace():
            next_start += 1

        sentence_text = text[current_start:sentence_end].strip()
        if sentence_text:
            spans.append((current_start, sentence_end, sentence_text))

        current_start = next_start
        i = next_start

    if current_start < length:
        remaining = text[current_start:].strip()
        if remaining:
            spans.append((current_start, length, remaining))

    return spans


def tokenize_words(text: str, start: int, end: int, sentence_id: int,
                   first_word_index: int) -> List[Word]:
    """Tokenize text[start:end] into words numbered from first_word_index."""
    words = []
    word_index = first_word_index
    for match in _WORD_RE.finditer(text, start, end):
        words.append(Word(
            word=match.group(),
            char_start=match.start(),
            char_end=match.end(),
            word_index=word_index,
            sentence_id=sentence_id,
        ))
        word_index += 1
    return words


def segment_text(text: str) -> SegmentedText:
    """
    Segment text into sentences and globally indexed words.

    Pure and deterministic: identical input always yields an identical
    value, and segmenting the returned original_text again is a no-op.
    """
    normalized = normalize_text(text)
    sentences: List[Sentence] = []
    all_words: List[Word] = []

    for sentence_id, (start, end, sentence_text) in enumerate(split_sentences(normalized)):
        words = tokenize_words(normalized, start, end, sentence_id, len(all_words))
        sentences.append(Sentence(
            sentence_id=sentence_id,
            sentence_start=start,
            sentence_end=end,
            text=sentence_text,
            words=tuple(words),
        ))
        all_words.extend(words)

    return SegmentedText(
        sentences=tuple(sentences),
        all_words=tuple(all_words),
        original_text=normalized,
    )


def find_word_at_position(segmented: SegmentedText, char_pos: int) -> Optional[Word]:
    """Find the word whose span contains char_pos."""
    for word in segmented.all_words:
        if word.char_start <= char_pos < word.char_end:
            return word
    return None


def find_sentence_for_word(segmented: SegmentedText, word_index: int) -> Optional[Sentence]:
    """Find the sentence containing the word with the given global index."""
    if not 0 <= word_index < len(segmented.all_words):
        return None
    sentence_id = segmented.all_words[word_index].sentence_id
    return segmented.sentences[sentence_id]


def get_text_span(text: str, start: int, end: int) -> str:
    return text[start:end]
