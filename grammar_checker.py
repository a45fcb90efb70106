#!/usr/bin/env python3
"""
Rule-Based Grammar Checker v1.0.0
=================================
Deterministic, exam-safe grammar flags over segmented text.

Per-sentence checks:
- Capitalization of the first character
- Repeated adjacent words ("the the")
- a/an article usage
- its/your/their where the contraction was meant
- Terminal punctuation (optional, off by default)

Document-wide checks (sentence_id is -1):
- Runs of two or more spaces
- Missing space after punctuation
- Apostrophes in plurals and decades

Flags only; the text is never rewritten.
"""

import re
from enum import Enum
from typing import List, Dict, Optional, Any, Iterable
from dataclasses import dataclass, field

from base_checker import BaseChecker
from config_logging import get_logger
from text_segmentation import SegmentedText, Sentence

__version__ = "1.0.0"

logger = get_logger('grammar_checker')

DOCUMENT_WIDE = -1


class GrammarErrorType(str, Enum):
    CAPITALIZATION = 'capitalization'
    PUNCTUATION = 'punctuation'
    REPEATED_WORD = 'repeated-word'
    SPACING = 'spacing'
    MISSING_SPACE = 'missing-space'
    ARTICLE = 'article'
    CONTRACTION = 'contraction'
    APOSTROPHE = 'apostrophe'


ERROR_DESCRIPTIONS = {
    GrammarErrorType.CAPITALIZATION: 'Capital letter needed',
    GrammarErrorType.PUNCTUATION: 'Punctuation needed',
    GrammarErrorType.REPEATED_WORD: 'Repeated word',
    GrammarErrorType.SPACING: 'Extra spaces',
    GrammarErrorType.MISSING_SPACE: 'Space needed',
    GrammarErrorType.ARTICLE: 'Article usage',
    GrammarErrorType.CONTRACTION: 'Contraction check',
    GrammarErrorType.APOSTROPHE: 'Apostrophe usage',
}


@dataclass
class GrammarError:
    """
    A grammar flag.

    sentence_id is -1 for document-wide checks (spacing, missing-space,
    apostrophe); those errors cannot be joined to a sentence.
    """
    type: GrammarErrorType
    message: str
    char_start: int
    char_end: int
    sentence_id: int = DOCUMENT_WIDE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'message': self.message,
            'charStart': self.char_start,
            'charEnd': self.char_end,
            'sentenceId': self.sentence_id,
        }


@dataclass
class GrammarCheckResult:
    errors: List[GrammarError] = field(default_factory=list)

    def of_type(self, error_type: GrammarErrorType) -> List[GrammarError]:
        return [e for e in self.errors if e.type == error_type]

    def to_dict(self) -> Dict[str, Any]:
        return {'errors': [e.to_dict() for e in self.errors]}


def get_error_description(error_type) -> str:
    """Short user-facing label for an error type (enum member or its value)."""
    try:
        return ERROR_DESCRIPTIONS[GrammarErrorType(error_type)]
    except ValueError:
        return 'Grammar issue'


class GrammarChecker(BaseChecker):
    """Flags structural issues in segmented text."""

    CHECKER_NAME = "Grammar"
    CHECKER_VERSION = "1.0.0"

    # Brand-style words that legitimately start lowercase
    LOWERCASE_START_WORDS = {'iphone', 'ipad', 'ipod', 'ios', 'ebay', 'email', 'ecommerce'}

    # Repetitions that are usually intentional ("bye bye", "very very")
    ALLOWED_REPEATS = frozenset({'bye', 'no', 'very', 'really', 'so', 'much', 'far', 'now'})

    SILENT_H_WORDS = {
        'hour', 'hours', 'hourly', 'honest', 'honestly', 'honesty', 'honor', 'honour',
        'honorable', 'honourable', 'heir', 'heirs', 'heiress', 'herb', 'herbs', 'herbal',
    }
    # Vowel letters pronounced with a leading consonant sound: "a unit", "a one-off"
    CONSONANT_SOUND_PREFIXES = ('uni', 'use', 'usu', 'uti', 'ure', 'eu', 'ewe', 'one', 'once')

    # Possessive followed by a word that signals the contraction was meant
    CONTRACTION_CONFUSIONS = {
        'its': (
            {'a', 'an', 'the', 'very', 'so', 'too', 'not', 'been', 'being'},
            'Did you mean "it\'s" (it is)? "Its" is possessive (e.g., "its color").',
        ),
        'your': (
            {'a', 'an', 'the', 'very', 'so', 'too', 'not', 'going', 'being', 'welcome'},
            'Did you mean "you\'re" (you are)? "Your" is possessive (e.g., "your book").',
        ),
        'their': (
            {'a', 'an', 'the', 'very', 'so', 'too', 'not', 'going', 'being', 'coming'},
            'Did you mean "they\'re" (they are)? "Their" is possessive (e.g., "their house").',
        ),
    }

    # Words whose 's is a contraction, never a plural
    APOSTROPHE_S_CONTRACTIONS = {
        'it', 'that', 'what', 'who', 'where', 'there', 'here', 'he', 'she', 'let',
        'how', 'when', 'why', 'everyone', 'someone', 'nobody', 'everything', 'nothing',
    }

    _MULTIPLE_SPACES_RE = re.compile(r' {2,}')
    _MISSING_SPACE_RE = re.compile(r'[.!?,;:][A-Za-z]')
    _DECIMAL_RE = re.compile(r'\d\.\d')
    _INITIALISM_RE = re.compile(r'[A-Z]\.[A-Z]')
    _TITLE_RE = re.compile(r'\b(?:Mr|Mrs|Ms|Dr|Jr|Sr|St|Ave|Blvd|etc)\.', re.IGNORECASE)
    _EXTENSION_RE = re.compile(r'\.(?:com|org|net|edu|gov|io|html|css|js|pdf|doc|txt)\b',
                               re.IGNORECASE)
    _PLURAL_APOSTROPHE_RE = re.compile(
        r"\b([A-Za-z]+)['’]s\s+(are|were|have|had|do|did|can|could|will|would|should|must)\b",
        re.IGNORECASE
    )
    _DECADE_RE = re.compile(r"\b(\d{4})['’]s\b")
    _TERMINAL_RE = re.compile(r'[.!?]$')

    # Characters before a missing-space match that are inspected for exclusions
    LOOKBEHIND_CHARS = 5

    def __init__(
        self,
        enabled: bool = True,
        check_terminal_punctuation: bool = False,
        check_articles: bool = True,
        check_contractions: bool = True,
        check_apostrophes: bool = True,
        allowed_repeats: Optional[Iterable[str]] = None
    ):
        """
        Initialize the grammar checker.

        Args:
            enabled: Whether checker is active
            check_terminal_punctuation: Flag sentences without ., ! or ?.
                Off by default so a sentence still being dictated is not
                flagged.
            check_articles: Flag a/an misuse
            check_contractions: Flag its/your/their where it's/you're/they're fits
            check_apostrophes: Flag plural and decade apostrophes
            allowed_repeats: Words whose adjacent repetition is not flagged
        """
        super().__init__(enabled)
        self.check_terminal_punctuation = check_terminal_punctuation
        self.check_articles = check_articles
        self.check_contractions = check_contractions
        self.check_apostrophes = check_apostrophes
        self.allowed_repeats = frozenset(
            w.lower() for w in (allowed_repeats if allowed_repeats is not None
                                else self.ALLOWED_REPEATS)
        )

    def empty_result(self) -> GrammarCheckResult:
        return GrammarCheckResult()

    def check(self, segmented: SegmentedText, **kwargs) -> GrammarCheckResult:
        """Run per-sentence checks in sentence order, then document-wide checks."""
        if not self.enabled:
            return self.empty_result()

        text = segmented.original_text
        sentences = segmented.sentences
        errors: List[GrammarError] = []

        for position, sentence in enumerate(sentences):
            is_last = position == len(sentences) - 1

            cap_error = self._check_capitalization(sentence, text)
            if cap_error:
                errors.append(cap_error)

            if self.check_terminal_punctuation and (not is_last or len(text) > 50):
                punct_error = self._check_terminal_punctuation(sentence, text, is_last)
                if punct_error:
                    errors.append(punct_error)

            errors.extend(self._check_repeated_words(sentence))

            if self.check_articles:
                errors.extend(self._check_articles(sentence))

            if self.check_contractions:
                errors.extend(self._check_contractions(sentence))

        errors.extend(self._check_multiple_spaces(text))
        errors.extend(self._check_missing_space(text))

        if self.check_apostrophes:
            errors.extend(self._check_apostrophes(text))

        logger.debug("Grammar check finished", sentence_count=len(sentences),
                     error_count=len(errors))
        return GrammarCheckResult(errors=errors)

    # -------------------------------------------------------------------------
    # Per-sentence checks
    # -------------------------------------------------------------------------

    def _check_capitalization(self, sentence: Sentence, text: str) -> Optional[GrammarError]:
        span = text[sentence.sentence_start:sentence.sentence_end]
        trimmed = span.lstrip()
        if not trimmed:
            return None

        first_char = trimmed[0]
        if not ('a' <= first_char <= 'z'):
            return None

        first_word = trimmed.split()[0].lower()
        if first_word in self.LOWERCASE_START_WORDS:
            return None

        start = sentence.sentence_start + (len(span) - len(trimmed))
        return GrammarError(
            type=GrammarErrorType.CAPITALIZATION,
            message='Sentence should start with a capital letter.',
            char_start=start,
            char_end=start + 1,
            sentence_id=sentence.sentence_id,
        )

    def _check_terminal_punctuation(self, sentence: Sentence, text: str,
                                    is_last: bool) -> Optional[GrammarError]:
        span = text[sentence.sentence_start:sentence.sentence_end]
        trimmed = span.rstrip()

        # The last sentence may still be in progress
        if is_last and len(trimmed) < 20:
            return None

        if not trimmed or self._TERMINAL_RE.search(trimmed):
            return None

        return GrammarError(
            type=GrammarErrorType.PUNCTUATION,
            message='Sentence should end with a full stop, question mark, or exclamation mark.',
            char_start=sentence.sentence_start + len(trimmed) - 1,
            char_end=sentence.sentence_end,
            sentence_id=sentence.sentence_id,
        )

    def _check_repeated_words(self, sentence: Sentence) -> List[GrammarError]:
        errors = []
        words = sentence.words
        for previous, current in zip(words, words[1:]):
            current_lower = current.word.lower()
            if current_lower in self.allowed_repeats:
                continue
            if previous.word.lower() == current_lower:
                errors.append(GrammarError(
                    type=GrammarErrorType.REPEATED_WORD,
                    message=f'Repeated word: "{current_lower}".',
                    char_start=current.char_start,
                    char_end=current.char_end,
                    sentence_id=sentence.sentence_id,
                ))
        return errors

    def _wants_an(self, word: str) -> bool:
        """Whether a word starts with a vowel sound."""
        if word in self.SILENT_H_WORDS:
            return True
        if word.startswith(self.CONSONANT_SOUND_PREFIXES):
            return False
        return word[0] in 'aeiou'

    def _check_articles(self, sentence: Sentence) -> List[GrammarError]:
        errors = []
        words = sentence.words
        for article, following in zip(words, words[1:]):
            current = article.word.lower()
            if current not in ('a', 'an'):
                continue
            next_word = following.word.lower()
            if not next_word[0].isalpha():
                continue

            wants_an = self._wants_an(next_word)
            if current == 'a' and wants_an:
                message = f'Consider using "an" before "{next_word}" (starts with a vowel sound).'
            elif current == 'an' and not wants_an:
                message = f'Consider using "a" before "{next_word}" (starts with a consonant sound).'
            else:
                continue

            errors.append(GrammarError(
                type=GrammarErrorType.ARTICLE,
                message=message,
                char_start=article.char_start,
                char_end=article.char_end,
                sentence_id=sentence.sentence_id,
            ))
        return errors

    def _check_contractions(self, sentence: Sentence) -> List[GrammarError]:
        errors = []
        words = sentence.words
        for word, following in zip(words, words[1:]):
            confusion = self.CONTRACTION_CONFUSIONS.get(word.word.lower())
            if not confusion:
                continue
            triggers, message = confusion
            if following.word.lower() in triggers:
                errors.append(GrammarError(
                    type=GrammarErrorType.CONTRACTION,
                    message=message,
                    char_start=word.char_start,
                    char_end=word.char_end,
                    sentence_id=sentence.sentence_id,
                ))
        return errors

    # -------------------------------------------------------------------------
    # Document-wide checks
    # -------------------------------------------------------------------------

    def _check_multiple_spaces(self, text: str) -> List[GrammarError]:
        return [
            GrammarError(
                type=GrammarErrorType.SPACING,
                message='Multiple spaces detected. Use single space between words.',
                char_start=match.start(),
                char_end=match.end(),
            )
            for match in self._MULTIPLE_SPACES_RE.finditer(text)
        ]

    def _check_missing_space(self, text: str) -> List[GrammarError]:
        errors = []
        for match in self._MISSING_SPACE_RE.finditer(text):
            index = match.start()
            window = text[max(0, index - self.LOOKBEHIND_CHARS):index + 2]

            # Decimals (3.14), initialisms (U.S.), titles (Dr.Smith)
            if (self._DECIMAL_RE.search(window) or self._INITIALISM_RE.search(window)
                    or self._TITLE_RE.search(window)):
                continue
            # Web addresses and file names (example.com, notes.txt)
            if self._EXTENSION_RE.match(text, index):
                continue

            errors.append(GrammarError(
                type=GrammarErrorType.MISSING_SPACE,
                message='Missing space after punctuation.',
                char_start=index,
                char_end=index + 2,
            ))
        return errors

    def _check_apostrophes(self, text: str) -> List[GrammarError]:
        errors = []
        for match in self._PLURAL_APOSTROPHE_RE.finditer(text):
            stem = match.group(1)
            if stem.lower() in self.APOSTROPHE_S_CONTRACTIONS:
                continue
            errors.append(GrammarError(
                type=GrammarErrorType.APOSTROPHE,
                message=(f'"{stem}\'s" appears to be an incorrect plural. '
                         f'Use "{stem}s" (no apostrophe) for plurals.'),
                char_start=match.start(),
                char_end=match.start() + len(stem) + 2,
            ))

        for match in self._DECADE_RE.finditer(text):
            errors.append(GrammarError(
                type=GrammarErrorType.APOSTROPHE,
                message=f'For decades, use "{match.group(1)}s" without an apostrophe.',
                char_start=match.start(),
                char_end=match.end(),
            ))
        return errors


def check_grammar(segmented: SegmentedText, check_terminal_punctuation: bool = False) -> GrammarCheckResult:
    """Grammar check segmented text with the default rule set."""
    return GrammarChecker(check_terminal_punctuation=check_terminal_punctuation).check(segmented)
