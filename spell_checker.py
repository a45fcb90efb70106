#!/usr/bin/env python3
"""
Offline Spell Checker v1.0.0
============================
Dictionary-based, deterministic, exam-safe spell checking.

Features:
- Pure Python implementation (no API calls)
- Rule-based acceptance of inflections, possessives, ordinals,
  hyphenated compounds and proper nouns
- Suggestion ranking by edit distance with Soundex/Metaphone bonuses
- Commonly confused letters, sounds and suffixes suggested first
- Session dictionary ("add to dictionary") scoped to one editing session

The checker only flags and suggests. It never corrects text on its own,
which keeps it usable under exam integrity rules.
"""

import re
import threading
from typing import List, Dict, Tuple, Set, Optional, Iterable, Any
from dataclasses import dataclass, field

from base_checker import BaseChecker
from config_logging import get_logger, DEFAULT_MAX_SUGGESTIONS
from phonetics import levenshtein_distance, soundex, metaphone
from spell_dictionary import COMMON_WORDS
from text_segmentation import SegmentedText

__version__ = "1.0.0"

logger = get_logger('spell_checker')


@dataclass
class SpellError:
    """A misspelled word with ranked suggestions (best first)."""
    word: str
    char_start: int
    char_end: int
    word_index: int
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'charStart': self.char_start,
            'charEnd': self.char_end,
            'wordIndex': self.word_index,
            'suggestions': list(self.suggestions),
        }


@dataclass
class SpellCheckResult:
    errors: List[SpellError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'errors': [e.to_dict() for e in self.errors]}


class SessionDictionary:
    """
    Words the user chose to ignore for the current editing session.

    Entries are keyed by lowercase word and live until clear() is called.
    Nothing is persisted. Each editing session owns its own instance.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: Set[str] = set()
        self._lock = threading.Lock()
        for word in words or ():
            self.add(word)

    def add(self, word: str):
        """Add a word to the session dictionary."""
        word = word.strip().lower()
        if not word:
            return
        with self._lock:
            self._words.add(word)

    def remove(self, word: str):
        with self._lock:
            self._words.discard(word.strip().lower())

    def clear(self):
        """Forget every ignored word."""
        with self._lock:
            self._words.clear()

    def words(self) -> List[str]:
        with self._lock:
            return sorted(self._words)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)


class SpellChecker(BaseChecker):
    """
    Offline spell checker over segmented text.

    Uses a combination of:
    - Built-in common English words (spell_dictionary.COMMON_WORDS)
    - Suffix, possessive, ordinal and hyphenation rules
    - Proper-noun leniency for capitalized words
    - A caller-supplied SessionDictionary of ignored words
    """

    CHECKER_NAME = "Spelling"
    CHECKER_VERSION = "1.0.0"

    SUFFIXES = ('ing', 'ed', 'er', 'est', 'ly', 's', 'es', 'ness', 'ment',
                'ful', 'less', 'tion', 'sion')
    SILENT_E_SUFFIXES = ('ing', 'ed', 'er', 'est')
    # Shortest stem the doubled-consonant and silent-e rules apply to
    MIN_STEM_LENGTH = 3

    # Letters commonly reversed or confused (b/d, p/q ...); every occurrence is swapped
    LETTER_SWAPS = [
        ('b', 'd'), ('d', 'b'),
        ('p', 'q'), ('q', 'p'),
        ('m', 'w'), ('w', 'm'),
        ('n', 'u'), ('u', 'n'),
        ('6', '9'), ('9', '6'),
        ('a', 'e'), ('e', 'a'),
        ('i', 'e'), ('e', 'i'),
        ('o', 'a'), ('a', 'o'),
        ('c', 'k'), ('k', 'c'),
        ('s', 'c'), ('c', 's'),
        ('f', 'v'), ('v', 'f'),
        ('t', 'd'), ('d', 't'),
        ('g', 'j'), ('j', 'g'),
    ]

    # Spellings that sound alike; only the first occurrence is rewritten
    PHONETIC_CONFUSIONS = [
        ('ph', 'f'), ('f', 'ph'),
        ('ough', 'off'), ('ough', 'uff'),
        ('tion', 'shun'), ('sion', 'zhun'),
        ('ck', 'k'), ('k', 'ck'),
        ('ight', 'ite'), ('ite', 'ight'),
        ('ei', 'ie'), ('ie', 'ei'),
        ('ance', 'ence'), ('ence', 'ance'),
        ('able', 'ible'), ('ible', 'able'),
        ('er', 'or'), ('or', 'er'),
        ('ar', 'er'), ('er', 'ar'),
    ]

    SUFFIX_PATTERNS = [
        (re.compile(r'ie'), 'ei'), (re.compile(r'ei'), 'ie'),
        (re.compile(r'ible'), 'able'), (re.compile(r'able'), 'ible'),
        (re.compile(r'ence'), 'ance'), (re.compile(r'ance'), 'ence'),
        (re.compile(r'ant'), 'ent'), (re.compile(r'ent'), 'ant'),
        (re.compile(r'er$'), 'or'), (re.compile(r'or$'), 'er'),
        (re.compile(r'ise$'), 'ize'), (re.compile(r'ize$'), 'ise'),
        (re.compile(r'our$'), 'or'), (re.compile(r'or$'), 'our'),
    ]

    # Priority scores for injected candidates; generic matches score distance * 10 minus bonuses
    SWAP_SCORE = 0
    PHONETIC_SCORE = 1
    PATTERN_SCORE = 2

    MAX_LENGTH_DIFFERENCE = 3

    _NUMBER_RE = re.compile(r'[0-9]+')
    _ORDINAL_RE = re.compile(r'[0-9]+(?:st|nd|rd|th)')
    _POSSESSIVE_RE = re.compile(r"'s$|s'$")

    _CACHE_LIMIT = 2048

    def __init__(
        self,
        enabled: bool = True,
        dictionary: Optional[Iterable[str]] = None,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    ):
        super().__init__(enabled)
        self.max_suggestions = max_suggestions
        self._dictionary = frozenset(
            w.lower() for w in (dictionary if dictionary is not None else COMMON_WORDS)
        )

        # Sorted buckets by length keep suggestion order independent of set hashing
        self._by_length: Dict[int, List[str]] = {}
        for word in sorted(self._dictionary):
            self._by_length.setdefault(len(word), []).append(word)
        self._phonetic_keys: Dict[str, Tuple[str, str]] = {
            word: (soundex(word), metaphone(word)) for word in self._dictionary
        }

        self._suggestion_cache: Dict[Tuple[str, int], List[str]] = {}
        self._cache_lock = threading.Lock()

    @property
    def dictionary(self) -> frozenset:
        return self._dictionary

    def empty_result(self) -> SpellCheckResult:
        return SpellCheckResult()

    def check(
        self,
        segmented: SegmentedText,
        session: Optional[SessionDictionary] = None,
        max_suggestions: Optional[int] = None,
        **kwargs
    ) -> SpellCheckResult:
        """Flag every word that fails the dictionary rules."""
        if not self.enabled:
            return self.empty_result()

        limit = max_suggestions if max_suggestions is not None else self.max_suggestions
        sentence_initial = self._sentence_initial_indexes(segmented)
        known_names = self._learn_names(segmented, sentence_initial)

        errors = []
        for word in segmented.all_words:
            if session is not None and word.word in session:
                continue
            if self.is_correctly_spelled(
                word.word,
                sentence_initial=word.word_index in sentence_initial,
                known_names=known_names
            ):
                continue
            errors.append(SpellError(
                word=word.word,
                char_start=word.char_start,
                char_end=word.char_end,
                word_index=word.word_index,
                suggestions=self.generate_suggestions(word.word, limit),
            ))

        logger.debug("Spell check finished", word_count=len(segmented.all_words),
                     error_count=len(errors))
        return SpellCheckResult(errors=errors)

    @staticmethod
    def _sentence_initial_indexes(segmented: SegmentedText) -> Set[int]:
        return {s.words[0].word_index for s in segmented.sentences if s.words}

    @staticmethod
    def _looks_like_name(word: str) -> bool:
        return len(word) > 1 and word[0].isupper() and word[1:] == word[1:].lower()

    def _learn_names(self, segmented: SegmentedText, sentence_initial: Set[int]) -> Set[str]:
        """Capitalized words seen mid-sentence; they vouch for the same word at a sentence start."""
        return {
            w.word.lower() for w in segmented.all_words
            if w.word_index not in sentence_initial and self._looks_like_name(w.word)
        }

    def is_correctly_spelled(
        self,
        word: str,
        sentence_initial: bool = False,
        known_names: Optional[Set[str]] = None
    ) -> bool:
        """
        Check a single word against the dictionary rules.

        A capitalized word is taken as a proper noun unless it starts a
        sentence, where capitalization says nothing about the word. A
        sentence-initial word is still accepted when the same word was
        seen capitalized elsewhere (known_names).
        """
        if len(word) == 1:
            return True

        lower = word.lower().replace('’', "'")
        if lower in self._dictionary:
            return True

        if self._NUMBER_RE.fullmatch(word) or self._ORDINAL_RE.fullmatch(lower):
            return True

        if self._has_known_base(lower):
            return True

        if lower.endswith("'s") or lower.endswith("s'"):
            if self._POSSESSIVE_RE.sub('', lower) in self._dictionary:
                return True

        if self._looks_like_name(word):
            if not sentence_initial or (known_names and lower in known_names):
                return True

        if '-' in word:
            parts = word.split('-')
            if all(
                self.is_correctly_spelled(part, sentence_initial and i == 0, known_names)
                for i, part in enumerate(parts) if part
            ):
                return True

        return False

    def _has_known_base(self, word: str) -> bool:
        """Check for a known word plus one of SUFFIXES (running -> run, making -> make)."""
        for suffix in self.SUFFIXES:
            if not word.endswith(suffix) or len(word) - len(suffix) < 2:
                continue
            base = word[:-len(suffix)]
            if base in self._dictionary:
                return True
            if len(base) < self.MIN_STEM_LENGTH:
                continue
            if base[-1] == base[-2] and base[:-1] in self._dictionary:
                return True
            # A dropped silent e only comes back before a vowel (hoping -> hope, not ths -> the)
            if suffix in self.SILENT_E_SUFFIXES and (base + 'e') in self._dictionary:
                return True
        return False

    def generate_suggestions(self, word: str, max_suggestions: Optional[int] = None) -> List[str]:
        """Rank dictionary words that the user most likely meant, best first."""
        limit = max_suggestions if max_suggestions is not None else self.max_suggestions
        lower = word.lower().replace('’', "'")
        key = (lower, limit)

        with self._cache_lock:
            cached = self._suggestion_cache.get(key)
        if cached is not None:
            return list(cached)

        suggestions = self._rank_suggestions(lower, limit)

        with self._cache_lock:
            if len(self._suggestion_cache) >= self._CACHE_LIMIT:
                self._suggestion_cache.clear()
            self._suggestion_cache[key] = suggestions
        return list(suggestions)

    def _rank_suggestions(self, lower: str, limit: int) -> List[str]:
        if not lower or limit <= 0:
            return []
        scores: Dict[str, int] = {}

        def offer(candidate: str, score: int):
            if candidate == lower:
                return
            if candidate not in scores or score < scores[candidate]:
                scores[candidate] = score

        for candidate, score in self._edit_distance_candidates(lower):
            offer(candidate, score)

        for source, target in self.LETTER_SWAPS:
            if source in lower:
                swapped = lower.replace(source, target)
                if swapped in self._dictionary:
                    offer(swapped, self.SWAP_SCORE)

        for source, target in self.PHONETIC_CONFUSIONS:
            if source in lower:
                swapped = lower.replace(source, target, 1)
                if swapped in self._dictionary:
                    offer(swapped, self.PHONETIC_SCORE)

        for pattern, replacement in self.SUFFIX_PATTERNS:
            if pattern.search(lower):
                fixed = pattern.sub(replacement, lower)
                if fixed in self._dictionary:
                    offer(fixed, self.PATTERN_SCORE)

        ranked = sorted(scores.items(), key=lambda item: (item[1], item[0]))
        return [candidate for candidate, _ in ranked[:limit]]

    def _edit_distance_candidates(self, lower: str):
        """Yield (word, score) for dictionary words within the adaptive distance threshold."""
        length = len(lower)
        if length <= 4:
            max_distance = 1
        elif length <= 6:
            max_distance = 2
        else:
            max_distance = 3

        word_soundex = soundex(lower)
        word_metaphone = metaphone(lower)

        # Distance is at least the length difference, so wider buckets cannot qualify
        window = min(self.MAX_LENGTH_DIFFERENCE, max_distance)
        for candidate_length in range(length - window, length + window + 1):
            for candidate in self._by_length.get(candidate_length, ()):
                distance = levenshtein_distance(lower, candidate)
                if distance == 0 or distance > max_distance:
                    continue

                candidate_soundex, candidate_metaphone = self._phonetic_keys[candidate]
                score = distance * 10
                if candidate_soundex == word_soundex:
                    score -= 5
                if candidate_metaphone == word_metaphone:
                    score -= 5
                if candidate[0] == lower[0]:
                    score -= 3
                if candidate[-2:] == lower[-2:]:
                    score -= 2
                yield candidate, score


_default_checker: Optional[SpellChecker] = None
_default_lock = threading.Lock()


def get_spell_checker() -> SpellChecker:
    """Shared checker over the built-in dictionary (immutable, safe to share)."""
    global _default_checker
    with _default_lock:
        if _default_checker is None:
            _default_checker = SpellChecker()
        return _default_checker


def check_spelling(
    segmented: SegmentedText,
    session: Optional[SessionDictionary] = None,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
) -> SpellCheckResult:
    """Spell check segmented text with the built-in dictionary."""
    return get_spell_checker().check(segmented, session=session, max_suggestions=max_suggestions)
