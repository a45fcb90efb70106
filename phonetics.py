#!/usr/bin/env python3
"""
Phonetic & Edit-Distance Helpers v1.0.0
=======================================
String similarity measures used to rank spelling suggestions.

- levenshtein_distance: minimum single-character insertions, deletions
  and substitutions
- soundex: four-character Soundex code
- metaphone: simplified Metaphone-style key (silent letters dropped,
  consonant digraphs normalized, vowels collapsed, doubles collapsed)
"""

import re

__version__ = "1.0.0"


SOUNDEX_CODES = {
    'b': '1', 'f': '1', 'p': '1', 'v': '1',
    'c': '2', 'g': '2', 'j': '2', 'k': '2', 'q': '2', 's': '2', 'x': '2', 'z': '2',
    'd': '3', 't': '3',
    'l': '4',
    'm': '5', 'n': '5',
    'r': '6',
}

# Applied in order; each rule rewrites its first occurrence only
METAPHONE_RULES = [
    (re.compile(r'^kn'), 'n'),
    (re.compile(r'^gn'), 'n'),
    (re.compile(r'^pn'), 'n'),
    (re.compile(r'^wr'), 'r'),
    (re.compile(r'^ps'), 's'),
    (re.compile(r'mb$'), 'm'),
    (re.compile(r'ght'), 't'),
    (re.compile(r'ph'), 'f'),
    (re.compile(r'ck'), 'k'),
    (re.compile(r'sh'), 'x'),
    (re.compile(r'ch'), 'x'),
    (re.compile(r'th'), '0'),
    (re.compile(r'wh'), 'w'),
]
_VOWELS_RE = re.compile(r'[aeiou]')
_DOUBLED_RE = re.compile(r'(.)\1+')

METAPHONE_KEY_LENGTH = 6


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def soundex(word: str) -> str:
    """
    Encode a word with Soundex.

    The first letter is kept, remaining letters map to digit classes
    (vowels, h, w and y are dropped), adjacent duplicate digits collapse,
    and the code is padded or cut to four characters.

    >>> soundex('Robert')
    'R163'
    """
    word = word.lower()
    if not word:
        return ''

    first_letter, rest = word[0], word[1:]
    coded = ''.join(SOUNDEX_CODES.get(char, '') for char in rest)
    deduped = _DOUBLED_RE.sub(r'\1', coded)

    return (first_letter + deduped + '000')[:4].upper()


def metaphone(word: str) -> str:
    """Encode a word with the simplified Metaphone-style key."""
    result = word.lower()
    for pattern, replacement in METAPHONE_RULES:
        result = pattern.sub(replacement, result, count=1)
    result = _VOWELS_RE.sub('a', result)
    result = _DOUBLED_RE.sub(r'\1', result)
    return result[:METAPHONE_KEY_LENGTH]
