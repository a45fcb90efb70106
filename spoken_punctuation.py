#!/usr/bin/env python3
"""
Spoken Punctuation v1.0.0
=========================
Turns spoken punctuation and formatting words in a transcription into
symbols: "hello comma world period" becomes "hello, world."
"""

import re
from typing import Dict, List, Tuple

__version__ = "1.0.0"


SPOKEN_PUNCTUATION: Dict[str, str] = {
    # Punctuation
    'period': '.',
    'full stop': '.',
    'comma': ',',
    'question mark': '?',
    'exclamation mark': '!',
    'exclamation point': '!',
    'colon': ':',
    'semicolon': ';',
    'dash': '-',
    'hyphen': '-',
    'open quote': '"',
    'close quote': '"',
    'open parenthesis': '(',
    'close parenthesis': ')',
    'ellipsis': '...',

    # Formatting
    'new line': '\n',
    'newline': '\n',
    'new paragraph': '\n\n',
    'paragraph': '\n\n',

    # Symbols
    'ampersand': '&',
    'at sign': '@',
    'hashtag': '#',
    'dollar sign': '$',
    'percent': '%',
}


def _compile_rules() -> List[Tuple[re.Pattern, str]]:
    # Longest phrase first so "full stop" wins over a shorter overlap
    phrases = sorted(SPOKEN_PUNCTUATION, key=len, reverse=True)
    return [
        (re.compile(r'\b' + re.escape(phrase) + r'\b', re.IGNORECASE), SPOKEN_PUNCTUATION[phrase])
        for phrase in phrases
    ]


_RULES = _compile_rules()
_SPACE_BEFORE_PUNCT_RE = re.compile(r'\s+([.,!?;:])')
_SPACE_BEFORE_NEWLINE_RE = re.compile(r'[^\S\n]+\n')
_SPACE_AFTER_NEWLINE_RE = re.compile(r'\n[^\S\n]+')


def process_voice_commands(text: str) -> str:
    """Replace spoken punctuation words and tidy the spacing around them."""
    result = text
    for pattern, symbol in _RULES:
        result = pattern.sub(lambda _match, symbol=symbol: symbol, result)

    result = _SPACE_BEFORE_PUNCT_RE.sub(r'\1', result)
    result = _SPACE_BEFORE_NEWLINE_RE.sub('\n', result)
    return _SPACE_AFTER_NEWLINE_RE.sub('\n', result)
