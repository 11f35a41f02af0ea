#!/usr/bin/env python3
"""
Corpus Normalizer
=================
Cleans raw corpus text and splits it into tokens.

Steps, in order:
1. Newlines become spaces (poem line breaks join up into sentences)
2. Bracketed annotations like page numbers ``[12]``, quotes, parentheses,
   apostrophes and underscores are removed
3. Whitespace runs collapse to a single space

Tokens keep trailing punctuation, which is how sentence boundaries are found.
"""

import re

# Characters that end a sentence when they are the last character of a token
SENTENCE_DELIMITERS = frozenset({',', '.', '!'})

_LINE_ENDINGS = re.compile(r'\n')
_SANITIZER = re.compile(r'\[.+?\]|"|\)|\(|\'|\r|“|”|’|_')
_WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Return ``text`` with annotations and punctuation stripped and whitespace collapsed."""
    text = _LINE_ENDINGS.sub(' ', text)
    text = _SANITIZER.sub('', text)
    text = _WHITESPACE.sub(' ', text)
    return text.strip()


def tokenize(text: str) -> list[str]:
    """Normalize ``text`` and split it into non-empty tokens."""
    return [token for token in normalize(text).split() if token]


def is_sentence_terminator(token: str) -> bool:
    """
    Check whether a token ends a sentence.

    Only the final character is inspected, so abbreviations like "Mr." end
    a sentence too.
    """
    return bool(token) and token[-1] in SENTENCE_DELIMITERS


__all__ = [
    "SENTENCE_DELIMITERS",
    "normalize",
    "tokenize",
    "is_sentence_terminator",
]
