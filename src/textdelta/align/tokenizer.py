#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/align/tokenizer.py
"""Lossless word-level tokenization of a single line.

Rules:

- runs of word characters (Unicode letters, decimal digits, underscore)
  form one token;
- every other character, including each whitespace character, is its own
  single-character token.

Joining the token texts always reproduces the original line exactly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Token:
    """A contiguous slice of a line.

    ``start`` and ``end`` are UTF-8 byte offsets into the original line.
    """

    text: str
    start: int
    end: int


def is_word_char(char: str) -> bool:
    """Return True for letters, decimal digits and underscore."""
    return char == "_" or char.isalpha() or char.isdecimal()


def _byte_len(char: str) -> int:
    return len(char.encode("utf-8"))


def tokenize(line: str) -> list[Token]:
    """Split a line into word, whitespace and punctuation tokens.

    Parameters
    ----------
    line : str
        Line content without its terminator

    Returns
    -------
    list of Token
        Tokens in order; empty for an empty line

    Examples
    --------
    >>> [t.text for t in tokenize('"age": 30,')]
    ['"', 'age', '"', ':', ' ', '30', ',']

    """
    tokens: list[Token] = []
    length = len(line)
    i = 0
    byte_pos = 0

    while i < length:
        char = line[i]
        start_byte = byte_pos

        if is_word_char(char):
            j = i
            while j < length and is_word_char(line[j]):
                byte_pos += _byte_len(line[j])
                j += 1
        else:
            j = i + 1
            byte_pos += _byte_len(char)

        tokens.append(Token(line[i:j], start_byte, byte_pos))
        i = j

    return tokens
