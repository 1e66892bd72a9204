#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/align/__init__.py
"""Within-line alignment: tokenization, token alignment and line pairing.

Examples
--------
Align two versions of a JSON line:
    >>> from textdelta.align import align_tokens, tokenize
    >>> alignment = align_tokens(tokenize('"age": 30,'), tokenize('"age": 31,'))
    >>> [t.token.text for t in alignment.old if t.op.value == "delete"]
    ['30']

"""

from textdelta.align.needleman import AlignedToken, Alignment, AlignOp, align_tokens
from textdelta.align.pairing import AnnotatedHunk, LinePair, annotate_hunk, annotate_hunks
from textdelta.align.tokenizer import Token, is_word_char, tokenize

__all__ = [
    "AlignOp",
    "AlignedToken",
    "Alignment",
    "AnnotatedHunk",
    "LinePair",
    "Token",
    "align_tokens",
    "annotate_hunk",
    "annotate_hunks",
    "is_word_char",
    "tokenize",
]
