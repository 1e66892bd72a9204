#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/align/needleman.py
"""Global token alignment (Needleman-Wunsch with Levenshtein costs).

Scoring is on token text equality: match 0, substitution 1, gap 1. The
traceback walks from the bottom-right cell preferring, in order, a
deletion, an insertion, a match and a substitution. Checking gaps before
matches pushes changes inside a run of identical tokens to the later
position of the run, which gives steadier highlighting on lines such as
``^^^^^^`` carets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from textdelta.align.tokenizer import Token


class AlignOp(Enum):
    """Role of a token in an alignment."""

    MATCH = "match"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True, slots=True)
class AlignedToken:
    """A token tagged with its alignment operation."""

    op: AlignOp
    token: Token


@dataclass(slots=True)
class Alignment:
    """Result of aligning two token sequences.

    Parameters
    ----------
    old : list of AlignedToken
        Old tokens in order, each tagged MATCH or DELETE
    new : list of AlignedToken
        New tokens in order, each tagged MATCH or INSERT
    distance : float
        Normalized dissimilarity in ``[0, 1]``; 0 means identical sequences

    """

    old: list[AlignedToken] = field(default_factory=list)
    new: list[AlignedToken] = field(default_factory=list)
    distance: float = 0.0


def align_tokens(old_tokens: Sequence[Token], new_tokens: Sequence[Token]) -> Alignment:
    """Align two token sequences and score their normalized distance.

    The distance is ``(deletions + insertions) / (2 * matches + deletions +
    insertions)``; a substitution counts as one deletion plus one insertion.

    Parameters
    ----------
    old_tokens : sequence of Token
        Tokens of the removed line
    new_tokens : sequence of Token
        Tokens of the added line

    Returns
    -------
    Alignment
        Per-token classification for both sides plus the distance

    """
    n = len(old_tokens)
    m = len(new_tokens)

    if n == 0 and m == 0:
        return Alignment()
    if n == 0:
        return Alignment(new=[AlignedToken(AlignOp.INSERT, t) for t in new_tokens], distance=1.0)
    if m == 0:
        return Alignment(old=[AlignedToken(AlignOp.DELETE, t) for t in old_tokens], distance=1.0)

    old_text = [t.text for t in old_tokens]
    new_text = [t.text for t in new_tokens]

    # dp[i][j] = cost of aligning old[:i] with new[:j]
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        row = dp[i]
        above = dp[i - 1]
        for j in range(1, m + 1):
            cost = 0 if old_text[i - 1] == new_text[j - 1] else 1
            row[j] = min(above[j] + 1, row[j - 1] + 1, above[j - 1] + cost)

    old_aligned: list[AlignedToken] = []
    new_aligned: list[AlignedToken] = []
    matches = deletions = insertions = 0
    i, j = n, m

    while i > 0 or j > 0:
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            old_aligned.append(AlignedToken(AlignOp.DELETE, old_tokens[i - 1]))
            deletions += 1
            i -= 1
        elif j > 0 and dp[i][j] == dp[i][j - 1] + 1:
            new_aligned.append(AlignedToken(AlignOp.INSERT, new_tokens[j - 1]))
            insertions += 1
            j -= 1
        elif i > 0 and j > 0 and old_text[i - 1] == new_text[j - 1] and dp[i][j] == dp[i - 1][j - 1]:
            old_aligned.append(AlignedToken(AlignOp.MATCH, old_tokens[i - 1]))
            new_aligned.append(AlignedToken(AlignOp.MATCH, new_tokens[j - 1]))
            matches += 1
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            old_aligned.append(AlignedToken(AlignOp.DELETE, old_tokens[i - 1]))
            new_aligned.append(AlignedToken(AlignOp.INSERT, new_tokens[j - 1]))
            deletions += 1
            insertions += 1
            i -= 1
            j -= 1
        else:
            # Unreachable for a well-formed table: row 0 and column 0 always
            # satisfy one of the gap branches above.
            new_aligned.append(AlignedToken(AlignOp.INSERT, new_tokens[j - 1]))
            insertions += 1
            j -= 1

    old_aligned.reverse()
    new_aligned.reverse()

    total = 2 * matches + deletions + insertions
    distance = (deletions + insertions) / total if total else 0.0

    return Alignment(old=old_aligned, new=new_aligned, distance=distance)
