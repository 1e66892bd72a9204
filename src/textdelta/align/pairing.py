#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/align/pairing.py
"""Pair removed lines with added lines inside each hunk.

A pair means "this removed line and this added line are the same line,
modified", which lets renderers emphasize only the tokens that changed.
Pairing is greedy and first-fit in source order: each removed line takes
the first later, still unpaired added line whose alignment distance is
below :data:`~textdelta.constants.DISTANCE_THRESHOLD`. The scan never
crosses an unchanged line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from textdelta.align.needleman import Alignment, align_tokens
from textdelta.align.tokenizer import Token, tokenize
from textdelta.constants import DISTANCE_THRESHOLD, MAX_ALIGN_TOKENS
from textdelta.diff.types import Hunk, Line, LineKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LinePair:
    """A removed line paired with an added line of the same hunk.

    Parameters
    ----------
    old_index : int
        Index of the removed line within ``Hunk.lines``
    new_index : int
        Index of the added line within ``Hunk.lines``
    alignment : Alignment
        Token-level alignment between the two lines

    """

    old_index: int
    new_index: int
    alignment: Alignment


@dataclass(slots=True)
class AnnotatedHunk:
    """A hunk together with its line pairs.

    Each old index and each new index appears in at most one pair.
    """

    hunk: Hunk
    pairs: list[LinePair] = field(default_factory=list)

    @property
    def old_start(self) -> int:
        return self.hunk.old_start

    @property
    def new_start(self) -> int:
        return self.hunk.new_start

    @property
    def lines(self) -> list[Line]:
        return self.hunk.lines

    @property
    def skipped(self) -> int:
        return self.hunk.skipped


def annotate_hunks(hunks: Iterable[Hunk]) -> list[AnnotatedHunk]:
    """Run line pairing on every hunk.

    Parameters
    ----------
    hunks : iterable of Hunk
        Hunks from :func:`textdelta.diff.hunks.compute_hunks`

    Returns
    -------
    list of AnnotatedHunk
        One annotated hunk per input hunk, in order

    """
    return [annotate_hunk(hunk) for hunk in hunks]


def annotate_hunk(hunk: Hunk) -> AnnotatedHunk:
    """Greedily pair removed and added lines within a single hunk."""
    annotated = AnnotatedHunk(hunk=hunk)
    lines = hunk.lines
    paired: set[int] = set()
    token_cache: dict[int, list[Token]] = {}

    def tokens_at(index: int) -> list[Token]:
        if index not in token_cache:
            token_cache[index] = tokenize(lines[index].content)
        return token_cache[index]

    for i, line in enumerate(lines):
        if line.kind is not LineKind.DELETE:
            continue

        old_tokens = tokens_at(i)
        if len(old_tokens) > MAX_ALIGN_TOKENS:
            logger.debug("Skipping alignment for removed line %d (%d tokens)", i, len(old_tokens))
            continue

        for j in range(i + 1, len(lines)):
            candidate = lines[j]
            if candidate.kind is LineKind.EQUAL:
                break
            if candidate.kind is not LineKind.INSERT or j in paired:
                continue

            new_tokens = tokens_at(j)
            if len(new_tokens) > MAX_ALIGN_TOKENS:
                continue

            alignment = align_tokens(old_tokens, new_tokens)
            if alignment.distance < DISTANCE_THRESHOLD:
                annotated.pairs.append(LinePair(old_index=i, new_index=j, alignment=alignment))
                paired.add(j)
                break

    return annotated
