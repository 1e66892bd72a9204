#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/diff/myers.py
"""Line-level edit scripts using the Myers O(ND) algorithm.

Based on Eugene W. Myers, "An O(ND) Difference Algorithm and Its
Variations" (1986). The forward pass records a snapshot of the
furthest-reaching frontier for every edit distance ``d``; the backward pass
replays those snapshots to recover one shortest edit script.

When two edit scripts have the same cost, the backtrack prefers an
insertion whenever the previous frontier reached further on diagonal
``k + 1`` than on ``k - 1``. That choice decides whether a change is shown
as insert-then-match or delete-then-match, so it must stay stable.
"""

from __future__ import annotations

import logging
from typing import Sequence

from textdelta.diff.types import Line, LineKind

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``.

    An empty text has zero lines, not one empty line. A trailing newline
    yields a trailing empty line, so ``"hello\\n"`` and ``"hello"`` differ.

    Parameters
    ----------
    text : str
        Text to split

    Returns
    -------
    list of str
        Lines without terminators

    """
    if not text:
        return []
    return text.split("\n")


def diff_lines(old: str, new: str) -> list[Line]:
    """Compute the line-level edit script transforming ``old`` into ``new``.

    Parameters
    ----------
    old : str
        Original text
    new : str
        Updated text

    Returns
    -------
    list of Line
        Edit script in forward order; empty when both texts are equal

    """
    if old == new:
        return []

    return diff_sequences(split_lines(old), split_lines(new))


def diff_sequences(old: Sequence[str], new: Sequence[str]) -> list[Line]:
    """Run the Myers shortest-edit-script search on two line sequences."""
    n = len(old)
    m = len(new)

    if n == 0:
        return [Line(LineKind.INSERT, line) for line in new]
    if m == 0:
        return [Line(LineKind.DELETE, line) for line in old]

    offset = n + m
    # frontier[k + offset] is the furthest x reached on diagonal k = x - y
    frontier = [0] * (2 * offset + 1)
    trace: list[list[int]] = []

    for d in range(offset + 1):
        trace.append(list(frontier))
        done = False

        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and frontier[k - 1 + offset] < frontier[k + 1 + offset]):
                x = frontier[k + 1 + offset]
            else:
                x = frontier[k - 1 + offset] + 1
            y = x - k

            while x < n and y < m and old[x] == new[y]:
                x += 1
                y += 1

            frontier[k + offset] = x

            if x >= n and y >= m:
                done = True
                break

        if done:
            break

    logger.debug("Edit distance %d for %d old / %d new lines", len(trace) - 1, n, m)
    return _backtrack(trace, old, new, offset)


def _backtrack(trace: list[list[int]], old: Sequence[str], new: Sequence[str], offset: int) -> list[Line]:
    """Reconstruct the edit script by replaying frontier snapshots backward."""
    x = len(old)
    y = len(new)
    edits: list[Line] = []

    for d in range(len(trace) - 1, -1, -1):
        snapshot = trace[d]
        k = x - y

        if k == -d or (k != d and snapshot[k - 1 + offset] < snapshot[k + 1 + offset]):
            prev_k = k + 1
        else:
            prev_k = k - 1

        prev_x = snapshot[prev_k + offset]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            edits.append(Line(LineKind.EQUAL, old[x]))

        if d > 0:
            if x == prev_x:
                y -= 1
                edits.append(Line(LineKind.INSERT, new[y]))
            else:
                x -= 1
                edits.append(Line(LineKind.DELETE, old[x]))

    edits.reverse()
    return edits
