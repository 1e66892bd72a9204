#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/diff/__init__.py
"""Line-level diffing: edit scripts and hunk windowing.

Examples
--------
Compute hunks with one line of context:
    >>> from textdelta.diff import compute_hunks, diff_lines
    >>> lines = diff_lines("a\\nb\\nc", "a\\nB\\nc")
    >>> hunks = compute_hunks(lines, 1)
    >>> hunks[0].old_start, len(hunks[0].lines)
    (1, 4)

"""

from textdelta.diff.hunks import compute_hunks
from textdelta.diff.myers import diff_lines, diff_sequences, split_lines
from textdelta.diff.types import Hunk, Line, LineKind

__all__ = [
    "Hunk",
    "Line",
    "LineKind",
    "compute_hunks",
    "diff_lines",
    "diff_sequences",
    "split_lines",
]
