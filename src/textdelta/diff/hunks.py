#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/diff/hunks.py
"""Group an edit script into hunks of changes plus surrounding context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from textdelta.diff.types import Hunk, Line, LineKind


@dataclass(slots=True)
class _Window:
    """Half-open ``[start, end)`` range of edit-script indices."""

    start: int
    end: int


def _change_windows(lines: Sequence[Line], context_lines: int) -> list[_Window]:
    """Build one window per change and merge overlapping or adjacent ones."""
    windows: list[_Window] = []
    total = len(lines)

    for idx, line in enumerate(lines):
        if line.kind is LineKind.EQUAL:
            continue

        start = max(0, idx - context_lines)
        end = min(total, idx + context_lines + 1)

        if windows and start <= windows[-1].end:
            windows[-1].end = max(windows[-1].end, end)
        else:
            windows.append(_Window(start, end))

    return windows


def compute_hunks(lines: Sequence[Line], context_lines: int) -> list[Hunk]:
    """Group a flat edit script into hunks.

    Each change receives a window of ``context_lines`` lines on either side;
    windows that overlap or touch are merged. Line numbers are 1-based and
    stamped from running old/new counters, so they stay accurate across
    hunks.

    Parameters
    ----------
    lines : sequence of Line
        Edit script from :func:`textdelta.diff.myers.diff_lines`
    context_lines : int
        Equal lines to keep around each change; negative values count as 0

    Returns
    -------
    list of Hunk
        Hunks in order; empty when the script contains no changes

    """
    context_lines = max(0, context_lines)
    windows = _change_windows(lines, context_lines)
    if not windows:
        return []

    hunks = [Hunk(old_start=0, new_start=0) for _ in windows]
    old_line = 1
    new_line = 1
    window_idx = 0

    for idx, line in enumerate(lines):
        if window_idx < len(windows):
            window = windows[window_idx]
            if idx == window.start:
                hunks[window_idx].old_start = old_line
                hunks[window_idx].new_start = new_line
            if window.start <= idx < window.end:
                hunks[window_idx].lines.append(line)

        if line.kind is LineKind.EQUAL:
            old_line += 1
            new_line += 1
        elif line.kind is LineKind.DELETE:
            old_line += 1
        else:
            new_line += 1

        if window_idx < len(windows) and idx == windows[window_idx].end - 1:
            window_idx += 1

    prev_end = 0
    for hunk, window in zip(hunks, windows):
        hunk.skipped = window.start - prev_end
        prev_end = window.end

    return hunks
