#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/diff/types.py
"""Line and hunk types produced by the line-level diff stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineKind(Enum):
    """Classification of a single line in an edit script."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True, slots=True)
class Line:
    """A single line of an edit script.

    ``content`` never includes the line terminator.
    """

    kind: LineKind
    content: str


@dataclass(slots=True)
class Hunk:
    """A contiguous run of changed lines with surrounding context.

    Parameters
    ----------
    old_start : int
        1-based line number of the first hunk line in the old text
    new_start : int
        1-based line number of the first hunk line in the new text
    lines : list of Line
        Context and change lines in edit-script order
    skipped : int
        Number of edit-script lines elided immediately before this hunk

    """

    old_start: int
    new_start: int
    lines: list[Line] = field(default_factory=list)
    skipped: int = 0
