#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/common.py
"""Row model and helpers shared by the inline and side-by-side renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from textdelta.align.needleman import AlignedToken, AlignOp
from textdelta.align.pairing import AnnotatedHunk, LinePair
from textdelta.constants import GUTTER_BAR
from textdelta.diff.types import Line, LineKind
from textdelta.render.styles import StyleFunc, Styles


class RowKind(Enum):
    """Shape of a display row."""

    CONTEXT = "context"
    PAIRED = "paired"
    DELETE_ONLY = "delete_only"
    INSERT_ONLY = "insert_only"


@dataclass(frozen=True, slots=True)
class HunkRow:
    """One logical change unit of a hunk.

    - ``CONTEXT``: ``left`` and ``right`` are the same unchanged line
    - ``PAIRED``: ``left`` removed, ``right`` added, ``pair`` holds the alignment
    - ``DELETE_ONLY``: only ``left`` is set
    - ``INSERT_ONLY``: only ``right`` is set
    """

    kind: RowKind
    left: Line | None = None
    right: Line | None = None
    pair: LinePair | None = None


def walk_hunk(hunk: AnnotatedHunk) -> list[HunkRow]:
    """Flatten an annotated hunk into display rows in original line order.

    An added line that belongs to a pair is emitted with its removed line
    and skipped when reached on its own.
    """
    old_pairs = {pair.old_index: pair for pair in hunk.pairs}
    new_paired = {pair.new_index for pair in hunk.pairs}
    lines = hunk.lines
    rows: list[HunkRow] = []

    for idx, line in enumerate(lines):
        if line.kind is LineKind.EQUAL:
            rows.append(HunkRow(RowKind.CONTEXT, left=line, right=line))
        elif line.kind is LineKind.DELETE:
            pair = old_pairs.get(idx)
            if pair is not None:
                rows.append(HunkRow(RowKind.PAIRED, left=line, right=lines[pair.new_index], pair=pair))
            else:
                rows.append(HunkRow(RowKind.DELETE_ONLY, left=line))
        elif idx not in new_paired:
            rows.append(HunkRow(RowKind.INSERT_ONLY, right=line))

    return rows


def render_annotated_line(tokens: Sequence[AlignedToken], base: StyleFunc, emph: StyleFunc) -> str:
    """Rebuild a line from aligned tokens, emphasizing unmatched ones.

    Consecutive tokens with the same treatment are styled as one group to
    keep the number of escape sequences small.
    """
    parts: list[str] = []
    buffer: list[str] = []
    current_emph = False

    def flush() -> None:
        if not buffer:
            return
        text = "".join(buffer)
        parts.append(emph(text) if current_emph else base(text))
        buffer.clear()

    for aligned in tokens:
        is_emph = aligned.op is not AlignOp.MATCH
        if is_emph != current_emph:
            flush()
        current_emph = is_emph
        buffer.append(aligned.token.text)
    flush()

    return "".join(parts)


def digit_count(number: int) -> int:
    """Number of decimal digits in a non-negative integer (1 for 0)."""
    return len(str(max(0, number)))


def max_line_numbers(hunks: Sequence[AnnotatedHunk]) -> tuple[int, int]:
    """Return the highest old and new line numbers displayed across hunks."""
    max_old = 0
    max_new = 0
    for hunk in hunks:
        old_num = hunk.old_start
        new_num = hunk.new_start
        for line in hunk.lines:
            if line.kind is not LineKind.INSERT:
                max_old = max(max_old, old_num)
                old_num += 1
            if line.kind is not LineKind.DELETE:
                max_new = max(max_new, new_num)
                new_num += 1
    return max_old, max_new


def format_line_num(number: int, width: int) -> str:
    """Right-justify a line number to ``width`` columns."""
    return f"{number:>{width}}"


def blank_line_num(width: int) -> str:
    """Return ``width`` spaces in place of a line number."""
    return " " * width


def format_skipped(count: int) -> str:
    """Return the annotation for ``count`` elided lines."""
    noun = "line" if count == 1 else "lines"
    return f"~~~ {count} {noun} skipped ~~~"


def gutter_inline(kind: LineKind, old_num: int, new_num: int, old_width: int, new_width: int, styles: Styles) -> str:
    """Format the dual line-number gutter used by the inline layout.

    - unchanged: ``"NN MM │ "``
    - removed:   ``"NN    │ "``
    - added:     ``"   MM │ "``
    """
    if kind is LineKind.INSERT:
        old_col = blank_line_num(old_width)
    else:
        old_col = styles.line_num(format_line_num(old_num, old_width))

    if kind is LineKind.DELETE:
        new_col = blank_line_num(new_width)
    else:
        new_col = styles.line_num(format_line_num(new_num, new_width))

    return f"{old_col} {new_col} {styles.line_num(GUTTER_BAR)} "
