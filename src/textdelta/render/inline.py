#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/inline.py
"""Inline (unified-style) renderer.

Output format, one row per line with a dual line-number gutter::

    1 1 │   {
    2   │ - "age": 30,
      2 │ + "age": 31,
    3 3 │   }

Paired lines show the removed version followed by the added version, with
only the changed tokens emphasized.
"""

from __future__ import annotations

from typing import Sequence

from textdelta.align.pairing import AnnotatedHunk
from textdelta.constants import ADDED_PREFIX, CONTEXT_PREFIX, REMOVED_PREFIX
from textdelta.diff.types import LineKind
from textdelta.render.ansi import center, visible_width
from textdelta.render.common import (
    RowKind,
    digit_count,
    format_skipped,
    gutter_inline,
    max_line_numbers,
    render_annotated_line,
    walk_hunk,
)
from textdelta.render.styles import Styles


class InlineRenderer:
    """Render annotated hunks in the inline layout.

    Parameters
    ----------
    styles : Styles, optional
        Formatter functions; identity styles when omitted

    Examples
    --------
    >>> from textdelta.align import annotate_hunks
    >>> from textdelta.diff import compute_hunks, diff_lines
    >>> hunks = annotate_hunks(compute_hunks(diff_lines("a", "b"), 3))
    >>> print(InlineRenderer().render(hunks), end="")
    1   │ - a
      1 │ + b

    """

    def __init__(self, styles: Styles | None = None):
        """Initialize the inline renderer."""
        self.styles = styles or Styles.no_color()

    def render(self, hunks: Sequence[AnnotatedHunk]) -> str:
        """Render hunks to a single string; empty when there are no hunks."""
        if not hunks:
            return ""

        max_old, max_new = max_line_numbers(hunks)
        old_width = digit_count(max_old)
        new_width = digit_count(max_new)

        blocks = [self._render_hunk(hunk, old_width, new_width) for hunk in hunks]
        row_width = max((visible_width(row) for block in blocks for row in block), default=0)

        parts: list[str] = []
        for i, (hunk, block) in enumerate(zip(hunks, blocks)):
            if i > 0:
                parts.append("\n")
            if hunk.skipped > 0:
                parts.append(center(self.styles.separator(format_skipped(hunk.skipped)), row_width))
                parts.append("\n\n")
            for row in block:
                parts.append(row + "\n")

        return "".join(parts)

    def _render_hunk(self, hunk: AnnotatedHunk, old_width: int, new_width: int) -> list[str]:
        s = self.styles
        out: list[str] = []
        old_num = hunk.old_start
        new_num = hunk.new_start

        for row in walk_hunk(hunk):
            if row.kind is RowKind.CONTEXT:
                assert row.left is not None
                gutter = gutter_inline(LineKind.EQUAL, old_num, new_num, old_width, new_width, s)
                out.append(gutter + CONTEXT_PREFIX + row.left.content)
                old_num += 1
                new_num += 1

            elif row.kind is RowKind.PAIRED:
                assert row.pair is not None
                # both gutters are built before either counter moves
                del_gutter = gutter_inline(LineKind.DELETE, old_num, new_num, old_width, new_width, s)
                ins_gutter = gutter_inline(LineKind.INSERT, old_num, new_num, old_width, new_width, s)
                old_text = render_annotated_line(row.pair.alignment.old, s.removed, s.removed_emph)
                new_text = render_annotated_line(row.pair.alignment.new, s.added, s.added_emph)
                out.append(del_gutter + s.removed(REMOVED_PREFIX) + old_text)
                out.append(ins_gutter + s.added(ADDED_PREFIX) + new_text)
                old_num += 1
                new_num += 1

            elif row.kind is RowKind.DELETE_ONLY:
                assert row.left is not None
                gutter = gutter_inline(LineKind.DELETE, old_num, new_num, old_width, new_width, s)
                out.append(gutter + s.removed(REMOVED_PREFIX + row.left.content))
                old_num += 1

            else:
                assert row.right is not None
                gutter = gutter_inline(LineKind.INSERT, old_num, new_num, old_width, new_width, s)
                out.append(gutter + s.added(ADDED_PREFIX + row.right.content))
                new_num += 1

        return out


def render_inline(hunks: Sequence[AnnotatedHunk], styles: Styles | None = None) -> str:
    """Render hunks in the inline layout.

    Parameters
    ----------
    hunks : sequence of AnnotatedHunk
        Annotated hunks from :func:`textdelta.align.annotate_hunks`
    styles : Styles, optional
        Formatter functions; identity styles when omitted

    Returns
    -------
    str
        Rendered diff, or ``""`` when there are no hunks

    """
    return InlineRenderer(styles).render(hunks)
