#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/side_by_side.py
"""Side-by-side (two-panel) renderer.

Old content goes in the left panel and new content in the right one::

    1   {                 │ 1   {
    2 - "age": 30,        │ 2 + "age": 31,
    3   }                 │ 3   }

Panel width cannot be known until every row has been rendered, so the
renderer works in two passes over materialized panel text:

1. render every panel untruncated and record the widest visible panel on
   each side;
2. when the measured rows do not fit the available width, cut panels to
   ceilings derived from those measurements (see :func:`panel_ceilings`),
   then pad every left panel to the left maximum and join it to its right
   panel.

:func:`measure_side_by_side` reports the width of the first pass, so a
rendering whose measurement fits is never truncated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from textdelta.align.pairing import AnnotatedHunk
from textdelta.constants import (
    ADDED_PREFIX,
    CONTEXT_PREFIX,
    EMPTY_PANEL_MARKER,
    MIN_PANEL_WIDTH,
    PANEL_SEPARATOR,
    PANEL_SEPARATOR_WIDTH,
    REMOVED_PREFIX,
    TRUNCATION_MARKER,
)
from textdelta.render.ansi import center, pad_to_width, truncate_to_width, visible_width
from textdelta.render.common import (
    RowKind,
    blank_line_num,
    digit_count,
    format_line_num,
    format_skipped,
    max_line_numbers,
    render_annotated_line,
    walk_hunk,
)
from textdelta.render.styles import Styles

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PanelRow:
    """Rendered left and right panel text for one display row."""

    left: str
    right: str


@dataclass(frozen=True, slots=True)
class PanelBlock:
    """Panel rows of one hunk plus its skipped-line count."""

    skipped: int
    rows: tuple[PanelRow, ...]


@dataclass(frozen=True, slots=True)
class PanelLayout:
    """Result of the first pass: all panels and the widest panel per side."""

    blocks: tuple[PanelBlock, ...]
    left_width: int
    right_width: int

    @property
    def total_width(self) -> int:
        if not self.blocks:
            return 0
        return self.left_width + PANEL_SEPARATOR_WIDTH + self.right_width


def panel_ceilings(left_width: int, right_width: int, width: int) -> tuple[int | None, int | None]:
    """Return the left and right panel ceilings for measured panel widths.

    Nothing is cut (``(None, None)``) when ``width <= 0`` or when the
    measured rows already fit. Otherwise the ``width - 3`` columns left
    after the separator are shared out: the narrower side keeps its
    measured width, up to half, and the wider side gets the rest. The
    columns shared out never drop below two minimum panels.

    Parameters
    ----------
    left_width : int
        Widest untruncated left panel
    right_width : int
        Widest untruncated right panel
    width : int
        Total available columns

    Returns
    -------
    tuple of (int or None, int or None)
        Ceiling for the left and right panels

    """
    if width <= 0 or left_width + PANEL_SEPARATOR_WIDTH + right_width <= width:
        return None, None

    available = max(width - PANEL_SEPARATOR_WIDTH, 2 * MIN_PANEL_WIDTH)
    half = available // 2
    if left_width <= right_width:
        left = min(left_width, half)
        return left, available - left
    right = min(right_width, half)
    return available - right, right


def _measured(blocks: tuple[PanelBlock, ...]) -> PanelLayout:
    left_width = 0
    right_width = 0
    for block in blocks:
        for row in block.rows:
            left_width = max(left_width, visible_width(row.left))
            right_width = max(right_width, visible_width(row.right))
    return PanelLayout(blocks=blocks, left_width=left_width, right_width=right_width)


def fit_panel(text: str, ceiling: int | None) -> str:
    """Cut ``text`` to ``ceiling`` columns, marking the cut with an ellipsis."""
    if ceiling is None or visible_width(text) <= ceiling:
        return text
    return truncate_to_width(text, ceiling - 1) + TRUNCATION_MARKER


class SideBySideRenderer:
    """Render annotated hunks in the two-panel layout.

    Parameters
    ----------
    styles : Styles, optional
        Formatter functions; identity styles when omitted

    """

    def __init__(self, styles: Styles | None = None):
        """Initialize the side-by-side renderer."""
        self.styles = styles or Styles.no_color()

    def layout(self, hunks: Sequence[AnnotatedHunk]) -> PanelLayout:
        """Run the first pass: render and measure every panel untruncated.

        Parameters
        ----------
        hunks : sequence of AnnotatedHunk
            Hunks to render

        Returns
        -------
        PanelLayout
            Materialized panels and the widest visible panel on each side

        """
        if not hunks:
            return PanelLayout(blocks=(), left_width=0, right_width=0)

        max_old, max_new = max_line_numbers(hunks)
        old_width = digit_count(max_old)
        new_width = digit_count(max_new)

        blocks = tuple(
            PanelBlock(
                skipped=hunk.skipped,
                rows=tuple(PanelRow(left, right) for left, right in self._hunk_panels(hunk, old_width, new_width)),
            )
            for hunk in hunks
        )
        return _measured(blocks)

    def fit(self, panels: PanelLayout, width: int) -> PanelLayout:
        """Cut measured panels so every row fits ``width`` columns.

        Returns ``panels`` unchanged when they already fit or ``width <= 0``.
        """
        left_ceiling, right_ceiling = panel_ceilings(panels.left_width, panels.right_width, width)
        if left_ceiling is None and right_ceiling is None:
            return panels

        logger.debug("Fitting side-by-side panels to %d/%d columns", left_ceiling, right_ceiling)
        blocks = tuple(
            PanelBlock(
                skipped=block.skipped,
                rows=tuple(
                    PanelRow(fit_panel(row.left, left_ceiling), fit_panel(row.right, right_ceiling))
                    for row in block.rows
                ),
            )
            for block in panels.blocks
        )
        return _measured(blocks)

    def render(self, hunks: Sequence[AnnotatedHunk], width: int = 0) -> str:
        """Render hunks to a single string; empty when there are no hunks.

        Parameters
        ----------
        hunks : sequence of AnnotatedHunk
            Hunks to render
        width : int, default 0
            Total available columns; 0 disables truncation

        Returns
        -------
        str
            Rendered diff

        """
        if not hunks:
            return ""

        panels = self.fit(self.layout(hunks), width)
        logger.debug(
            "Side-by-side panels: left=%d right=%d (width=%d)", panels.left_width, panels.right_width, width
        )

        parts: list[str] = []
        for i, block in enumerate(panels.blocks):
            if i > 0:
                parts.append("\n")
            if block.skipped > 0:
                parts.append(center(self.styles.separator(format_skipped(block.skipped)), panels.total_width))
                parts.append("\n\n")
            for row in block.rows:
                parts.append(pad_to_width(row.left, panels.left_width) + PANEL_SEPARATOR + row.right + "\n")

        return "".join(parts)

    def measure(self, hunks: Sequence[AnnotatedHunk]) -> int:
        """Return the total width an untruncated rendering needs."""
        return self.layout(hunks).total_width

    def _hunk_panels(self, hunk: AnnotatedHunk, old_width: int, new_width: int) -> list[tuple[str, str]]:
        s = self.styles
        panels: list[tuple[str, str]] = []
        old_num = hunk.old_start
        new_num = hunk.new_start

        def numbered(num: int, num_width: int, body: str) -> str:
            return s.line_num(format_line_num(num, num_width)) + " " + body

        def placeholder(num_width: int) -> str:
            return blank_line_num(num_width) + " " + s.separator(EMPTY_PANEL_MARKER)

        for row in walk_hunk(hunk):
            if row.kind is RowKind.CONTEXT:
                assert row.left is not None and row.right is not None
                left = numbered(old_num, old_width, s.plain(CONTEXT_PREFIX + row.left.content))
                right = numbered(new_num, new_width, s.plain(CONTEXT_PREFIX + row.right.content))
                old_num += 1
                new_num += 1

            elif row.kind is RowKind.PAIRED:
                assert row.pair is not None
                old_text = render_annotated_line(row.pair.alignment.old, s.removed, s.removed_emph)
                new_text = render_annotated_line(row.pair.alignment.new, s.added, s.added_emph)
                left = numbered(old_num, old_width, s.removed(REMOVED_PREFIX) + old_text)
                right = numbered(new_num, new_width, s.added(ADDED_PREFIX) + new_text)
                old_num += 1
                new_num += 1

            elif row.kind is RowKind.DELETE_ONLY:
                assert row.left is not None
                left = numbered(old_num, old_width, s.removed(REMOVED_PREFIX + row.left.content))
                right = placeholder(new_width)
                old_num += 1

            else:
                assert row.right is not None
                left = placeholder(old_width)
                right = numbered(new_num, new_width, s.added(ADDED_PREFIX + row.right.content))
                new_num += 1

            panels.append((left, right))

        return panels


def render_side_by_side(hunks: Sequence[AnnotatedHunk], styles: Styles | None = None, width: int = 0) -> str:
    """Render hunks in the two-panel layout.

    Parameters
    ----------
    hunks : sequence of AnnotatedHunk
        Annotated hunks from :func:`textdelta.align.annotate_hunks`
    styles : Styles, optional
        Formatter functions; identity styles when omitted
    width : int, default 0
        Total available columns; 0 disables truncation. Panels are only
        cut when the untruncated rows would not fit.

    Returns
    -------
    str
        Rendered diff, or ``""`` when there are no hunks

    """
    return SideBySideRenderer(styles).render(hunks, width)


def measure_side_by_side(hunks: Sequence[AnnotatedHunk], styles: Styles | None = None) -> int:
    """Return the width an untruncated side-by-side rendering would need.

    The result is ``left + 3 + right`` where ``left`` and ``right`` are the
    widest panels on each side, or 0 when there are no hunks.
    """
    return SideBySideRenderer(styles).measure(hunks)
