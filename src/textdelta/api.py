#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/api.py
"""Public entry points for computing and rendering diffs.

The pipeline has three stages followed by rendering:

1. line diff (:func:`textdelta.diff.diff_lines`) and hunk windowing
   (:func:`textdelta.diff.compute_hunks`);
2. within-line alignment and line pairing
   (:func:`textdelta.align.annotate_hunks`);
3. rendering in the inline or side-by-side layout.

Examples
--------
    >>> from textdelta import diff_with
    >>> print(diff_with("a\\nb", "a\\nc", color=False), end="")
    1 1 │   a
    2   │ - b
      2 │ + c

"""

from __future__ import annotations

import logging
from typing import IO, Any, Optional

from textdelta.align.pairing import AnnotatedHunk, annotate_hunks
from textdelta.color import build_styles, resolve_color, terminal_width
from textdelta.diff.hunks import compute_hunks
from textdelta.diff.myers import diff_lines
from textdelta.options import DiffOptions
from textdelta.render.inline import render_inline
from textdelta.render.side_by_side import measure_side_by_side, render_side_by_side
from textdelta.render.styles import Styles

logger = logging.getLogger(__name__)


def diff(old: str, new: str) -> str:
    """Render the difference between two texts with default options.

    Returns an empty string when the texts are identical.
    """
    return diff_with(old, new)


def diff_with(
    old: str,
    new: str,
    options: Optional[DiffOptions] = None,
    stream: IO[str] | None = None,
    **overrides: Any,
) -> str:
    """Render the difference between two texts.

    Parameters
    ----------
    old : str
        Original text
    new : str
        Modified text
    options : DiffOptions, optional
        Base options; defaults to ``DiffOptions()``
    stream : file-like, optional
        Stream the output is destined for. Color and width auto-detection
        inspect it; defaults to ``sys.stdout``.
    **overrides : Any
        Individual :class:`DiffOptions` fields to override, e.g.
        ``context_lines=1`` or ``layout="side-by-side"``

    Returns
    -------
    str
        The rendered diff, or ``""`` when the texts are identical

    Raises
    ------
    ValidationError
        If an override has an invalid value
    TypeError
        If an override names an unknown option

    """
    if old == new:
        return ""

    opts = options or DiffOptions()
    if overrides:
        opts = opts.create_updated(**overrides)

    styles = build_styles(resolve_color(opts.color, stream))
    width = opts.width
    if width == 0 and opts.layout != "inline":
        width = terminal_width(stream)

    return run_pipeline(old, new, opts, styles, width)


def compute_annotated_hunks(old: str, new: str, context_lines: int) -> list[AnnotatedHunk]:
    """Run the diff and alignment stages and return annotated hunks."""
    lines = diff_lines(old, new)
    if not lines:
        return []
    hunks = compute_hunks(lines, context_lines)
    annotated = annotate_hunks(hunks)
    logger.debug(
        "Computed %d diff lines in %d hunks (%d paired lines)",
        len(lines),
        len(annotated),
        sum(len(h.pairs) for h in annotated),
    )
    return annotated


def choose_layout(hunks: list[AnnotatedHunk], layout: str, styles: Styles, width: int) -> str:
    """Resolve ``prefer-side-by-side`` into a concrete layout.

    Side-by-side is kept when there is no width limit or when the
    untruncated rendering fits within ``width``; otherwise inline is used.
    """
    if layout != "prefer-side-by-side":
        return layout
    if width <= 0:
        return "side-by-side"
    needed = measure_side_by_side(hunks, styles)
    chosen = "side-by-side" if needed <= width else "inline"
    logger.debug("Side-by-side needs %d columns of %d available; using %s", needed, width, chosen)
    return chosen


def run_pipeline(old: str, new: str, options: DiffOptions, styles: Styles, width: int = 0) -> str:
    """Run the full pipeline with already-resolved styles and width.

    Parameters
    ----------
    old : str
        Original text
    new : str
        Modified text
    options : DiffOptions
        Context size and layout
    styles : Styles
        Formatter functions
    width : int, default 0
        Available columns for side-by-side output; 0 means no truncation

    Returns
    -------
    str
        Rendered diff, or ``""`` when there are no differences

    """
    hunks = compute_annotated_hunks(old, new, options.context_lines)
    if not hunks:
        return ""

    layout = choose_layout(hunks, options.layout, styles, width)
    if layout == "inline":
        return render_inline(hunks, styles)
    return render_side_by_side(hunks, styles, width)
