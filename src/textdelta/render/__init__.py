#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/__init__.py
"""Renderers that turn annotated hunks into display text.

Both layouts consume the same row model (:func:`walk_hunk`) and take their
styling from a :class:`Styles` object, so color decisions stay outside.
"""

from textdelta.render.ansi import AnsiState, center, next_state, pad_to_width, truncate_to_width, visible_width
from textdelta.render.common import HunkRow, RowKind, walk_hunk
from textdelta.render.inline import InlineRenderer, render_inline
from textdelta.render.side_by_side import SideBySideRenderer, measure_side_by_side, render_side_by_side
from textdelta.render.styles import StyleFunc, Styles, identity

__all__ = [
    "AnsiState",
    "HunkRow",
    "InlineRenderer",
    "RowKind",
    "SideBySideRenderer",
    "StyleFunc",
    "Styles",
    "center",
    "identity",
    "measure_side_by_side",
    "next_state",
    "pad_to_width",
    "render_inline",
    "render_side_by_side",
    "truncate_to_width",
    "visible_width",
    "walk_hunk",
]
