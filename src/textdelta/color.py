#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/color.py
"""Color palette and terminal detection.

This is the only part of textdelta that looks at the process environment.
The renderers receive finished :class:`~textdelta.render.styles.Styles` and
a width, and never decide anything about the terminal themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any, Optional

from rich.color import ColorSystem
from rich.style import Style

from textdelta.render.styles import StyleFunc, Styles, identity

logger = logging.getLogger(__name__)

PALETTE: dict[str, Style] = {
    "removed": Style(color="red"),
    "added": Style(color="green"),
    "removed_emph": Style(color="red", reverse=True),
    "added_emph": Style(color="green", reverse=True),
    "line_num": Style(dim=True),
    "separator": Style(dim=True),
}


def _style_func(style: Style) -> StyleFunc:
    def apply(text: str) -> str:
        return style.render(text, color_system=ColorSystem.STANDARD)

    return apply


def build_styles(use_color: bool) -> Styles:
    """Build the formatter functions for a diff.

    Parameters
    ----------
    use_color : bool
        When False every formatter is the identity function

    Returns
    -------
    Styles
        Formatters emitting 16-color ANSI sequences, or identity styles

    """
    if not use_color:
        return Styles.no_color()

    return Styles(
        removed=_style_func(PALETTE["removed"]),
        added=_style_func(PALETTE["added"]),
        removed_emph=_style_func(PALETTE["removed_emph"]),
        added_emph=_style_func(PALETTE["added_emph"]),
        line_num=_style_func(PALETTE["line_num"]),
        separator=_style_func(PALETTE["separator"]),
        plain=identity,
    )


def _is_tty(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def resolve_color(mode: Optional[bool] = None, stream: IO[str] | None = None) -> bool:
    """Decide whether output should be colored.

    Priority: explicit ``mode``, then ``FORCE_COLOR``, then ``NO_COLOR``,
    then whether ``stream`` (stdout by default) is a terminal. The
    environment variables only need to be present; their values are ignored.
    """
    if mode is not None:
        return mode
    if "FORCE_COLOR" in os.environ:
        return True
    if "NO_COLOR" in os.environ:
        return False
    return _is_tty(stream if stream is not None else sys.stdout)


def terminal_width(stream: IO[str] | None = None) -> int:
    """Return the column count of the terminal behind ``stream``.

    Returns 0 when the stream is not a terminal or its size cannot be read,
    which the side-by-side renderer treats as "no truncation".
    """
    target = stream if stream is not None else sys.stdout
    if not _is_tty(target):
        return 0
    try:
        columns = os.get_terminal_size(target.fileno()).columns
    except (AttributeError, OSError, ValueError) as exc:
        logger.debug("Could not read terminal size: %s", exc)
        return 0
    return max(columns, 0)
