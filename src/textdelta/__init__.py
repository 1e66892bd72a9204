"""textdelta - human-readable text diffs with word-level highlighting.

textdelta compares two arbitrary text blobs and renders the difference for
a terminal, emphasizing exactly which words changed inside modified lines.

Pipeline
--------
1. Line diff: Myers' O(ND) algorithm produces a minimal edit script.
2. Hunks: changes are grouped with surrounding context; distant changes
   are separated by a "lines skipped" marker.
3. Alignment: removed and added lines of a hunk are tokenized, aligned
   with Needleman-Wunsch and paired when they look like the same line,
   modified.
4. Rendering: inline (unified-style) or side-by-side panels, with
   ANSI-escape and wide-character aware truncation.

Requirements
------------
- Python 3.10+
- rich (palette and character widths), PyYAML (configuration files)

Examples
--------
Basic usage:

    >>> from textdelta import diff
    >>> output = diff(old_text, new_text)

Choosing options:

    >>> from textdelta import DiffOptions, diff_with
    >>> output = diff_with(old_text, new_text, DiffOptions(layout="prefer-side-by-side"), color=False)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "textdelta requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from textdelta.align import AlignedToken, Alignment, AlignOp, AnnotatedHunk, LinePair, Token  # noqa: E402
from textdelta.api import choose_layout, compute_annotated_hunks, diff, diff_with, run_pipeline  # noqa: E402
from textdelta.color import build_styles, resolve_color, terminal_width  # noqa: E402
from textdelta.diff import Hunk, Line, LineKind  # noqa: E402
from textdelta.exceptions import ConfigError, InputError, TextDeltaError, ValidationError  # noqa: E402
from textdelta.options import DiffOptions  # noqa: E402
from textdelta.render import Styles, measure_side_by_side, render_inline, render_side_by_side  # noqa: E402

__all__ = [
    "__version__",
    # Entry points
    "diff",
    "diff_with",
    "run_pipeline",
    "compute_annotated_hunks",
    "choose_layout",
    # Options and styling
    "DiffOptions",
    "Styles",
    "build_styles",
    "resolve_color",
    "terminal_width",
    # Renderers
    "render_inline",
    "render_side_by_side",
    "measure_side_by_side",
    # Core types
    "Line",
    "LineKind",
    "Hunk",
    "Token",
    "AlignOp",
    "AlignedToken",
    "Alignment",
    "LinePair",
    "AnnotatedHunk",
    # Exceptions
    "TextDeltaError",
    "ValidationError",
    "ConfigError",
    "InputError",
]
