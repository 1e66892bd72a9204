#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/options.py
"""Options controlling how a diff is computed and rendered.

:class:`DiffOptions` is an immutable dataclass. Use
:meth:`DiffOptions.create_updated` to derive a modified copy::

    >>> opts = DiffOptions(context_lines=1)
    >>> opts.create_updated(layout="side-by-side").layout
    'side-by-side'

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from textdelta.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_LAYOUT,
    DEFAULT_WIDTH,
    LAYOUT_MODES,
    MAX_CONTEXT_LINES,
    MIN_CONTEXT_LINES,
    LayoutMode,
)
from textdelta.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration for a single diff run.

    Parameters
    ----------
    context_lines : int, default 3
        Unchanged lines shown around each change. Values outside
        ``[0, 100000]`` are clamped rather than rejected.
    layout : {"inline", "side-by-side", "prefer-side-by-side"}, default "inline"
        Output layout. ``prefer-side-by-side`` falls back to inline when the
        side-by-side rendering would not fit in ``width``.
    color : bool or None, default None
        Force color on or off; ``None`` detects it from the environment
    width : int, default 0
        Terminal width in columns for side-by-side output; 0 detects it from
        the output stream (and means "no truncation" when that is not a
        terminal).

    Raises
    ------
    ValidationError
        If ``layout`` is unknown, ``width`` is negative, or a field has the
        wrong type.

    """

    context_lines: int = field(
        default=DEFAULT_CONTEXT_LINES,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )
    layout: LayoutMode = field(
        default=DEFAULT_LAYOUT,
        metadata={"help": "Output layout", "choices": LAYOUT_MODES},
    )
    color: Optional[bool] = field(
        default=None,
        metadata={"help": "Force color on (True) or off (False); None auto-detects"},
    )
    width: int = field(
        default=DEFAULT_WIDTH,
        metadata={"help": "Terminal width for side-by-side output (0 = auto-detect)", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate field values and clamp the context size.

        Raises
        ------
        ValidationError
            If any field value is invalid.

        """
        if isinstance(self.context_lines, bool) or not isinstance(self.context_lines, int):
            raise ValidationError(
                f"context_lines must be an integer, got {self.context_lines!r}",
                parameter_name="context_lines",
                parameter_value=self.context_lines,
            )
        clamped = min(max(self.context_lines, MIN_CONTEXT_LINES), MAX_CONTEXT_LINES)
        if clamped != self.context_lines:
            object.__setattr__(self, "context_lines", clamped)

        if self.layout not in LAYOUT_MODES:
            raise ValidationError(
                f"layout must be one of {', '.join(LAYOUT_MODES)}, got {self.layout!r}",
                parameter_name="layout",
                parameter_value=self.layout,
            )

        if self.color is not None and not isinstance(self.color, bool):
            raise ValidationError(
                f"color must be True, False or None, got {self.color!r}",
                parameter_name="color",
                parameter_value=self.color,
            )

        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValidationError(
                f"width must be an integer, got {self.width!r}",
                parameter_name="width",
                parameter_value=self.width,
            )
        if self.width < 0:
            raise ValidationError(
                f"width must be non-negative, got {self.width}",
                parameter_name="width",
                parameter_value=self.width,
            )
