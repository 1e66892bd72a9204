#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/styles.py
"""Style functions consumed by the renderers.

Renderers never decide whether color is enabled; they only call the
functions they are given. :func:`textdelta.color.build_styles` builds the
ANSI palette, and :meth:`Styles.no_color` returns identity functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

StyleFunc = Callable[[str], str]


def identity(text: str) -> str:
    """Return ``text`` unchanged."""
    return text


@dataclass(frozen=True)
class Styles:
    """Formatter functions for each visual element of a diff.

    Parameters
    ----------
    removed : callable
        Removed line text
    added : callable
        Added line text
    removed_emph : callable
        Changed tokens inside a paired removed line
    added_emph : callable
        Changed tokens inside a paired added line
    line_num : callable
        Gutter line numbers and the gutter bar
    separator : callable
        Hunk separators and empty-panel placeholders
    plain : callable
        Context text

    """

    removed: StyleFunc = identity
    added: StyleFunc = identity
    removed_emph: StyleFunc = identity
    added_emph: StyleFunc = identity
    line_num: StyleFunc = identity
    separator: StyleFunc = identity
    plain: StyleFunc = identity

    @classmethod
    def no_color(cls) -> Styles:
        """Return styles where every formatter is the identity function."""
        return cls()
