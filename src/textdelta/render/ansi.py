#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/render/ansi.py
"""ANSI-escape-aware and Unicode-width-aware measurement and truncation.

Escape sequences are tracked with a six-state machine driven one character
at a time by :func:`next_state`:

- ``ESC [`` starts a CSI sequence, ended by a final byte in ``0x40-0x7E``;
- ``ESC ]`` starts an OSC sequence, ended by BEL or ST (``ESC \\``);
- ``ESC P``, ``ESC _``, ``ESC ^`` and ``ESC X`` start DCS/APC/PM/SOS string
  sequences, ended by ST;
- any other character after ESC ends a single-character escape.

Characters consumed while inside an escape, and the character that ends
one, have no visible width. Everything else is measured in terminal cells
using rich's East-Asian width tables.
"""

from __future__ import annotations

from enum import Enum

from rich.cells import cell_len

from textdelta.constants import ANSI_RESET

ESC = "\x1b"
BEL = "\x07"
STRING_INTRODUCERS = frozenset("P_^X")


class AnsiState(Enum):
    """Position of the scanner relative to an escape sequence."""

    NONE = "none"
    ESC = "esc"
    CSI = "csi"
    OSC = "osc"
    STRING = "string"
    STRING_ESC = "string_esc"


def next_state(state: AnsiState, char: str) -> AnsiState:
    """Return the scanner state after consuming ``char``.

    Parameters
    ----------
    state : AnsiState
        Current state
    char : str
        Single character being consumed

    Returns
    -------
    AnsiState
        The following state. A transition into ``NONE`` from any other state
        means ``char`` terminated an escape sequence.

    """
    if state is AnsiState.NONE:
        return AnsiState.ESC if char == ESC else AnsiState.NONE

    if state is AnsiState.ESC:
        if char == "[":
            return AnsiState.CSI
        if char == "]":
            return AnsiState.OSC
        if char in STRING_INTRODUCERS:
            return AnsiState.STRING
        return AnsiState.NONE

    if state is AnsiState.CSI:
        return AnsiState.NONE if 0x40 <= ord(char) <= 0x7E else AnsiState.CSI

    if state is AnsiState.OSC:
        if char == BEL:
            return AnsiState.NONE
        if char == ESC:
            return AnsiState.STRING_ESC
        return AnsiState.OSC

    if state is AnsiState.STRING:
        return AnsiState.STRING_ESC if char == ESC else AnsiState.STRING

    # STRING_ESC: a backslash completes ST. Anything else means the ESC
    # started a new escape, never plain text.
    if char == "\\":
        return AnsiState.NONE
    return next_state(AnsiState.ESC, char)


def char_width(char: str) -> int:
    """Return the number of terminal cells occupied by ``char`` (0, 1 or 2)."""
    return cell_len(char)


def visible_width(text: str) -> int:
    """Return the on-screen width of ``text``, ignoring escape sequences."""
    width = 0
    state = AnsiState.NONE
    for char in text:
        prev = state
        state = next_state(state, char)
        if state is not AnsiState.NONE or prev is not AnsiState.NONE:
            continue
        width += char_width(char)
    return width


def truncate_to_width(text: str, max_width: int) -> str:
    """Truncate ``text`` to at most ``max_width`` visible cells.

    Escape sequences are copied verbatim and cost nothing. A wide character
    that would only partially fit is replaced by one blank cell. When the cut
    drops part of a styled string, a reset sequence is appended so the
    styling cannot leak into whatever follows. An escape left unterminated
    at the end of the input is dropped.

    Parameters
    ----------
    text : str
        Possibly styled text
    max_width : int
        Maximum visible width of the result

    Returns
    -------
    str
        Truncated text whose visible width never exceeds ``max_width``

    """
    out: list[str] = []
    width = 0
    state = AnsiState.NONE
    escape_start = -1
    saw_escape = False
    truncated = False

    for char in text:
        prev = state
        state = next_state(state, char)

        if state is not AnsiState.NONE:
            if prev is AnsiState.NONE:
                escape_start = len(out)
            out.append(char)
            saw_escape = True
            continue
        if prev is not AnsiState.NONE:
            out.append(char)
            escape_start = -1
            continue

        char_cells = char_width(char)
        if width + char_cells > max_width:
            if width < max_width:
                out.append(" ")
            truncated = True
            break
        out.append(char)
        width += char_cells

    if state is not AnsiState.NONE and escape_start >= 0:
        del out[escape_start:]

    if truncated and saw_escape:
        out.append(ANSI_RESET)

    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces up to ``width`` visible cells."""
    missing = width - visible_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


def center(text: str, width: int) -> str:
    """Center ``text`` within ``width`` cells by prepending spaces."""
    text_width = visible_width(text)
    if text_width >= width:
        return text
    return " " * ((width - text_width) // 2) + text
