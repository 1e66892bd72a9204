#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for textdelta.

This module centralizes the thresholds, markers and defaults shared by the
diff pipeline, the renderers and the command line interface.

Constants are organized by category:
1. Type Definitions - Literal types for layouts and color modes
2. Pipeline Tuning - context, pairing and alignment limits
3. Rendering Markers - text emitted around diff content
4. Configuration - file names and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LayoutMode = Literal["inline", "side-by-side", "prefer-side-by-side"]
ColorMode = Literal["auto", "always", "never"]

LAYOUT_MODES: tuple[str, ...] = ("inline", "side-by-side", "prefer-side-by-side")
COLOR_MODES: tuple[str, ...] = ("auto", "always", "never")

# =============================================================================
# Pipeline Tuning
# =============================================================================

DEFAULT_CONTEXT_LINES = 3
MIN_CONTEXT_LINES = 0
MAX_CONTEXT_LINES = 100_000

# Lines whose alignment distance is at or above this value are treated as
# unrelated: shown as plain removed/added lines without word emphasis.
DISTANCE_THRESHOLD = 0.6

# Per-line token ceiling for alignment; the cost table is O(n*m).
MAX_ALIGN_TOKENS = 500

DEFAULT_LAYOUT: LayoutMode = "inline"
DEFAULT_WIDTH = 0

# =============================================================================
# Rendering Markers
# =============================================================================

GUTTER_BAR = "│"
PANEL_SEPARATOR = " │ "
PANEL_SEPARATOR_WIDTH = 3
MIN_PANEL_WIDTH = 10
TRUNCATION_MARKER = "…"
EMPTY_PANEL_MARKER = "~"

REMOVED_PREFIX = "- "
ADDED_PREFIX = "+ "
CONTEXT_PREFIX = "  "

ANSI_RESET = "\x1b[0m"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".textdelta.toml", ".textdelta.yaml", ".textdelta.yml", ".textdelta.json"]
PYPROJECT_SECTION = "textdelta"

ENV_PREFIX = "TEXTDELTA_"
ENV_CONTEXT = "TEXTDELTA_CONTEXT"
ENV_LAYOUT = "TEXTDELTA_LAYOUT"
ENV_WIDTH = "TEXTDELTA_WIDTH"
ENV_COLOR = "TEXTDELTA_COLOR"
ENV_LOG_LEVEL = "TEXTDELTA_LOG_LEVEL"

# =============================================================================
# Logging
# =============================================================================

PACKAGE_LOGGER = "textdelta"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
