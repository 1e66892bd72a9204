#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/config.py
"""Configuration file discovery and loading.

Options can come from four places, highest priority first:

1. command line flags;
2. ``TEXTDELTA_*`` environment variables;
3. a configuration file (``--config`` or auto-discovered);
4. the defaults of :class:`~textdelta.options.DiffOptions`.

Configuration files are searched from the current directory up to the
filesystem root, then in the home directory:

- ``.textdelta.toml``
- ``.textdelta.yaml`` / ``.textdelta.yml``
- ``.textdelta.json``
- ``pyproject.toml`` with a ``[tool.textdelta]`` table (not in home)

Example ``.textdelta.toml``::

    context_lines = 5
    layout = "prefer-side-by-side"
    color = "auto"

"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from textdelta.constants import (
    COLOR_MODES,
    CONFIG_FILENAMES,
    ENV_COLOR,
    ENV_CONTEXT,
    ENV_LAYOUT,
    ENV_WIDTH,
    PYPROJECT_SECTION,
)
from textdelta.exceptions import ConfigError, ValidationError
from textdelta.options import DiffOptions

logger = logging.getLogger(__name__)

OPTION_KEYS = ("context_lines", "layout", "color", "width")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.textdelta]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    section = data.get("tool", {}).get(PYPROJECT_SECTION)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            config_path=str(pyproject_path),
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search, defaults to the current directory

    Returns
    -------
    Path or None
        First configuration file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                # unparseable pyproject.toml files are skipped
                logger.debug("Ignoring %s during config discovery: %s", pyproject_path, e.message)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Parent directories of ``start_dir`` are searched first, then the user's
    home directory.
    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Raw configuration mapping

    Raises
    ------
    ConfigError
        If the file does not exist, cannot be parsed, or has an unsupported
        format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext or filename}. Use .toml, .yaml, .yml or .json",
                config_path=str(config_path),
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Invalid config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def load_config_with_priority(explicit_path: Optional[str] = None, discover: bool = True) -> Dict[str, Any]:
    """Load the configuration file that applies to this run.

    Parameters
    ----------
    explicit_path : str, optional
        Path given with ``--config``; always wins when set
    discover : bool, default True
        Search the standard locations when no explicit path is given

    Returns
    -------
    dict
        Raw configuration mapping, empty when no file applies

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if discover:
        discovered = discover_config_file()
        if discovered:
            return load_config_file(discovered)

    return {}


def parse_color_mode(value: Any) -> Optional[bool]:
    """Convert ``auto``/``always``/``never`` (or a bool) to a color override.

    Raises
    ------
    ValidationError
        If ``value`` is not a recognized color mode

    """
    if value is None or isinstance(value, bool):
        return value
    mode = str(value).strip().lower()
    if mode == "auto":
        return None
    if mode == "always":
        return True
    if mode == "never":
        return False
    raise ValidationError(
        f"color must be one of {', '.join(COLOR_MODES)}, got {value!r}",
        parameter_name="color",
        parameter_value=value,
    )


def options_from_mapping(data: Mapping[str, Any], base: Optional[DiffOptions] = None) -> DiffOptions:
    """Build :class:`DiffOptions` from a loaded configuration mapping.

    Keys may use dashes or underscores (``context-lines`` or
    ``context_lines``).

    Parameters
    ----------
    data : mapping
        Raw configuration, e.g. from :func:`load_config_file`
    base : DiffOptions, optional
        Options to update; defaults to ``DiffOptions()``

    Returns
    -------
    DiffOptions
        Options with the configured values applied

    Raises
    ------
    ConfigError
        If the mapping contains unknown keys or invalid values

    """
    updates: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).replace("-", "_")
        if key not in OPTION_KEYS:
            raise ConfigError(f"Unknown configuration key: {raw_key!r} (expected one of {', '.join(OPTION_KEYS)})")
        updates[key] = value

    try:
        if "color" in updates:
            updates["color"] = parse_color_mode(updates["color"])
        return (base or DiffOptions()).create_updated(**updates)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration value: {e.message}", original_error=e) from e


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(
            f"{name} must be an integer, got {raw!r}", parameter_name=name, parameter_value=raw, original_error=e
        ) from e


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect option overrides from ``TEXTDELTA_*`` environment variables.

    Returns
    -------
    dict
        Field values keyed by :class:`DiffOptions` field name; unset
        variables are omitted

    Raises
    ------
    ValidationError
        If a variable holds a value of the wrong type

    """
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    context = _env_int(env, ENV_CONTEXT)
    if context is not None:
        overrides["context_lines"] = context

    layout = env.get(ENV_LAYOUT, "").strip()
    if layout:
        overrides["layout"] = layout

    width = _env_int(env, ENV_WIDTH)
    if width is not None:
        overrides["width"] = width

    color = env.get(ENV_COLOR, "").strip()
    if color:
        overrides["color"] = parse_color_mode(color)

    return overrides
