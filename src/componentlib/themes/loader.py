"""
Theme override files.

Reads theme overrides from disk:

- TOML: the ``[theme]`` table of a project manifest
- YAML: the whole document, or its ``theme:`` mapping when that is the
  only top-level key

Missing files yield no overrides.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from componentlib.core.errors import ThemeLoadError
from componentlib.models.theme import ThemeConfig

from .resolver import create_theme

logger = logging.getLogger(__name__)

THEME_TABLE = "theme"
_YAML_SUFFIXES = (".yaml", ".yml")


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ThemeLoadError(f"Invalid TOML: {exc}", path=str(path)) from exc
    return data.get(THEME_TABLE, {})


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ThemeLoadError(f"Invalid YAML: {exc}", path=str(path)) from exc
    if data is None:
        return {}
    if isinstance(data, dict) and list(data) == [THEME_TABLE]:
        return data[THEME_TABLE]
    return data


def load_theme_overrides(path: Path | str) -> dict[str, Any]:
    """
    Load theme overrides from a TOML or YAML file.

    Args:
        path: Path to a .toml, .yaml or .yml file

    Returns:
        Override mapping for ``create_theme``, empty if the file is missing

    Raises:
        ThemeLoadError: If the file cannot be read or does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No theme override file at %s", path)
        return {}

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = _read_toml(path)
        elif suffix in _YAML_SUFFIXES:
            data = _read_yaml(path)
        else:
            raise ThemeLoadError(f"Unsupported override file type {suffix!r}", path=str(path))
    except OSError as exc:
        raise ThemeLoadError(f"Cannot read file: {exc}", path=str(path)) from exc

    if not isinstance(data, dict):
        raise ThemeLoadError(
            f"Theme overrides must be a mapping, got {type(data).__name__}", path=str(path)
        )

    logger.debug("Loaded theme overrides from %s: %s", path, sorted(data))
    return data


def create_theme_from_file(path: Path | str) -> ThemeConfig:
    """Create a theme from the overrides stored in a file."""
    return create_theme(load_theme_overrides(path))
