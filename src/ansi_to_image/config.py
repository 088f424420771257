"""Load color configurations from JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ansi_to_image.core.color import Rgb, dim as dim_color, parse_color
from ansi_to_image.core.constants import (
    ANSI_COLOR_NAMES,
    CUBE_START,
    GRAY_END,
    PALETTE_SIZE,
)
from ansi_to_image.core.palette import AnsiColors, ColorConfig, IndexedColor, PrimaryColors
from ansi_to_image.errors import ColorParseError, ConfigError

logger = logging.getLogger(__name__)

SECTIONS = ("primary", "normal", "bright", "dim", "indexed_colors")
PRIMARY_KEYS = ("foreground", "background", "bright_foreground", "dim_foreground")


def _color(value: Any, where: str) -> Rgb:
    try:
        return parse_color(value)
    except ColorParseError as e:
        raise ColorParseError(f"{where}: {e}") from e


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{name}: expected an object, got {type(section).__name__}")
    return section


def _check_keys(section: Mapping[str, Any], allowed: tuple[str, ...], where: str) -> None:
    unknown = sorted(set(section) - set(allowed))
    if unknown:
        raise ConfigError(f"{where}: unknown keys {', '.join(unknown)}")


def _ansi_colors(section: Mapping[str, Any], fallback: AnsiColors, where: str) -> AnsiColors:
    _check_keys(section, ANSI_COLOR_NAMES, where)
    return AnsiColors(**{
        name: _color(section[name], f"{where}.{name}") if name in section else getattr(fallback, name)
        for name in ANSI_COLOR_NAMES
    })


def _primary(section: Mapping[str, Any]) -> PrimaryColors:
    _check_keys(section, PRIMARY_KEYS, "primary")
    defaults = PrimaryColors()
    values: dict[str, Rgb | None] = {}
    for key in PRIMARY_KEYS:
        if section.get(key) is not None:
            values[key] = _color(section[key], f"primary.{key}")
        else:
            values[key] = getattr(defaults, key)
    return PrimaryColors(**values)


def _indexed_colors(entries: Any) -> tuple[IndexedColor, ...]:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise ConfigError(f"indexed_colors: expected a list, got {type(entries).__name__}")

    result: list[IndexedColor] = []
    seen: set[int] = set()
    for n, entry in enumerate(entries):
        where = f"indexed_colors[{n}]"
        if not isinstance(entry, Mapping) or "index" not in entry or "color" not in entry:
            raise ConfigError(f"{where}: expected an object with 'index' and 'color'")

        index = entry["index"]
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < PALETTE_SIZE:
            raise ConfigError(f"{where}: index must be an integer 0-{PALETTE_SIZE - 1}, got {index!r}")
        if not CUBE_START <= index < GRAY_END:
            logger.warning("%s: index %d is outside 16-255 and has no effect", where, index)
        if index in seen:
            logger.warning("%s: duplicate index %d; the first entry wins", where, index)
        seen.add(index)

        result.append(IndexedColor(index=index, color=_color(entry["color"], f"{where}.color")))
    return tuple(result)


def config_from_dict(data: Mapping[str, Any]) -> ColorConfig:
    """
    Build a ColorConfig from a mapping of hex color strings.

    Every section is optional; missing colors fall back to the
    compiled-in defaults.

    Raises:
        ColorParseError: a color value is not ``#RRGGBB`` / ``0xRRGGBB``.
        ConfigError: the mapping has the wrong structure.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected an object, got {type(data).__name__}")
    _check_keys(data, SECTIONS, "config")

    defaults = ColorConfig()
    normal = _ansi_colors(_section(data, "normal"), defaults.normal, "normal")

    dim = None
    if data.get("dim") is not None:
        # Colors missing from a partial dim section are derived from normal
        derived = AnsiColors(*(dim_color(color) for color in normal))
        dim = _ansi_colors(_section(data, "dim"), derived, "dim")

    return ColorConfig(
        primary=_primary(_section(data, "primary")),
        normal=normal,
        bright=_ansi_colors(_section(data, "bright"), defaults.bright, "bright"),
        dim=dim,
        indexed_colors=_indexed_colors(data.get("indexed_colors")),
    )


def load_color_config(path: str | Path) -> ColorConfig:
    """Load a ColorConfig from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: not valid UTF-8: {e}") from e
    return config_from_dict(data)
