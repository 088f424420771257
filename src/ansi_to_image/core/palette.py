"""Color configuration and the resolved 269-entry palette."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ansi_to_image.core.color import (
    BRIGHT_COLORS,
    DIM_COLORS,
    NORMAL_COLORS,
    Color,
    ColorMode,
    NamedColor,
    Rgb,
    dim,
    named_slot,
    parse_color,
)
from ansi_to_image.core.constants import (
    ANSI_COLOR_NAMES,
    CUBE_START,
    DEFAULT_BACKGROUND,
    DEFAULT_BRIGHT,
    DEFAULT_FOREGROUND,
    DEFAULT_NORMAL,
    GRAY_END,
    GRAY_START,
    PALETTE_SIZE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnsiColors:
    """The eight-color section of a configuration."""
    black: Rgb
    red: Rgb
    green: Rgb
    yellow: Rgb
    blue: Rgb
    magenta: Rgb
    cyan: Rgb
    white: Rgb

    def __iter__(self) -> Iterator[Rgb]:
        """Iterate colors in SGR order (black .. white)."""
        return (getattr(self, name) for name in ANSI_COLOR_NAMES)

    @classmethod
    def from_hex(cls, colors: Mapping[str, str]) -> AnsiColors:
        return cls(**{name: parse_color(colors[name]) for name in ANSI_COLOR_NAMES})


def _default_normal() -> AnsiColors:
    return AnsiColors.from_hex(DEFAULT_NORMAL)


def _default_bright() -> AnsiColors:
    return AnsiColors.from_hex(DEFAULT_BRIGHT)


@dataclass(frozen=True)
class PrimaryColors:
    """Default foreground/background with optional bright and dim foregrounds."""
    foreground: Rgb = field(default_factory=lambda: parse_color(DEFAULT_FOREGROUND))
    background: Rgb = field(default_factory=lambda: parse_color(DEFAULT_BACKGROUND))
    bright_foreground: Rgb | None = None
    dim_foreground: Rgb | None = None


@dataclass(frozen=True)
class IndexedColor:
    """Override for a single palette slot."""
    index: int
    color: Rgb


@dataclass(frozen=True)
class ColorConfig:
    """
    User-facing palette seed.

    All fields default to the reference scheme, so ``ColorConfig()``
    yields the compiled-in palette.
    """
    primary: PrimaryColors = field(default_factory=PrimaryColors)
    normal: AnsiColors = field(default_factory=_default_normal)
    bright: AnsiColors = field(default_factory=_default_bright)
    dim: AnsiColors | None = None
    indexed_colors: tuple[IndexedColor, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColorConfig:
        """Build a configuration from a JSON-style mapping of hex strings."""
        from ansi_to_image.config import config_from_dict
        return config_from_dict(data)

    @classmethod
    def load(cls, path: str | Path) -> ColorConfig:
        """Load a configuration from a JSON file."""
        from ansi_to_image.config import load_color_config
        return load_color_config(path)


class Palette:
    """
    Resolved list of 269 colors.

    The first 16 entries are the standard ANSI colors. Entries 16..232
    are the 6x6x6 color cube and 232..256 the grayscale ramp. Entry 256
    is the foreground, 257 the background and 258 the cursor color.
    Entries 259..266 are the dim colors, 267 the bright foreground and
    268 the dim foreground.

    Index with a NamedColor or an int in 0..268.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: tuple[Rgb, ...]):
        if len(colors) != PALETTE_SIZE:
            raise ValueError(f"Palette needs {PALETTE_SIZE} colors, got {len(colors)}")
        self._colors = tuple(colors)

    @classmethod
    def from_config(cls, config: ColorConfig) -> Palette:
        return build_palette(config)

    @classmethod
    def default(cls) -> Palette:
        """Palette for the compiled-in reference scheme."""
        return build_palette(ColorConfig())

    def __getitem__(self, key: NamedColor | int) -> Rgb:
        if isinstance(key, NamedColor):
            return self._colors[named_slot(key)]
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"Palette indices must be NamedColor or int, not {type(key).__name__}")
        if not 0 <= key < PALETTE_SIZE:
            raise IndexError(f"Palette index {key} out of range 0-{PALETTE_SIZE - 1}")
        return self._colors[key]

    def __len__(self) -> int:
        return PALETTE_SIZE

    def __iter__(self) -> Iterator[Rgb]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return "Palette[..]"

    def resolve(self, color: Color) -> Rgb:
        """Resolve an SGR color to RGB; true colors pass straight through."""
        value = color.value
        if color.mode == ColorMode.SPEC:
            if not isinstance(value, Rgb):
                raise TypeError(f"True color needs an Rgb value, not {type(value).__name__}")
            return value
        if isinstance(value, Rgb):
            raise TypeError(f"{color.mode.name} color cannot hold an Rgb value")
        return self[value]


def _find_override(config: ColorConfig, index: int) -> Rgb | None:
    for indexed in config.indexed_colors:
        if indexed.index == index:
            return indexed.color
    return None


def _fill_named(colors: list[Rgb], config: ColorConfig) -> None:
    primary = config.primary

    for name, color in zip(NORMAL_COLORS, config.normal):
        colors[named_slot(name)] = color
    for name, color in zip(BRIGHT_COLORS, config.bright):
        colors[named_slot(name)] = color

    colors[named_slot(NamedColor.FOREGROUND)] = primary.foreground
    colors[named_slot(NamedColor.BACKGROUND)] = primary.background
    # Placeholder for custom cursor colors
    colors[named_slot(NamedColor.CURSOR)] = Rgb(0, 0, 0)

    if config.dim is not None:
        logger.debug("Using config-provided dim colors")
        dims = list(config.dim)
    else:
        logger.debug("Deriving dim colors from normal colors")
        dims = [dim(color) for color in config.normal]
    for name, color in zip(DIM_COLORS, dims):
        colors[named_slot(name)] = color

    colors[named_slot(NamedColor.BRIGHT_FOREGROUND)] = (
        primary.bright_foreground
        if primary.bright_foreground is not None
        else primary.foreground
    )
    colors[named_slot(NamedColor.DIM_FOREGROUND)] = (
        primary.dim_foreground
        if primary.dim_foreground is not None
        else dim(primary.foreground)
    )


def _fill_cube(colors: list[Rgb], config: ColorConfig) -> None:
    index = CUBE_START
    for r in range(6):
        for g in range(6):
            for b in range(6):
                override = _find_override(config, index)
                if override is not None:
                    colors[index] = override
                else:
                    colors[index] = Rgb(
                        r=0 if r == 0 else r * 40 + 55,
                        g=0 if g == 0 else g * 40 + 55,
                        b=0 if b == 0 else b * 40 + 55,
                    )
                index += 1


def _fill_gray_ramp(colors: list[Rgb], config: ColorConfig) -> None:
    for i in range(GRAY_END - GRAY_START):
        index = GRAY_START + i
        override = _find_override(config, index)
        if override is not None:
            colors[index] = override
            continue
        value = i * 10 + 8
        colors[index] = Rgb(value, value, value)


def build_palette(config: ColorConfig) -> Palette:
    """
    Resolve a configuration into a 269-entry palette.

    Pure and deterministic: equal configurations give equal palettes.
    Overrides are matched by a linear scan; the first match wins.
    """
    colors = [Rgb(0, 0, 0)] * PALETTE_SIZE

    _fill_named(colors, config)
    _fill_cube(colors, config)
    _fill_gray_ramp(colors, config)

    return Palette(tuple(colors))
