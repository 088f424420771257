"""Color model, palette and attribute types."""

from ansi_to_image.core.attr import Attr, Attribute, Background, Foreground
from ansi_to_image.core.color import Color, ColorMode, NamedColor, Rgb, dim, parse_color
from ansi_to_image.core.palette import (
    AnsiColors,
    ColorConfig,
    IndexedColor,
    Palette,
    PrimaryColors,
    build_palette,
)

__all__ = [
    "Attr",
    "Attribute",
    "Background",
    "Foreground",
    "Color",
    "ColorMode",
    "NamedColor",
    "Rgb",
    "dim",
    "parse_color",
    "AnsiColors",
    "ColorConfig",
    "IndexedColor",
    "Palette",
    "PrimaryColors",
    "build_palette",
]
