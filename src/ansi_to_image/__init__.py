"""
ansi-to-image: render terminal color output as an image

Decodes SGR (Select Graphic Rendition) sequences against a configurable
269-color terminal palette and turns text into a stream of color-change
and character tokens, which can be rasterized with a monospace font.

Quick Start:
    >>> import ansi_to_image as ati
    >>> stream = ati.load_text("\\x1b[31mA\\x1b[0mB")
    >>> stream.chars_count
    2
    >>> ati.ImageRenderer().save(stream, "out.png")

Features:
    - Full SGR attribute decoding, including 256-color and true color
    - Palette with color cube, grayscale ramp and derived dim colors
    - JSON color configuration with per-index overrides
    - PNG rendering through Pillow
"""

__version__ = "0.1.0"

# Core types
from ansi_to_image.core.attr import Attr, Background, Foreground
from ansi_to_image.core.color import Color, ColorMode, NamedColor, Rgb, dim, parse_color
from ansi_to_image.core.palette import ColorConfig, Palette, build_palette

# Decoding
from ansi_to_image.codec.ansi_parser import AnsiParser
from ansi_to_image.codec.sgr import attrs_from_sgr_parameters
from ansi_to_image.stream.builder import TokenStreamBuilder
from ansi_to_image.stream.tokens import Character, ColorChange, TokenStream

# Convenience functions
from ansi_to_image.config import load_color_config
from ansi_to_image.io.reader import load, load_bytes, load_stream, load_text
from ansi_to_image.errors import AnsiToImageError, ColorParseError, ConfigError

# Rendering
from ansi_to_image.render.image import ImageRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "Attr",
    "Background",
    "Foreground",
    "Color",
    "ColorMode",
    "NamedColor",
    "Rgb",
    "dim",
    "parse_color",
    "ColorConfig",
    "Palette",
    "build_palette",
    # Decoding
    "AnsiParser",
    "attrs_from_sgr_parameters",
    "TokenStreamBuilder",
    "Character",
    "ColorChange",
    "TokenStream",
    # I/O
    "load_color_config",
    "load",
    "load_bytes",
    "load_stream",
    "load_text",
    # Errors
    "AnsiToImageError",
    "ColorParseError",
    "ConfigError",
    # Rendering
    "ImageRenderer",
]
