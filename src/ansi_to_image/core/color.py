"""Color representation: RGB values, named palette slots and SGR colors."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from ansi_to_image.core.constants import DIM_FACTOR
from ansi_to_image.errors import ColorParseError

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True, slots=True)
class Rgb:
    """A 24-bit color with three 8-bit channels."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})")

    def __mul__(self, factor: float) -> Rgb:
        return Rgb(
            r=_scale(self.r, factor),
            g=_scale(self.g, factor),
            b=_scale(self.b, factor),
        )

    __rmul__ = __mul__

    def __str__(self) -> str:
        return self.hex

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb`` form."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_str(cls, text: str) -> Rgb:
        """Parse ``#RRGGBB`` or ``0xRRGGBB``."""
        return parse_color(text)


def _scale(channel: int, factor: float) -> int:
    return int(max(0.0, min(255.0, channel * factor)))


def parse_color(text: str) -> Rgb:
    """
    Parse a hex color literal.

    Accepts exactly ``#RRGGBB`` (7 characters) or ``0xRRGGBB``
    (8 characters). Hex digits are case-insensitive.

    Raises:
        ColorParseError: for any other form.
    """
    if not isinstance(text, str):
        raise ColorParseError(f"Cannot parse color: {text!r}")

    if text.startswith("0x") and len(text) == 8:
        digits = text[2:]
    elif text.startswith("#") and len(text) == 7:
        digits = text[1:]
    else:
        raise ColorParseError(f"Cannot parse color: {text!r}")

    # int(..., 16) tolerates signs, underscores and whitespace
    if not _HEX_DIGITS.issuperset(digits):
        raise ColorParseError(f"Cannot parse color: {text!r}")

    value = int(digits, 16)
    return Rgb(
        r=(value >> 16) & 0xFF,
        g=(value >> 8) & 0xFF,
        b=value & 0xFF,
    )


def dim(color: Rgb, factor: float = DIM_FACTOR) -> Rgb:
    """Scale every channel of ``color`` by ``factor``, clamped to 0-255."""
    return color * factor


class NamedColor(Enum):
    """
    Symbolic palette slots.

    Values are the fixed palette ordinals. Ordinals 16-255 are not named;
    they belong to the indexed color cube and grayscale ramp.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15
    FOREGROUND = 256
    BACKGROUND = 257
    CURSOR = 258
    DIM_BLACK = 259
    DIM_RED = 260
    DIM_GREEN = 261
    DIM_YELLOW = 262
    DIM_BLUE = 263
    DIM_MAGENTA = 264
    DIM_CYAN = 265
    DIM_WHITE = 266
    BRIGHT_FOREGROUND = 267
    DIM_FOREGROUND = 268


def named_slot(color: NamedColor) -> int:
    """Return the palette index of a named color."""
    return color.value


# The eight standard colors, and their bright and dim counterparts, in SGR order
NORMAL_COLORS: tuple[NamedColor, ...] = tuple(NamedColor(i) for i in range(8))
BRIGHT_COLORS: tuple[NamedColor, ...] = tuple(NamedColor(i) for i in range(8, 16))
DIM_COLORS: tuple[NamedColor, ...] = tuple(NamedColor(i) for i in range(259, 267))


class ColorMode(Enum):
    """How a color refers to its RGB value."""
    NAMED = "named"        # Symbolic palette slot (SGR 30-37, 39, 90-97, ...)
    INDEXED = "indexed"    # 256-color index (SGR 38;5;n, 48;5;n)
    SPEC = "rgb"           # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A color as it appears in an SGR sequence.

    Exactly one form is active: a named palette slot, a 256-color index,
    or a literal RGB value.
    """
    mode: ColorMode
    value: NamedColor | int | Rgb

    @classmethod
    def named(cls, name: NamedColor) -> Color:
        """Create a Color referring to a named palette slot."""
        return cls(ColorMode.NAMED, name)

    @classmethod
    def indexed(cls, index: int) -> Color:
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.INDEXED, index)

    @classmethod
    def spec(cls, r: int, g: int, b: int) -> Color:
        """Create a true color from RGB values."""
        return cls(ColorMode.SPEC, Rgb(r, g, b))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> Color:
        return cls(ColorMode.SPEC, rgb)
