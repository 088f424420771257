"""Shared constants for SGR decoding and palette construction."""

# Palette layout
PALETTE_SIZE = 269
CUBE_START = 16
GRAY_START = 232
GRAY_END = 256

# Factor for automatic computation of dim colors
DIM_FACTOR = 0.66

# Names of the eight ANSI colors, in SGR order (30-37 / 40-47)
ANSI_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

# Reference scheme used when no configuration is supplied
DEFAULT_FOREGROUND = "#c5c8c6"
DEFAULT_BACKGROUND = "#1d1f21"

DEFAULT_NORMAL = {
    "black": "#1d1f21",
    "red": "#cc6666",
    "green": "#b5bd68",
    "yellow": "#f0c674",
    "blue": "#81a2be",
    "magenta": "#b294bb",
    "cyan": "#8abeb7",
    "white": "#c5c8c6",
}

DEFAULT_BRIGHT = {
    "black": "#666666",
    "red": "#d54e53",
    "green": "#b9ca4a",
    "yellow": "#e7c547",
    "blue": "#7aa6da",
    "magenta": "#c397d8",
    "cyan": "#70c0b1",
    "white": "#eaeaea",
}
