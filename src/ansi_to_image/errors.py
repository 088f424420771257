"""Exception types raised by ansi-to-image."""


class AnsiToImageError(Exception):
    """Base class for all package errors."""


class ColorParseError(AnsiToImageError, ValueError):
    """A color literal is not of the form ``#RRGGBB`` or ``0xRRGGBB``."""


class ConfigError(AnsiToImageError, ValueError):
    """A color configuration has the wrong shape or out-of-range values."""
