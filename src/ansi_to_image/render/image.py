"""Rasterize a token stream onto an image with a monospace font."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ansi_to_image.core.color import NamedColor, Rgb
from ansi_to_image.core.palette import Palette
from ansi_to_image.stream.tokens import Character, ColorChange, TokenStream

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 32
DEFAULT_PADDING = 10


class ImageRenderer:
    """
    Render a TokenStream to a single-line RGBA image.

    Every character occupies one cell whose width is the advance of
    ``m`` in the chosen font, so a monospace font is expected. The
    canvas is sized from the stream's character count before drawing.
    """

    def __init__(
        self,
        font: str | Path | None = None,
        font_size: int = DEFAULT_FONT_SIZE,
        padding: int = DEFAULT_PADDING,
        background: Rgb = Rgb(0, 0, 0),
        foreground: Rgb | None = None,
    ):
        self.font_size = font_size
        self.padding = padding
        self.background = background
        self.foreground = foreground or Palette.default()[NamedColor.FOREGROUND]

        if font is None:
            self.font = ImageFont.load_default(size=font_size)
        else:
            self.font = ImageFont.truetype(str(font), size=font_size)

    @property
    def cell_width(self) -> int:
        """Horizontal advance of one character cell."""
        return max(1, round(self.font.getlength("m")))

    @property
    def line_height(self) -> int:
        if isinstance(self.font, ImageFont.FreeTypeFont):
            ascent, descent = self.font.getmetrics()
            return ascent + descent
        _, top, _, bottom = self.font.getbbox("Mg")
        return bottom - top

    def canvas_size(self, stream: TokenStream) -> tuple[int, int]:
        """Image size needed for ``stream``."""
        width = self.cell_width * stream.chars_count + 2 * self.padding
        height = self.line_height + self.padding
        return width, height

    def render(self, stream: TokenStream) -> Image.Image:
        """Draw the stream and return the image."""
        width, height = self.canvas_size(stream)
        logger.debug("Rendering %d characters onto %dx%d canvas", stream.chars_count, width, height)

        image = Image.new("RGBA", (width, height), self.background.rgb + (255,))
        draw = ImageDraw.Draw(image)

        color = self.foreground
        x = self.padding
        y = self.padding // 2
        cell_width = self.cell_width

        for token in stream:
            if isinstance(token, ColorChange):
                color = token.color
            elif isinstance(token, Character):
                draw.text((x, y), token.char, font=self.font, fill=color.rgb + (255,))
                x += cell_width

        return image

    def save(self, stream: TokenStream, path: str | Path) -> Path:
        """Render and write the image; the format follows the file suffix."""
        path = Path(path)
        image = self.render(stream)
        if path.suffix.lower() in (".jpg", ".jpeg"):
            image = image.convert("RGB")
        image.save(path)
        return path
