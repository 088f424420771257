"""Renderers for token streams."""

from ansi_to_image.render.image import ImageRenderer

__all__ = ["ImageRenderer"]
