"""Shared fixtures for ansi-to-image tests."""

import pytest

from ansi_to_image.core.color import NamedColor, Rgb
from ansi_to_image.core.palette import ColorConfig, Palette, build_palette
from ansi_to_image.stream.builder import TokenStreamBuilder


@pytest.fixture(scope="session")
def palette() -> Palette:
    """Palette for the compiled-in reference scheme."""
    return build_palette(ColorConfig())


@pytest.fixture(scope="session")
def default_fg(palette: Palette) -> Rgb:
    return palette[NamedColor.FOREGROUND]


@pytest.fixture
def builder(palette: Palette) -> TokenStreamBuilder:
    """Fresh builder for a single input stream."""
    return TokenStreamBuilder(palette)
