"""Token stream construction."""

from ansi_to_image.stream.builder import TokenStreamBuilder
from ansi_to_image.stream.tokens import Character, ColorChange, Token, TokenStream

__all__ = ["TokenStreamBuilder", "Character", "ColorChange", "Token", "TokenStream"]
