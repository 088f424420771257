"""Token types emitted for the renderer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from ansi_to_image.core.color import Rgb


@dataclass(frozen=True, slots=True)
class ColorChange:
    """Switch the drawing color for all following characters."""
    color: Rgb


@dataclass(frozen=True, slots=True)
class Character:
    """A single printable character."""
    char: str


Token = Union[ColorChange, Character]


@dataclass(frozen=True)
class TokenStream:
    """
    Completed, ordered sequence of tokens.

    Insertion order is rendering order (left to right). A ColorChange
    applies to every following Character until the next ColorChange.
    """
    tokens: tuple[Token, ...] = ()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    @property
    def chars_count(self) -> int:
        """Number of Character tokens; sizes the render canvas."""
        return sum(1 for token in self.tokens if isinstance(token, Character))

    @property
    def text(self) -> str:
        """The printable characters with all colors stripped."""
        return "".join(token.char for token in self.tokens if isinstance(token, Character))
