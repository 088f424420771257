"""Terminal character attributes decoded from SGR parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ansi_to_image.core.color import Color


class Attr(Enum):
    """Attributes that carry no color."""
    RESET = "reset"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK_SLOW = "blink_slow"
    BLINK_FAST = "blink_fast"
    REVERSE = "reverse"
    HIDDEN = "hidden"
    STRIKE = "strike"
    CANCEL_BOLD = "cancel_bold"
    CANCEL_BOLD_DIM = "cancel_bold_dim"
    CANCEL_ITALIC = "cancel_italic"
    CANCEL_UNDERLINE = "cancel_underline"
    CANCEL_BLINK = "cancel_blink"
    CANCEL_REVERSE = "cancel_reverse"
    CANCEL_HIDDEN = "cancel_hidden"
    CANCEL_STRIKE = "cancel_strike"


@dataclass(frozen=True)
class Foreground:
    """Set the foreground color."""
    color: Color


@dataclass(frozen=True)
class Background:
    """Set the background color."""
    color: Color


Attribute = Union[Attr, Foreground, Background]
