"""Build a token stream from tokenizer callbacks."""

from __future__ import annotations

from collections.abc import Sequence

from ansi_to_image.codec.sgr import attrs_from_sgr_parameters
from ansi_to_image.core.attr import Attr, Foreground
from ansi_to_image.core.color import NamedColor, Rgb
from ansi_to_image.core.palette import Palette
from ansi_to_image.stream.tokens import Character, ColorChange, Token, TokenStream


class TokenStreamBuilder:
    """
    Stateful consumer of tokenizer events.

    Printable characters become Character tokens; SGR sequences are
    decoded and foreground changes resolved against the palette into
    ColorChange tokens. Background and style attributes are decoded but
    produce no tokens. Every other event is ignored.

    One builder handles exactly one input stream.
    """

    def __init__(self, palette: Palette | None = None):
        self.palette = palette if palette is not None else Palette.default()
        self.default_foreground: Rgb = self.palette[NamedColor.FOREGROUND]
        self._output: list[Token] = [ColorChange(self.default_foreground)]
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("Token stream already finished")

    def on_character(self, char: str) -> None:
        """A printable character was read."""
        self._check_open()
        self._output.append(Character(char))

    def on_csi_final(
        self,
        params: Sequence[int],
        final_byte: str,
        intermediates: str = "",
    ) -> None:
        """A complete CSI sequence was read; only SGR (``m``) is handled."""
        self._check_open()
        if final_byte != "m" or intermediates:
            # Not a color CSI
            return

        # ESC[m is ESC[0m
        if not params:
            params = [0]

        for attr in attrs_from_sgr_parameters(params):
            if isinstance(attr, Foreground):
                self._output.append(ColorChange(self.palette.resolve(attr.color)))
            elif attr is Attr.RESET:
                self._output.append(ColorChange(self.default_foreground))

    def on_execute(self, byte: int) -> None:
        """C0 control byte."""
        self._check_open()

    def on_esc_dispatch(self, intermediates: str, final_byte: str) -> None:
        """Escape sequence other than CSI/OSC."""
        self._check_open()

    def on_osc_dispatch(self, params: Sequence[str], bell_terminated: bool) -> None:
        """Operating system command."""
        self._check_open()

    def on_hook(self, params: Sequence[int], intermediates: str, final_byte: str) -> None:
        """Start of a device control string."""
        self._check_open()

    def on_put(self, char: str) -> None:
        """Device control string payload."""
        self._check_open()

    def on_unhook(self) -> None:
        """End of a device control string."""
        self._check_open()

    @property
    def chars_count(self) -> int:
        return sum(1 for token in self._output if isinstance(token, Character))

    def finish(self) -> TokenStream:
        """Return the completed stream. May only be called once."""
        self._check_open()
        self._finished = True
        return TokenStream(tuple(self._output))
