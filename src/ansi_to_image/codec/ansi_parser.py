"""Escape sequence tokenizer that drives a performer with callbacks."""

from __future__ import annotations

import codecs
import logging
import re
from collections.abc import Sequence
from typing import Protocol

logger = logging.getLogger(__name__)

PARAM_MAX = 65535
PARAM_DIGITS = len(str(PARAM_MAX))


class Performer(Protocol):
    """Receiver of tokenizer events."""

    def on_character(self, char: str) -> None: ...

    def on_execute(self, byte: int) -> None: ...

    def on_csi_final(self, params: Sequence[int], final_byte: str, intermediates: str = "") -> None: ...

    def on_esc_dispatch(self, intermediates: str, final_byte: str) -> None: ...

    def on_osc_dispatch(self, params: Sequence[str], bell_terminated: bool) -> None: ...

    def on_hook(self, params: Sequence[int], intermediates: str, final_byte: str) -> None: ...

    def on_put(self, char: str) -> None: ...

    def on_unhook(self) -> None: ...


def _param_value(param: str) -> int:
    if not param.isdigit():
        return 0
    # Saturate before converting so huge digit runs stay cheap
    if len(param) > PARAM_DIGITS:
        return PARAM_MAX
    return min(int(param), PARAM_MAX)


def parse_params(params_str: str) -> list[int]:
    """
    Split a CSI parameter string into integers.

    Parameters are separated by ``;`` (``:`` sub-parameters are
    flattened); an empty parameter means 0. ``""`` gives ``[]``.
    Values saturate at 65535.
    """
    if not params_str:
        return []
    return [_param_value(p) for p in re.split(r'[;:]', params_str)]


class AnsiParser:
    """
    Stateful tokenizer for text containing ANSI escape sequences.

    Recognizes CSI, OSC, DCS and plain ESC sequences plus C0 controls,
    and reports each one to the performer. The meaning of sequences is
    left to the performer. Input may be fed in arbitrary chunks; a
    sequence split across chunks is completed by the next feed.
    """

    # Private-parameter markers (ESC[?25h etc.)
    PRIVATE_MARKERS = "<=>?"
    # DCS header after "ESC P": params intermediates final
    DCS_HEADER = re.compile(r'([0-?]*)([ -/]*)([@-~])')
    DCS_PARTIAL = re.compile(r'[0-?]*[ -/]*')

    def __init__(self, performer: Performer, encoding: str = "utf-8"):
        self.performer = performer
        self.encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending = ""

    def feed(self, data: bytes) -> None:
        """Process raw bytes in the parser's encoding."""
        self._process_text(self._decoder.decode(data))

    def feed_unicode(self, text: str) -> None:
        """Process already decoded text."""
        self._process_text(text)

    def close(self) -> None:
        """Flush buffered input. An unterminated sequence is dropped."""
        self._process_text(self._decoder.decode(b"", final=True))
        if self._pending:
            logger.debug("Dropping unterminated escape sequence %r", self._pending)
            self._pending = ""

    def _process_text(self, text: str) -> None:
        text = self._pending + text
        self._pending = ""

        i = 0
        while i < len(text):
            char = text[i]
            if char == '\x1b':
                end = self._handle_escape(text, i)
                if end is None:
                    # Incomplete sequence - wait for more input
                    self._pending = text[i:]
                    return
                i = end
                continue

            code = ord(char)
            if code < 0x20 or 0x7f <= code <= 0x9f:
                self.performer.on_execute(code)
            else:
                self.performer.on_character(char)
            i += 1

    def _handle_escape(self, text: str, i: int) -> int | None:
        """Dispatch the escape sequence at ``text[i]``; return the index after it."""
        if i + 1 >= len(text):
            return None

        introducer = text[i + 1]
        if introducer == '[':
            return self._handle_csi(text, i)
        if introducer == ']':
            return self._handle_osc(text, i)
        if introducer == 'P':
            return self._handle_dcs(text, i)

        end = i + 1
        while end < len(text) and ' ' <= text[end] <= '/':
            end += 1
        if end >= len(text):
            return None
        final = text[end]
        if '0' <= final <= '~':
            self.performer.on_esc_dispatch(text[i + 1:end], final)
            return end + 1
        # Malformed escape - drop ESC and intermediates, reprocess the rest
        return end

    def _handle_csi(self, text: str, i: int) -> int | None:
        params_str = ""
        intermediates = ""
        ignore = False
        # C0 controls inside a CSI are executed once the sequence is complete
        controls: list[int] = []

        j = i + 2
        while j < len(text):
            char = text[j]
            if '@' <= char <= '~':
                break
            if char == '\x1b':
                # ESC aborts the sequence and starts a new one
                logger.debug("Aborting CSI sequence %r", text[i:j])
                self._execute_all(controls)
                return j
            if char < ' ':
                controls.append(ord(char))
            elif '0' <= char <= '?':
                if intermediates:
                    # Parameter after an intermediate; ignore through the final byte
                    ignore = True
                else:
                    params_str += char
            elif char <= '/':
                intermediates += char
            j += 1
        else:
            return None

        self._execute_all(controls)
        if ignore:
            logger.debug("Ignoring malformed CSI sequence %r", text[i:j + 1])
            return j + 1

        if params_str and params_str[0] in self.PRIVATE_MARKERS:
            intermediates = params_str[0] + intermediates
            params_str = params_str[1:]

        self.performer.on_csi_final(parse_params(params_str), text[j], intermediates)
        return j + 1

    def _execute_all(self, controls: list[int]) -> None:
        for code in controls:
            self.performer.on_execute(code)

    def _handle_osc(self, text: str, i: int) -> int | None:
        start = i + 2
        j = start
        while j < len(text):
            if text[j] == '\x07':
                self.performer.on_osc_dispatch(text[start:j].split(';'), True)
                return j + 1
            if text[j] == '\x1b':
                if j + 1 >= len(text):
                    return None
                # ST (ESC \) terminates; any other ESC aborts the OSC
                if text[j + 1] == '\\':
                    self.performer.on_osc_dispatch(text[start:j].split(';'), False)
                    return j + 2
                return j
            j += 1
        return None

    def _handle_dcs(self, text: str, i: int) -> int | None:
        header = self.DCS_HEADER.match(text, i + 2)
        if header is None:
            if self.DCS_PARTIAL.fullmatch(text, i + 2):
                return None
            return i + 2

        terminator = text.find('\x1b\\', header.end())
        if terminator == -1:
            return None

        self.performer.on_hook(parse_params(header.group(1)), header.group(2), header.group(3))
        for char in text[header.end():terminator]:
            self.performer.on_put(char)
        self.performer.on_unhook()
        return terminator + 2
