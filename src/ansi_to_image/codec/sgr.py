"""SGR (Select Graphic Rendition) parameter decoding."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ansi_to_image.core.attr import Attr, Attribute, Background, Foreground
from ansi_to_image.core.color import BRIGHT_COLORS, NORMAL_COLORS, Color, NamedColor

logger = logging.getLogger(__name__)

SGR_FOREGROUND_EXTENDED = 38
SGR_BACKGROUND_EXTENDED = 48

# Extended color selectors (38;<selector>;... / 48;<selector>;...)
SELECTOR_RGB = 2
SELECTOR_INDEXED = 5


def _build_table() -> dict[int, Attribute]:
    table: dict[int, Attribute] = {
        0: Attr.RESET,
        1: Attr.BOLD,
        2: Attr.DIM,
        3: Attr.ITALIC,
        4: Attr.UNDERLINE,
        5: Attr.BLINK_SLOW,
        6: Attr.BLINK_FAST,
        7: Attr.REVERSE,
        8: Attr.HIDDEN,
        9: Attr.STRIKE,
        21: Attr.CANCEL_BOLD,
        22: Attr.CANCEL_BOLD_DIM,
        23: Attr.CANCEL_ITALIC,
        24: Attr.CANCEL_UNDERLINE,
        25: Attr.CANCEL_BLINK,
        27: Attr.CANCEL_REVERSE,
        28: Attr.CANCEL_HIDDEN,
        29: Attr.CANCEL_STRIKE,
        39: Foreground(Color.named(NamedColor.FOREGROUND)),
        49: Background(Color.named(NamedColor.BACKGROUND)),
    }
    for offset, name in enumerate(NORMAL_COLORS):
        table[30 + offset] = Foreground(Color.named(name))
        table[40 + offset] = Background(Color.named(name))
    for offset, name in enumerate(BRIGHT_COLORS):
        table[90 + offset] = Foreground(Color.named(name))
        table[100 + offset] = Background(Color.named(name))
    return table


# Single-parameter codes; 38 and 48 are handled by parse_sgr_color
SGR_TABLE: dict[int, Attribute] = _build_table()


def parse_sgr_color(params: Sequence[int], start: int = 0) -> tuple[Color, int] | None:
    """
    Parse an extended color beginning at ``params[start]`` (the 38/48 code).

    Returns the color and the number of parameters consumed after the
    code (4 for ``2;r;g;b``, 2 for ``5;n``), or None when the
    specifier is incomplete, out of range or has an unknown selector.
    """
    attrs = params[start:]
    if len(attrs) < 2:
        logger.warning("Expected color selector; got %r", list(attrs))
        return None

    selector = attrs[1]
    if selector == SELECTOR_RGB:
        if len(attrs) < 5:
            logger.warning("Expected RGB color spec; got %r", list(attrs))
            return None

        r, g, b = attrs[2], attrs[3], attrs[4]
        if not all(0 <= c <= 255 for c in (r, g, b)):
            logger.warning("Invalid RGB color spec: (%s, %s, %s)", r, g, b)
            return None

        return Color.spec(r, g, b), 4

    if selector == SELECTOR_INDEXED:
        if len(attrs) < 3:
            logger.warning("Expected color index; got %r", list(attrs))
            return None

        index = attrs[2]
        if not 0 <= index <= 255:
            logger.warning("Invalid color index: %s", index)
            return None

        return Color.indexed(index), 2

    logger.warning("Unexpected color attr: %s", selector)
    return None


def attrs_from_sgr_parameters(params: Sequence[int]) -> list[Attribute | None]:
    """
    Decode SGR parameters into attributes.

    One entry is produced per consumed position, in input order. An
    extended color consumes its whole specifier. Unknown codes and
    malformed extended colors yield None; when an extended color fails
    only the 38/48 code itself is consumed and decoding resumes at the
    next parameter.
    """
    attrs: list[Attribute | None] = []
    i = 0
    while i < len(params):
        code = params[i]

        attr: Attribute | None
        if code in (SGR_FOREGROUND_EXTENDED, SGR_BACKGROUND_EXTENDED):
            parsed = parse_sgr_color(params, i)
            if parsed is None:
                attr = None
            else:
                color, consumed = parsed
                i += consumed
                if code == SGR_FOREGROUND_EXTENDED:
                    attr = Foreground(color)
                else:
                    attr = Background(color)
        else:
            attr = SGR_TABLE.get(code)
            if attr is None:
                logger.debug("Unrecognized SGR code: %s", code)

        attrs.append(attr)
        i += 1

    return attrs
