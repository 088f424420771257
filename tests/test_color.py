"""Tests for RGB values, hex parsing and the Color union."""

import pytest

from ansi_to_image.core.color import (
    Color,
    ColorMode,
    NamedColor,
    Rgb,
    dim,
    named_slot,
    parse_color,
)
from ansi_to_image.errors import ColorParseError


class TestParseColor:
    """Tests for hex color literals."""

    def test_hash_form(self) -> None:
        assert parse_color("#cc6666") == Rgb(0xcc, 0x66, 0x66)

    def test_0x_form(self) -> None:
        assert parse_color("0x1d1f21") == Rgb(0x1d, 0x1f, 0x21)

    def test_case_insensitive(self) -> None:
        assert parse_color("#ABCDEF") == parse_color("#abcdef")
        assert parse_color("0xAbCdEf") == Rgb(0xab, 0xcd, 0xef)

    def test_channel_order(self) -> None:
        color = parse_color("#010203")
        assert (color.r, color.g, color.b) == (1, 2, 3)

    @pytest.mark.parametrize("text", [
        "",
        "#",
        "cc6666",
        "#cc666",
        "#cc66666",
        "0xcc666",
        "0xcc66666",
        "0Xcc6666",
        "#gg0000",
        "#+12345",
        "#12_345",
        "# 12345",
        "0x-12345",
        "rgb(1,2,3)",
    ])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ColorParseError):
            parse_color(text)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_color("red")

    def test_non_string(self) -> None:
        with pytest.raises(ColorParseError):
            parse_color(0xff0000)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["#000000", "#ffffff", "#0a1b2c", "#c5c8c6", "#7f8081"])
    def test_roundtrip(self, text: str) -> None:
        assert str(parse_color(text)) == text
        assert parse_color("0x" + text[1:]).hex == text

    def test_from_str_alias(self) -> None:
        assert Rgb.from_str("#102030") == Rgb(0x10, 0x20, 0x30)


class TestRgb:
    """Tests for the Rgb value type."""

    def test_channel_range(self) -> None:
        with pytest.raises(ValueError):
            Rgb(256, 0, 0)
        with pytest.raises(ValueError):
            Rgb(0, -1, 0)

    def test_rgb_tuple(self) -> None:
        assert Rgb(1, 2, 3).rgb == (1, 2, 3)

    def test_multiply_truncates(self) -> None:
        assert Rgb(204, 102, 102) * 0.66 == Rgb(134, 67, 67)

    def test_multiply_clamps(self) -> None:
        assert Rgb(200, 100, 0) * 2.0 == Rgb(255, 200, 0)
        assert Rgb(200, 100, 0) * -1.0 == Rgb(0, 0, 0)

    def test_dim_default_factor(self) -> None:
        color = Rgb(197, 200, 198)
        assert dim(color) == Rgb(int(197 * 0.66), int(200 * 0.66), int(198 * 0.66))

    def test_immutable(self) -> None:
        color = Rgb(1, 2, 3)
        with pytest.raises(AttributeError):
            color.r = 5  # type: ignore[misc]


class TestNamedColor:
    """Tests for named palette slots."""

    def test_standard_ordinals(self) -> None:
        assert named_slot(NamedColor.BLACK) == 0
        assert named_slot(NamedColor.WHITE) == 7
        assert named_slot(NamedColor.BRIGHT_BLACK) == 8
        assert named_slot(NamedColor.BRIGHT_WHITE) == 15

    def test_special_ordinals(self) -> None:
        assert named_slot(NamedColor.FOREGROUND) == 256
        assert named_slot(NamedColor.BACKGROUND) == 257
        assert named_slot(NamedColor.CURSOR) == 258
        assert named_slot(NamedColor.DIM_BLACK) == 259
        assert named_slot(NamedColor.DIM_WHITE) == 266
        assert named_slot(NamedColor.BRIGHT_FOREGROUND) == 267
        assert named_slot(NamedColor.DIM_FOREGROUND) == 268

    def test_no_names_in_indexed_range(self) -> None:
        assert not any(16 <= named_slot(c) <= 255 for c in NamedColor)


class TestColor:
    """Tests for the Color union."""

    def test_named(self) -> None:
        color = Color.named(NamedColor.RED)
        assert color.mode == ColorMode.NAMED
        assert color.value is NamedColor.RED

    def test_indexed(self) -> None:
        color = Color.indexed(196)
        assert color.mode == ColorMode.INDEXED
        assert color.value == 196

    def test_indexed_range(self) -> None:
        with pytest.raises(ValueError):
            Color.indexed(256)
        with pytest.raises(ValueError):
            Color.indexed(-1)

    def test_spec(self) -> None:
        color = Color.spec(255, 128, 64)
        assert color.mode == ColorMode.SPEC
        assert color.value == Rgb(255, 128, 64)
        assert Color.from_rgb(Rgb(255, 128, 64)) == color

    def test_spec_range(self) -> None:
        with pytest.raises(ValueError):
            Color.spec(255, 0, 300)
