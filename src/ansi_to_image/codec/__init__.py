"""Decoding of text with ANSI escape sequences."""

from ansi_to_image.codec.ansi_parser import AnsiParser, Performer, parse_params
from ansi_to_image.codec.sgr import attrs_from_sgr_parameters, parse_sgr_color

__all__ = ["AnsiParser", "Performer", "parse_params", "attrs_from_sgr_parameters", "parse_sgr_color"]
