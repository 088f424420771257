"""Read text with ANSI escape sequences into a token stream."""

from pathlib import Path
from typing import BinaryIO

from ansi_to_image.codec.ansi_parser import AnsiParser
from ansi_to_image.core.palette import Palette
from ansi_to_image.stream.builder import TokenStreamBuilder
from ansi_to_image.stream.tokens import TokenStream

CHUNK_SIZE = 2048


def load(
    path: str | Path,
    palette: Palette | None = None,
    encoding: str = "utf-8",
) -> TokenStream:
    """Load a file containing ANSI escape sequences."""
    path = Path(path)
    with open(path, 'rb') as f:
        return load_stream(f, palette=palette, encoding=encoding)


def load_stream(
    stream: BinaryIO,
    palette: Palette | None = None,
    encoding: str = "utf-8",
) -> TokenStream:
    """
    Read a binary stream (e.g. stdin) to the end in fixed-size chunks.

    Escape sequences split across chunk boundaries are handled by the
    parser.
    """
    builder = TokenStreamBuilder(palette)
    parser = AnsiParser(builder, encoding=encoding)

    while chunk := stream.read(CHUNK_SIZE):
        parser.feed(chunk)
    parser.close()

    return builder.finish()


def load_bytes(
    data: bytes,
    palette: Palette | None = None,
    encoding: str = "utf-8",
) -> TokenStream:
    """Tokenize raw bytes."""
    builder = TokenStreamBuilder(palette)
    parser = AnsiParser(builder, encoding=encoding)
    parser.feed(data)
    parser.close()
    return builder.finish()


def load_text(text: str, palette: Palette | None = None) -> TokenStream:
    """Tokenize already decoded text."""
    builder = TokenStreamBuilder(palette)
    parser = AnsiParser(builder)
    parser.feed_unicode(text)
    parser.close()
    return builder.finish()
