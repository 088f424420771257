"""Reading ANSI text from files and streams."""

from ansi_to_image.io.reader import load, load_bytes, load_stream, load_text

__all__ = ["load", "load_bytes", "load_stream", "load_text"]
