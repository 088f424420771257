"""Typer CLI application."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ansi_to_image.core.color import NamedColor
from ansi_to_image.core.palette import ColorConfig, Palette, build_palette
from ansi_to_image.errors import AnsiToImageError
from ansi_to_image.stream.tokens import Character, ColorChange, TokenStream


def _setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-to-image",
        help="Render text with ANSI color sequences to an image.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def load_palette(colors: Optional[Path]) -> Palette:
        if colors is None:
            return Palette.default()
        try:
            return build_palette(ColorConfig.load(colors))
        except (OSError, AnsiToImageError) as e:
            err_console.print(f"[red]Invalid color configuration: {e}[/]")
            raise typer.Exit(1)

    def read_tokens(source: str, palette: Palette, encoding: str) -> TokenStream:
        from ansi_to_image.io.reader import load, load_stream

        if source == "-":
            return load_stream(sys.stdin.buffer, palette=palette, encoding=encoding)
        path = Path(source)
        if not path.is_file():
            err_console.print(f"[red]No such file: {source}[/]")
            raise typer.Exit(1)
        return load(path, palette=palette, encoding=encoding)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Render text with ANSI color sequences to an image."""
        _setup_logging(verbose, err_console)

    @app.command()
    def render(
        source: Annotated[str, typer.Argument(help="Input file, or - for stdin")] = "-",
        out: Annotated[Path, typer.Option("--out", "-o", help="Filename to save the image")] = Path("out.png"),
        font: Annotated[Optional[Path], typer.Option("--font", "-f", help="Monospace font file (default: built-in)")] = None,
        size: Annotated[int, typer.Option("--size", "-s", min=1, help="Font size in pixels")] = 32,
        colors: Annotated[Optional[Path], typer.Option("--colors", "-c", help="JSON color configuration")] = None,
        encoding: Annotated[str, typer.Option("--encoding", "-e", help="Input text encoding")] = "utf-8",
    ) -> None:
        """Render ANSI-colored text to a PNG (or any Pillow format)."""
        from ansi_to_image.render.image import ImageRenderer

        palette = load_palette(colors)
        stream = read_tokens(source, palette, encoding)

        try:
            renderer = ImageRenderer(
                font=font,
                font_size=size,
                foreground=palette[NamedColor.FOREGROUND],
            )
        except OSError as e:
            err_console.print(f"[red]Cannot load font {font}: {e}[/]")
            raise typer.Exit(1)

        try:
            renderer.save(stream, out)
        except (OSError, ValueError) as e:
            err_console.print(f"[red]Cannot write {out}: {e}[/]")
            raise typer.Exit(1)

        console.print(f"[green]Generated: {out}[/]")

    @app.command()
    def tokens(
        source: Annotated[str, typer.Argument(help="Input file, or - for stdin")] = "-",
        colors: Annotated[Optional[Path], typer.Option("--colors", "-c", help="JSON color configuration")] = None,
        encoding: Annotated[str, typer.Option("--encoding", "-e", help="Input text encoding")] = "utf-8",
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the token stream produced for the input."""
        stream = read_tokens(source, load_palette(colors), encoding)

        if json_output:
            data = [
                {"color": token.color.hex} if isinstance(token, ColorChange) else {"char": token.char}
                for token in stream
            ]
            print(json.dumps({"tokens": data, "chars_count": stream.chars_count}, indent=2))
            return

        for token in stream:
            if isinstance(token, ColorChange):
                console.print(f"[{token.color.hex}]■[/] color {token.color.hex}", highlight=False)
            elif isinstance(token, Character):
                console.print(f"  char {token.char!r}", highlight=False, markup=False)
        console.print(f"[bold]{stream.chars_count}[/] characters")

    @app.command()
    def palette(
        colors: Annotated[Optional[Path], typer.Option("--colors", "-c", help="JSON color configuration")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the resolved 269-color palette."""
        resolved = load_palette(colors)
        names = {color.value: color.name.lower() for color in NamedColor}

        if json_output:
            data = [
                {"index": index, "name": names.get(index), "color": rgb.hex}
                for index, rgb in enumerate(resolved)
            ]
            print(json.dumps(data, indent=2))
            return

        table = Table(title="Palette")
        table.add_column("Index", justify="right")
        table.add_column("Name")
        table.add_column("Color")
        table.add_column("")
        for index, rgb in enumerate(resolved):
            table.add_row(str(index), names.get(index, ""), rgb.hex, f"[on {rgb.hex}]    [/]")
        console.print(table)

    return app
