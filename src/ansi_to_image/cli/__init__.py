"""Command-line interface for ansi-to-image."""

from ansi_to_image.cli.app import create_app

__all__ = ["create_app"]
