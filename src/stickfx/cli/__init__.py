"""Command line interface for stickfx."""

from .main import cli, main

__all__ = ["cli", "main"]
