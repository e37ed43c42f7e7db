"""Command-line interface for glyphbeat."""

from .main import cli

__all__ = ["cli"]
