"""Main entry point for glyphbeat."""

from glyphbeat.cli import cli

if __name__ == "__main__":
    cli()
