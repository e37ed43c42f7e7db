"""Shared input/output helpers for CLI commands."""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import NoReturn, Optional, TextIO

import click

from glyphbeat.exceptions import ErrorContext, FrameOutputError, format_error_for_display
from glyphbeat.matrix import FlatBuffer, flat_array_to_pixel_string
from glyphbeat.models import DEFAULT_CONFIG_PATH, AppConfig

logger = logging.getLogger(__name__)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the config file selected by the top-level --config option."""
    return AppConfig.load_or_default(config_path(ctx))


def config_path(ctx: click.Context) -> Path:
    """Config file path selected by the top-level --config option."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or DEFAULT_CONFIG_PATH


def exit_with_error(error: Exception) -> NoReturn:
    """Print a user-friendly error with its recovery hint and exit with code 1."""
    logger.error(f"Command failed: {error}")
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


def write_frames(frames: Iterable[FlatBuffer], output: Optional[Path]) -> int:
    """
    Write frames in the text interchange format, one pixel string per line.

    Args:
        frames: Flat buffers to write
        output: Destination file, or None for stdout

    Returns:
        Number of frames written

    Raises:
        FrameOutputError: If the output file cannot be written
    """
    lines = [flat_array_to_pixel_string(frame) for frame in frames]

    if output is None:
        for line in lines:
            click.echo(line)
    else:
        try:
            with ErrorContext(f"write {len(lines)} frames to {output}", logger_instance=logger):
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as e:
            raise FrameOutputError(output, e.strerror or str(e)) from e
        logger.info(f"Wrote {len(lines)} frames to {output}")

    return len(lines)


def read_lines(source: TextIO) -> list[tuple[int, str]]:
    """Non-blank lines of a text stream with their 1-based line numbers."""
    return [
        (number, line.strip())
        for number, line in enumerate(source, start=1)
        if line.strip()
    ]
