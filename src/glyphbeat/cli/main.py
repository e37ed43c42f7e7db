"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from glyphbeat import __version__

from .commands import config_group, convert_group, preview, render, spectrum

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Frames go to stdout, so log records never do: they go to stderr, or
    to a file with --debug / --log-file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug and not log_file:
        log_file = Path.cwd() / "glyphbeat-debug.log"

    if log_file:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Replace handlers from an earlier invocation in the same process
    for old in [h for h in root_logger.handlers if getattr(h, "_glyphbeat", False)]:
        root_logger.removeHandler(old)
        old.close()
    handler._glyphbeat = True
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="glyphbeat")
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.glyphbeat/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./glyphbeat-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    glyphbeat - animations for the Glyph Matrix.

    Renders frames for the 25-row diamond-shaped Glyph Matrix as flat
    25x25 buffers, exchanged as lines of 625 comma-separated brightness
    values.

    \b
    Examples:
      # Rotating line, 12 frames
      glyphbeat render rotating_line --frames 12

      # Look at a frame
      glyphbeat render pulse -n 8 | glyphbeat preview --frame 4

      # Audio bands for fixed levels
      glyphbeat spectrum --bass 0.7 --mid 0.4 --treble 0.2

      # Shaped grid JSON to pixel strings
      glyphbeat convert to-flat grid.json

      # Change rendering defaults
      glyphbeat config set default_frame_count 48
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file


cli.add_command(render)
cli.add_command(spectrum)
cli.add_command(preview)
cli.add_command(convert_group)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
