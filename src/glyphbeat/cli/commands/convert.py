"""Convert commands: shaped-grid JSON <-> pixel strings."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import click

from glyphbeat.exceptions import collect_errors
from glyphbeat.matrix import flat_to_shaped, parse_pixel_string, shaped_to_flat

from ..output import read_lines, write_frames

logger = logging.getLogger(__name__)


@click.group(name="convert")
def convert_group():
    """Convert between shaped grids and pixel strings."""
    pass


@convert_group.command(name="to-flat")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write pixel strings to this file instead of stdout")
def to_flat(source: TextIO, output: Optional[Path]):
    """
    Convert shaped grids (JSON) to pixel strings.

    SOURCE holds either one shaped grid (a list of 25 rows) or a list of
    shaped grids. Every grid is checked; invalid ones are reported and
    skipped.
    """
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="SOURCE") from e

    if _is_grid(data):
        data = [data]
    if not isinstance(data, list) or not all(_is_grid(grid) for grid in data):
        raise click.BadParameter(
            "expected a shaped grid (list of rows) or a list of shaped grids", param_hint="SOURCE"
        )

    collector = collect_errors("convert shaped grids")
    frames = []
    for index, grid in enumerate(data):
        with collector.try_operation(f"grid {index}"):
            frames.append(shaped_to_flat(grid))

    write_frames(frames, output)
    _report(collector)


@convert_group.command(name="to-shaped")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", type=int, default=None, help="Pretty-print JSON with this indent")
def to_shaped(source: TextIO, indent: Optional[int]):
    """
    Convert pixel strings (one frame per line) to a JSON list of shaped grids.

    Lines that fail to parse are reported and skipped.
    """
    collector = collect_errors("convert pixel strings")
    grids = []
    for line_number, text in read_lines(source):
        with collector.try_operation(f"line {line_number}"):
            grids.append(flat_to_shaped(parse_pixel_string(text)))

    click.echo(json.dumps(grids, indent=indent))
    _report(collector)


def _is_grid(obj) -> bool:
    """A list of rows, each row a list of numbers."""
    return (
        isinstance(obj, list)
        and all(isinstance(row, list) for row in obj)
        and all(isinstance(v, (int, float)) for row in obj for v in row)
    )


def _report(collector) -> None:
    logger.info(collector.get_summary())
    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)
