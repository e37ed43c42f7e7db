"""Preview command: show a frame as ASCII art."""

from typing import TextIO

import click

from glyphbeat.exceptions import GlyphBeatError
from glyphbeat.matrix import (
    MAX_BRIGHTNESS,
    MAX_COLUMNS,
    TOTAL_ROWS,
    FlatBuffer,
    as_matrix,
    clamp_brightness,
    is_lit_cell,
    parse_pixel_string,
)

from ..output import exit_with_error, read_lines

# Dark to bright; index 0 is only used for an unlit real pixel
RAMP = ".:-=+*#%@"


def render_ascii(flat: FlatBuffer) -> str:
    """
    Draw a flat buffer as text, two characters per pixel.

    Cells outside the matrix shape are blank, unlit pixels are '.', lit
    pixels use a brightness ramp.
    """
    matrix = as_matrix(flat)
    lines = []
    for y in range(TOTAL_ROWS):
        chars = []
        for x in range(MAX_COLUMNS):
            if not is_lit_cell(x, y):
                chars.append("  ")
                continue
            value = clamp_brightness(matrix[y, x])
            if value == 0:
                chars.append(". ")
            else:
                level = 1 + (value * (len(RAMP) - 2)) // MAX_BRIGHTNESS
                chars.append(RAMP[level] * 2)
        lines.append("".join(chars).rstrip())
    return "\n".join(lines)


@click.command(name="preview")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--frame", "-f", "frame_number", type=click.IntRange(min=0), default=0,
              show_default=True, help="Frame (line) to show, counting non-blank lines from 0")
def preview(source: TextIO, frame_number: int):
    """
    Show one frame of a pixel-string file as ASCII art.

    Reads from stdin when SOURCE is omitted or '-'.

    \b
    Examples:
      glyphbeat preview frames.txt --frame 3
      glyphbeat render pulse -n 8 | glyphbeat preview -f 4
    """
    lines = read_lines(source)
    if frame_number >= len(lines):
        raise click.BadParameter(
            f"source has {len(lines)} frame(s)", param_hint="--frame"
        )

    line_number, text = lines[frame_number]
    try:
        flat = parse_pixel_string(text)
    except GlyphBeatError as e:
        click.echo(f"Line {line_number}:", err=True)
        exit_with_error(e)

    click.echo(render_ascii(flat))
