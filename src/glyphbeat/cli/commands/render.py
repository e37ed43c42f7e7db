"""Render command: generate an animation as pixel strings."""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from glyphbeat.animation import render_frames
from glyphbeat.exceptions import GlyphBeatError
from glyphbeat.matrix import apply_shape_mask, apply_theme_brightness
from glyphbeat.models import AnimationPattern, AnimationRequest, ShapeStyle

from ..output import exit_with_error, load_config, write_frames

logger = logging.getLogger(__name__)


@click.command(name="render")
@click.argument(
    "pattern",
    type=click.Choice([p.value for p in AnimationPattern], case_sensitive=False),
)
@click.option("--frames", "-n", type=int, default=None, help="Number of frames (default: from config)")
@click.option("--brightness", "-b", type=int, default=None, help="Pixel brightness 0-255 (default: from config)")
@click.option("--line-length", type=int, default=8, show_default=True, help="rotating_line: line length")
@click.option("--max-radius", type=int, default=10, show_default=True, help="pulse, beat_pulse: largest radius")
@click.option("--amplitude", type=int, default=5, show_default=True, help="wave patterns: amplitude in rows")
@click.option("--wavelength", type=float, default=2.0, show_default=True, help="horizontal_wave: wavelength factor")
@click.option("--thickness", type=int, default=1, show_default=True, help="horizontal_wave, waveform: thickness 1-3")
@click.option("--style", type=click.Choice([s.value for s in ShapeStyle], case_sensitive=False),
              default=ShapeStyle.CROSS.value, show_default=True, help="shape: pattern style")
@click.option("--text", "-t", default="GLYPHBEAT", show_default=True, help="scroll_text: text to scroll")
@click.option("--spacing", type=int, default=1, show_default=True, help="scroll_text: pixels between characters")
@click.option("--scroll-speed", type=int, default=1, show_default=True, help="scroll_text: pixels per frame")
@click.option("--text-row", type=int, default=9, show_default=True, help="scroll_text: top row of the text")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write frames to this file instead of stdout",
)
@click.option(
    "--mask/--no-mask",
    default=True,
    help="Zero cells outside the physical matrix shape (default: enabled)",
)
@click.pass_context
def render(
    ctx,
    pattern: str,
    frames: Optional[int],
    brightness: Optional[int],
    line_length: int,
    max_radius: int,
    amplitude: int,
    wavelength: float,
    thickness: int,
    style: str,
    text: str,
    spacing: int,
    scroll_speed: int,
    text_row: int,
    output: Optional[Path],
    mask: bool,
):
    """
    Render an animation as pixel strings, one frame per line.

    \b
    Examples:
      glyphbeat render pulse --frames 16
      glyphbeat render horizontal_wave --thickness 3 -o wave.txt
      glyphbeat render spectrum -n 48 | glyphbeat preview --frame 10
      glyphbeat render shape --style diamond -n 1
      glyphbeat render scroll_text --text "Now playing" --scroll-speed 2
    """
    try:
        config = load_config(ctx)

        try:
            request = AnimationRequest(
                pattern=AnimationPattern(pattern.lower()),
                frame_count=frames if frames is not None else config.default_frame_count,
                brightness=brightness if brightness is not None else config.default_brightness,
                line_length=line_length,
                max_radius=max_radius,
                amplitude=amplitude,
                wavelength=wavelength,
                thickness=thickness,
                shape_style=ShapeStyle(style.lower()),
                text=text,
                text_spacing=spacing,
                scroll_speed=scroll_speed,
                text_row=text_row,
                frame_interval_ms=config.frame_interval_ms,
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise click.UsageError(f"Invalid value for {fields}: {e.errors()[0]['msg']}") from e

        sequence = render_frames(request, max_workers=config.max_workers)
        sequence = [apply_theme_brightness(frame, config.theme_brightness) for frame in sequence]
        if mask:
            sequence = [apply_shape_mask(frame) for frame in sequence]

        count = write_frames(sequence, output)
        if output is not None:
            click.echo(f"Wrote {count} {request.pattern.value} frames to {output}", err=True)

    except GlyphBeatError as e:
        exit_with_error(e)
