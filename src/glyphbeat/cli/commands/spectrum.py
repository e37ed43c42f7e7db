"""Spectrum command: draw bass/mid/treble bands for given levels."""

from pathlib import Path
from typing import Optional

import click

from glyphbeat.animation import draw_audio_spectrum_waves
from glyphbeat.exceptions import GlyphBeatError
from glyphbeat.matrix import apply_shape_mask, apply_theme_brightness, create_empty_flat

from ..output import exit_with_error, load_config, write_frames

LEVEL = click.FloatRange(0.0, 1.0)


@click.command(name="spectrum")
@click.option("--bass", type=LEVEL, default=0.0, show_default=True, help="Bass level 0.0-1.0")
@click.option("--mid", type=LEVEL, default=0.0, show_default=True, help="Mid level 0.0-1.0")
@click.option("--treble", type=LEVEL, default=0.0, show_default=True, help="Treble level 0.0-1.0")
@click.option("--frame-count", type=click.IntRange(min=1), default=1, show_default=True,
              help="Frames per wave cycle")
@click.option("--frame-index", type=click.IntRange(min=0), default=None,
              help="Render only this frame (default: every frame of the cycle)")
@click.option("--max-brightness", type=int, default=255, show_default=True,
              help="Brightness of a band at level 1.0")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write frames to this file instead of stdout")
@click.option("--mask/--no-mask", default=True,
              help="Zero cells outside the physical matrix shape (default: enabled)")
@click.pass_context
def spectrum(
    ctx,
    bass: float,
    mid: float,
    treble: float,
    frame_count: int,
    frame_index: Optional[int],
    max_brightness: int,
    output: Optional[Path],
    mask: bool,
):
    """
    Draw audio spectrum bands for fixed levels.

    Bands at or below 0.05 are not drawn. The configured theme brightness
    is applied to every frame.

    \b
    Examples:
      glyphbeat spectrum --bass 0.8 --mid 0.5 --treble 0.3
      glyphbeat spectrum --mid 0.6 --frame-count 24 -o bands.txt
    """
    try:
        config = load_config(ctx)
        indices = [frame_index] if frame_index is not None else list(range(frame_count))

        frames = []
        for index in indices:
            buf = create_empty_flat()
            draw_audio_spectrum_waves(
                buf, bass, mid, treble,
                frame_index=index, frame_count=frame_count, max_brightness=max_brightness,
            )
            buf = apply_theme_brightness(buf, config.theme_brightness)
            frames.append(apply_shape_mask(buf) if mask else buf)

        count = write_frames(frames, output)
        if output is not None:
            click.echo(f"Wrote {count} spectrum frames to {output}", err=True)

    except GlyphBeatError as e:
        exit_with_error(e)
