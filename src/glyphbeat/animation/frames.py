"""Frame sequence generators.

Each generator is a pure function of its parameters: the same arguments
always give the same list of flat buffers. Every frame is drawn on its own
fresh buffer by a per-frame draw function, so frames share no state and can
be built in any order or in parallel.

All geometry is relative to the buffer centre (12, 12).
"""

import logging
import math
from collections.abc import MutableSequence
from functools import partial
from typing import Optional

from glyphbeat.audio import simulated_levels
from glyphbeat.matrix import (
    CENTER_X,
    CENTER_Y,
    MAX_COLUMNS,
    FlatBuffer,
    clamp_brightness,
    draw_circle,
    draw_dot,
    draw_line,
    in_bounds,
    round_half_up,
)
from glyphbeat.models import AnimationPattern, AnimationRequest

from .sequence import FrameDrawer, build_frames
from .spectrum import draw_audio_spectrum_waves
from .text import draw_scroll_text_frame
from .themes import draw_beat_pulse_frame, draw_shape_frame, draw_waveform_frame

logger = logging.getLogger(__name__)


# Per-frame draw functions

def draw_rotating_line_frame(
    buf: MutableSequence[int],
    frame_index: int,
    frame_count: int,
    line_length: int = 8,
    brightness: int = 255,
    dot_brightness: Optional[int] = None,
) -> None:
    """
    Draw the line at angle frame_index * 360 / frame_count plus a centre dot.

    The dot is drawn last, at dot_brightness (defaults to brightness).
    """
    radians = math.radians(frame_index * 360.0 / frame_count)
    end_x = CENTER_X + round_half_up(math.cos(radians) * line_length)
    end_y = CENTER_Y + round_half_up(math.sin(radians) * line_length)

    draw_line(buf, CENTER_X, CENTER_Y, end_x, end_y, brightness)
    draw_dot(buf, CENTER_X, CENTER_Y, 1, brightness if dot_brightness is None else dot_brightness)


def draw_pulse_frame(
    buf: MutableSequence[int],
    frame_index: int,
    frame_count: int,
    max_radius: int = 10,
    brightness: int = 255,
) -> None:
    """Draw a circle whose radius follows half a sine period, plus a centre dot."""
    progress = frame_index / frame_count
    radius = round_half_up(math.sin(progress * math.pi) * max_radius)

    if radius > 0:
        draw_circle(buf, CENTER_X, CENTER_Y, radius, brightness)
    draw_dot(buf, CENTER_X, CENTER_Y, 1, brightness)


def draw_wave_frame(
    buf: MutableSequence[int],
    frame_index: int,
    frame_count: int,
    amplitude: int = 5,
    brightness: int = 255,
) -> None:
    """Draw one pixel per column along a sine wave shifted by the frame phase."""
    value = clamp_brightness(brightness)
    phase = frame_index * 2 * math.pi / frame_count

    for x in range(MAX_COLUMNS):
        y = CENTER_Y + round_half_up(math.sin(x * 0.5 + phase) * amplitude)
        if in_bounds(x, y):
            buf[y * MAX_COLUMNS + x] = value


def draw_horizontal_wave(
    buf: MutableSequence[int],
    frame_index: int = 0,
    frame_count: int = 1,
    amplitude: int = 5,
    brightness: int = 255,
    wavelength: float = 2.0,
    thickness: int = 1,
) -> None:
    """
    Draw a horizontal sine wave.

    Amplitude is clamped to 1-8 and thickness to 1-3. Rows above and below
    the wave centre are dimmed by up to 40 %; offsets are drawn in ascending
    order, so the last one wins where two land on the same cell.

    Args:
        buf: Flat buffer to draw into
        frame_index: Current frame for the animation phase
        frame_count: Frames per cycle (phase is 0 when <= 1)
        amplitude: Wave amplitude in rows
        brightness: Brightness at the wave centre (0-255)
        wavelength: Wave cycles factor across the display
        thickness: Wave line thickness
    """
    value = clamp_brightness(brightness)
    amplitude = max(1, min(8, amplitude))
    thickness = max(1, min(3, thickness))
    half = thickness // 2

    phase = frame_index * 2 * math.pi / frame_count if frame_count > 1 else 0.0

    for x in range(MAX_COLUMNS):
        wave_y = CENTER_Y + round_half_up(
            math.sin(x * wavelength * math.pi / MAX_COLUMNS + phase) * amplitude
        )
        for offset in range(-half, half + 1):
            y = wave_y + offset
            if in_bounds(x, y):
                distance = abs(offset) / max(half, 1)
                buf[y * MAX_COLUMNS + x] = clamp_brightness(value * (1.0 - distance * 0.4))


# Sequence generators

def rotating_line_frames(
    frame_count: int,
    line_length: int = 8,
    brightness: int = 255,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """
    Line rotating around the centre, one full turn over the sequence.

    Frame 0 points along 0 degrees (to the right); consecutive frames are
    360 / frame_count degrees apart.
    """
    draw = partial(
        _rotating_line, frame_count=frame_count, line_length=line_length, brightness=brightness
    )
    return build_frames(frame_count, draw, max_workers)


def pulse_frames(
    frame_count: int,
    max_radius: int = 10,
    brightness: int = 255,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """
    Circle growing from the centre to max_radius and back.

    Frame 0 has radius 0, so it shows the centre dot only.
    """
    draw = partial(_pulse, frame_count=frame_count, max_radius=max_radius, brightness=brightness)
    return build_frames(frame_count, draw, max_workers)


def wave_frames(
    frame_count: int,
    amplitude: int = 5,
    brightness: int = 255,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """Sine wave scrolling one full period over the sequence."""
    draw = partial(_wave, frame_count=frame_count, amplitude=amplitude, brightness=brightness)
    return build_frames(frame_count, draw, max_workers)


def horizontal_wave_frames(
    frame_count: int,
    amplitude: int = 5,
    brightness: int = 255,
    wavelength: float = 2.0,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """Horizontal wave (thickness 1) scrolling one full period over the sequence."""
    draw = partial(
        _horizontal_wave,
        frame_count=frame_count,
        amplitude=amplitude,
        brightness=brightness,
        wavelength=wavelength,
    )
    return build_frames(frame_count, draw, max_workers)


# Adapters so functools.partial can bind everything except (buf, frame_index)

def _rotating_line(buf, frame_index, *, frame_count, line_length, brightness):
    draw_rotating_line_frame(buf, frame_index, frame_count, line_length, brightness)


def _pulse(buf, frame_index, *, frame_count, max_radius, brightness):
    draw_pulse_frame(buf, frame_index, frame_count, max_radius, brightness)


def _wave(buf, frame_index, *, frame_count, amplitude, brightness):
    draw_wave_frame(buf, frame_index, frame_count, amplitude, brightness)


def _horizontal_wave(buf, frame_index, *, frame_count, amplitude, brightness, wavelength, thickness=1):
    draw_horizontal_wave(buf, frame_index, frame_count, amplitude, brightness, wavelength, thickness)


def _simulated_spectrum(buf, frame_index, *, frame_count, brightness, interval_s):
    levels = simulated_levels(frame_index * interval_s)
    draw_audio_spectrum_waves(
        buf,
        levels.bass_level,
        levels.mid_level,
        levels.treble_level,
        frame_index=frame_index,
        frame_count=frame_count,
        max_brightness=brightness,
    )


def frame_drawer(request: AnimationRequest) -> FrameDrawer:
    """Per-frame draw function for an animation request."""
    n = request.frame_count
    if request.pattern is AnimationPattern.ROTATING_LINE:
        return partial(_rotating_line, frame_count=n, line_length=request.line_length,
                       brightness=request.brightness)
    if request.pattern is AnimationPattern.PULSE:
        return partial(_pulse, frame_count=n, max_radius=request.max_radius,
                       brightness=request.brightness)
    if request.pattern is AnimationPattern.WAVE:
        return partial(_wave, frame_count=n, amplitude=request.amplitude,
                       brightness=request.brightness)
    if request.pattern is AnimationPattern.HORIZONTAL_WAVE:
        return partial(_horizontal_wave, frame_count=n, amplitude=request.amplitude,
                       brightness=request.brightness, wavelength=request.wavelength,
                       thickness=request.thickness)
    if request.pattern is AnimationPattern.SPECTRUM:
        return partial(_simulated_spectrum, frame_count=n, brightness=request.brightness,
                       interval_s=request.frame_interval_ms / 1000.0)
    if request.pattern is AnimationPattern.SHAPE:
        return partial(draw_shape_frame, style=request.shape_style, brightness=request.brightness)
    if request.pattern is AnimationPattern.BEAT_PULSE:
        return partial(draw_beat_pulse_frame, frame_count=n, max_radius=request.max_radius,
                       brightness=request.brightness)
    if request.pattern is AnimationPattern.WAVEFORM:
        return partial(draw_waveform_frame, frame_count=n, brightness=request.brightness,
                       thickness=request.thickness)
    if request.pattern is AnimationPattern.SCROLL_TEXT:
        return partial(draw_scroll_text_frame, text=request.text, scroll_speed=request.scroll_speed,
                       spacing=request.text_spacing, brightness=request.brightness,
                       vertical_offset=request.text_row)
    raise ValueError(f"Unknown animation pattern: {request.pattern}")


def render_frames(request: AnimationRequest, max_workers: Optional[int] = None) -> list[FlatBuffer]:
    """
    Build the frame sequence described by an animation request.

    Args:
        request: Pattern and its parameters
        max_workers: Thread pool size, or None to build sequentially

    Returns:
        List of request.frame_count flat buffers
    """
    frames = build_frames(request.frame_count, frame_drawer(request), max_workers)
    logger.debug(
        f"Rendered {len(frames)} {request.pattern.value} frames "
        f"(workers={max_workers or 'sequential'})"
    )
    return frames
