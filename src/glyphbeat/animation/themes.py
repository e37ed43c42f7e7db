"""Theme generators: shape patterns, beat pulse and scrolling waveform.

Shapes are static, so every frame of a shape sequence is the same. The beat
pulse and the waveform loop once over the sequence.
"""

import logging
import math
from collections.abc import Callable, MutableSequence
from functools import partial
from typing import Optional

from glyphbeat.matrix import (
    CENTER_X,
    CENTER_Y,
    MAX_COLUMNS,
    TOTAL_ROWS,
    FlatBuffer,
    clamp_brightness,
    draw_circle,
    round_half_up,
)
from glyphbeat.models import ShapeStyle

from .sequence import build_frames

logger = logging.getLogger(__name__)

# Shapes are cut to a disc slightly larger than the matrix
SHAPE_RADIUS = 12.5

# Beat pulse: (layer, share of the beat intensity)
PULSE_LAYERS = ((1, 1.0), (2, 0.7), (3, 0.4))
PULSE_LAYER_SPREAD = 0.35
STRONG_BEAT = 0.8

WAVEFORM_HEIGHT = 5
WAVEFORM_LEVEL = 0.7
CENTER_LINE_LEVEL = 0.2

_DOT_CENTRES = [(row, col) for row in (6, 12, 18) for col in (6, 12, 18)]


def _is_dot(col: int, row: int) -> bool:
    return any(abs(row - r) <= 1 and abs(col - c) <= 1 for r, c in _DOT_CENTRES)


# (col, row, distance from centre) -> lit
_SHAPE_RULES: dict[ShapeStyle, Callable[[int, int, float], bool]] = {
    ShapeStyle.CROSS: lambda col, row, dist: 11 <= col <= 13 or 11 <= row <= 13,
    ShapeStyle.DOTS: lambda col, row, dist: _is_dot(col, row),
    ShapeStyle.LINES: lambda col, row, dist: row in (4, 8, 12, 16, 20),
    ShapeStyle.BORDER: lambda col, row, dist: dist >= SHAPE_RADIUS - 2,
    ShapeStyle.DIAMOND: lambda col, row, dist: 6 <= abs(col - CENTER_X) + abs(row - CENTER_Y) <= 8,
    ShapeStyle.GRID: lambda col, row, dist: row % 4 == 0 or col % 4 == 0,
}


def draw_shape(buf: MutableSequence[int], style: ShapeStyle, brightness: int = 255) -> None:
    """
    Draw a geometric pattern cut to a disc of radius 12.5.

    Styles:
        cross: rows 11-13 and columns 11-13
        dots: 3x3 blocks on a 3x3 lattice at 6, 12 and 18
        lines: rows 4, 8, 12, 16 and 20
        border: ring from radius 10.5 to 12.5
        diamond: Manhattan distance 6 to 8 from the centre
        grid: every fourth row and column
    """
    value = clamp_brightness(brightness)
    rule = _SHAPE_RULES[ShapeStyle(style)]

    for row in range(TOTAL_ROWS):
        for col in range(MAX_COLUMNS):
            dist = math.hypot(col - CENTER_X, row - CENTER_Y)
            if dist <= SHAPE_RADIUS and rule(col, row, dist):
                buf[row * MAX_COLUMNS + col] = value


def draw_shape_frame(
    buf: MutableSequence[int],
    frame_index: int,
    style: ShapeStyle = ShapeStyle.CROSS,
    brightness: int = 255,
) -> None:
    """Shape frames ignore the frame index."""
    draw_shape(buf, style, brightness)


def beat_intensity(progress: float) -> float:
    """
    Beat envelope at a point of the loop, in [0, 1].

    A full sine plus second and fourth harmonics at 0.4 and 0.2, shifted
    and scaled from [-1.4, 1.4] to [0, 1].
    """
    main = math.sin(progress * 2 * math.pi)
    sub = math.sin(progress * 4 * math.pi) * 0.4
    micro = math.sin(progress * 8 * math.pi) * 0.2
    return max(0.0, (main + sub + micro + 1.4) / 2.8)


def draw_beat_pulse_frame(
    buf: MutableSequence[int],
    frame_index: int,
    frame_count: int,
    max_radius: int = 11,
    brightness: int = 255,
) -> None:
    """
    Draw three concentric circles sized and dimmed by the beat envelope.

    The layers sit at 0.35, 0.7 and 1.05 times the current radius with
    full, 0.7 and 0.4 of the beat brightness. A layer wider than max_radius
    is skipped. The centre cell lights at full brightness on strong beats
    (envelope above 0.8).
    """
    intensity = beat_intensity(frame_index / frame_count)
    current_radius = int(intensity * max_radius)

    for layer, share in PULSE_LAYERS:
        layer_radius = max(1, int(current_radius * layer * PULSE_LAYER_SPREAD))
        if layer_radius <= max_radius:
            draw_circle(buf, CENTER_X, CENTER_Y, layer_radius, brightness * intensity * share)

    if intensity > STRONG_BEAT:
        buf[CENTER_Y * MAX_COLUMNS + CENTER_X] = clamp_brightness(brightness)


def draw_waveform_frame(
    buf: MutableSequence[int],
    frame_index: int,
    frame_count: int,
    brightness: int = 255,
    thickness: int = 2,
    center_line: bool = True,
) -> None:
    """
    Draw a scrolling two-harmonic waveform.

    Each column x sits at 12 + 5 * (0.7 sin(p) + 0.3 sin(2p)) with
    p = 4 pi x / 25 plus the frame phase. The line is drawn at 70 % of the
    brightness, thickness rows tall (clamped to 1-3, rows clipped to the
    matrix). The optional centre line at 20 % never dims the wave.
    """
    thickness = max(1, min(3, thickness))
    wave_value = clamp_brightness(brightness * WAVEFORM_LEVEL)
    scroll_phase = frame_index / frame_count * 2 * math.pi

    for x in range(MAX_COLUMNS):
        phase = x / MAX_COLUMNS * 4 * math.pi + scroll_phase
        level = math.sin(phase) * 0.7 + math.sin(phase * 2) * 0.3
        wave_y = CENTER_Y + round_half_up(level * WAVEFORM_HEIGHT)
        for t in range(thickness):
            y = max(0, min(TOTAL_ROWS - 1, wave_y + t - thickness // 2))
            buf[y * MAX_COLUMNS + x] = wave_value

    if center_line:
        line_value = clamp_brightness(brightness * CENTER_LINE_LEVEL)
        for x in range(MAX_COLUMNS):
            index = CENTER_Y * MAX_COLUMNS + x
            buf[index] = max(buf[index], line_value)


def shape_frames(
    frame_count: int,
    style: ShapeStyle = ShapeStyle.CROSS,
    brightness: int = 255,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """frame_count copies of a shape pattern."""
    draw = partial(draw_shape_frame, style=style, brightness=brightness)
    return build_frames(frame_count, draw, max_workers)


def beat_pulse_frames(
    frame_count: int,
    max_radius: int = 11,
    brightness: int = 255,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """One loop of the beat envelope over the sequence."""
    draw = partial(draw_beat_pulse_frame, frame_count=frame_count, max_radius=max_radius,
                   brightness=brightness)
    return build_frames(frame_count, draw, max_workers)


def waveform_frames(
    frame_count: int,
    brightness: int = 255,
    thickness: int = 2,
    center_line: bool = True,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """Waveform scrolling one full period over the sequence."""
    draw = partial(draw_waveform_frame, frame_count=frame_count, brightness=brightness,
                   thickness=thickness, center_line=center_line)
    return build_frames(frame_count, draw, max_workers)
