"""Drawing primitives for flat 625-cell buffers.

Every primitive mutates the buffer it is given, clamps its brightness with
clamp_brightness() before writing, and skips points that fall outside the
25x25 rectangle. Shapes are sets of discrete points: a later write to a cell
replaces the earlier value, nothing is blended or accumulated.
"""

import math
from collections.abc import MutableSequence

from .mapper import clamp_brightness
from .shape import MAX_COLUMNS, in_bounds


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def _plot(buf: MutableSequence[int], x: int, y: int, brightness: int) -> None:
    if in_bounds(x, y):
        buf[y * MAX_COLUMNS + x] = brightness


def draw_line(buf: MutableSequence[int], x1: int, y1: int, x2: int, y2: int, brightness: int) -> None:
    """
    Draw a line between two points.

    Points are sampled parametrically, one per step along the longer axis,
    rather than with Bresenham. Rounding can hit the same cell twice; the
    later sample wins.

    Args:
        buf: Flat buffer to draw into
        x1: Starting X coordinate
        y1: Starting Y coordinate
        x2: Ending X coordinate
        y2: Ending Y coordinate
        brightness: Brightness value (clamped to 0-255)
    """
    value = clamp_brightness(brightness)
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy), 1)

    for i in range(steps + 1):
        t = i / steps
        _plot(buf, round_half_up(x1 + dx * t), round_half_up(y1 + dy * t), value)


def draw_circle(buf: MutableSequence[int], cx: int, cy: int, radius: int, brightness: int) -> None:
    """
    Draw a circle outline.

    Angles are sampled every int(360 / (radius * 8)) degrees, so small
    circles come out sparse (radius 1 samples every 45 degrees, radius 7
    every 6). A radius of 0 plots the centre only; a negative radius draws
    nothing.

    Args:
        buf: Flat buffer to draw into
        cx: Center X coordinate
        cy: Center Y coordinate
        radius: Circle radius
        brightness: Brightness value (clamped to 0-255)
    """
    if radius < 0:
        return

    value = clamp_brightness(brightness)
    if radius == 0:
        _plot(buf, cx, cy, value)
        return

    # Radii above 45 would give a zero step; sample every degree instead
    angle_step = max(int(360 / (radius * 8)), 1)

    for angle in range(0, 360, angle_step):
        radians = math.radians(angle)
        x = cx + round_half_up(math.cos(radians) * radius)
        y = cy + round_half_up(math.sin(radians) * radius)
        _plot(buf, x, y, value)


def draw_dot(buf: MutableSequence[int], cx: int, cy: int, radius: int, brightness: int) -> None:
    """
    Draw a filled disk.

    Args:
        buf: Flat buffer to draw into
        cx: Center X coordinate
        cy: Center Y coordinate
        radius: Dot radius (0 plots a single pixel)
        brightness: Brightness value (clamped to 0-255)
    """
    value = clamp_brightness(brightness)

    for y in range(cy - radius, cy + radius + 1):
        for x in range(cx - radius, cx + radius + 1):
            if math.hypot(x - cx, y - cy) <= radius:
                _plot(buf, x, y, value)


def fill_grid(buf: MutableSequence[int], brightness: int) -> None:
    """Set every cell of the buffer, inert cells included."""
    value = clamp_brightness(brightness)
    buf[:] = [value] * len(buf)
