"""Unified brightness model.

Keeps the brightness arithmetic identical between what is sent to the
matrix and what a preview shows. A theme brightness of 255 means 100 %.
"""

import math
from collections.abc import Sequence

from glyphbeat.exceptions import SizeMismatchError

from .mapper import FlatBuffer, clamp_brightness
from .shape import FLAT_ARRAY_SIZE, MAX_BRIGHTNESS

# The hardware never looks dimmer than about half brightness once a pixel is on
MIN_VISIBLE_ALPHA = 0.5


def calculate_final_brightness(pixel_value: int, theme_brightness: int) -> int:
    """
    Apply a theme brightness to a pixel value.

    Args:
        pixel_value: Base pixel value (0-255)
        theme_brightness: Theme brightness setting (0-255)

    Returns:
        Final pixel brightness (0-255); an unlit pixel stays 0
    """
    if pixel_value == 0:
        return 0
    return clamp_brightness(pixel_value * (theme_brightness / MAX_BRIGHTNESS))


def calculate_preview_alpha(pixel_value: int, theme_brightness: int) -> float:
    """
    Opacity a preview should use so it looks like the hardware.

    The panel response is non-linear with a high floor, approximated by a
    square-root curve starting at MIN_VISIBLE_ALPHA.

    Returns:
        Alpha in [0.0, 1.0]; 0.0 for an unlit pixel
    """
    if pixel_value == 0:
        return 0.0

    normalized = calculate_final_brightness(pixel_value, theme_brightness) / MAX_BRIGHTNESS
    alpha = MIN_VISIBLE_ALPHA + math.sqrt(normalized) * (1.0 - MIN_VISIBLE_ALPHA)
    return max(0.0, min(1.0, alpha))


def multiplier_to_brightness(multiplier: float) -> int:
    """Convert a 0.0-1.0 brightness multiplier to a 0-255 value."""
    return clamp_brightness(multiplier * MAX_BRIGHTNESS)


def brightness_to_multiplier(brightness: int) -> float:
    """Convert a 0-255 brightness value to a 0.0-1.0 multiplier."""
    return max(0.0, min(1.0, brightness / MAX_BRIGHTNESS))


def apply_theme_brightness(flat: Sequence[int], theme_brightness: int) -> FlatBuffer:
    """
    Return a copy of a flat buffer with the theme brightness applied.

    Raises:
        SizeMismatchError: If flat does not have exactly 625 elements
    """
    if len(flat) != FLAT_ARRAY_SIZE:
        raise SizeMismatchError(FLAT_ARRAY_SIZE, len(flat))
    return [calculate_final_brightness(value, theme_brightness) for value in flat]
