"""Scrolling text in the 5x7 pixel font.

Text scrolls right to left. A scroll offset of 0 puts the first character
at column 0; each repeat of the text follows the previous one after a gap
of one matrix width, so the loop length is text width + 25 pixels.

There are two ways to render a position:

- `render_text_to_matrix` draws the characters straight into a frame,
  clipped to the physical shape.
- `create_scroll_buffer` renders the repeated text once into a 7-row strip;
  `extract_matrix_window` then copies a window of the strip into a frame,
  following each row's width from its left edge.
"""

import logging
from collections.abc import MutableSequence
from functools import partial
from typing import Optional

import numpy as np

from glyphbeat.matrix import (
    CHAR_HEIGHT,
    CHAR_SPACING,
    CHAR_WIDTH,
    GLYPH_SHAPE,
    MAX_COLUMNS,
    ROW_OFFSETS,
    TOTAL_ROWS,
    FlatBuffer,
    calculate_text_width,
    clamp_brightness,
    create_empty_flat,
    get_character,
    is_lit_cell,
)

from .sequence import build_frames

logger = logging.getLogger(__name__)

# Top row of the text; 9 centres the 7-row font on the matrix
DEFAULT_TEXT_ROW = 9

# Speed setting 1-10 -> pixels per frame
_SCROLL_STEPS = {1: 1, 2: 1, 3: 2, 4: 2, 5: 2, 6: 3, 7: 3, 8: 3, 9: 4, 10: 4}


def scroll_step(speed: int) -> int:
    """Pixels per frame for a 1-10 speed setting (clamped into range)."""
    return _SCROLL_STEPS[max(1, min(10, speed))]


def scroll_period(text: str, spacing: int = CHAR_SPACING) -> int:
    """Scroll offsets after which the text loop repeats (0 for empty text)."""
    if not text:
        return 0
    return calculate_text_width(text, spacing) + MAX_COLUMNS


def _draw_text(plot, text: str, x: int, y: int, spacing: int) -> None:
    for char in text:
        for row, bits in enumerate(get_character(char)):
            for col, on in enumerate(bits):
                if on:
                    plot(x + col, y + row)
        x += CHAR_WIDTH + spacing


def render_text_to_matrix(
    text: str,
    scroll_offset: int = 0,
    spacing: int = CHAR_SPACING,
    brightness: int = 255,
    vertical_offset: int = DEFAULT_TEXT_ROW,
) -> FlatBuffer:
    """
    Render text at a scroll position into a new flat buffer.

    Two consecutive repeats are drawn so the loop wraps without a jump.
    Pixels outside the physical shape are dropped.

    Args:
        text: Text to draw; characters without a glyph render as spaces
        scroll_offset: Scroll position in pixels (wraps at scroll_period)
        spacing: Pixels between characters
        brightness: Value of lit pixels (clamped to 0-255)
        vertical_offset: Matrix row of the top of the text

    Returns:
        A flat buffer; all zeros for empty text
    """
    buf = create_empty_flat()
    if not text:
        return buf

    value = clamp_brightness(brightness)
    period = scroll_period(text, spacing)

    def plot(x: int, y: int) -> None:
        if is_lit_cell(x, y):
            buf[y * MAX_COLUMNS + x] = value

    start = -(scroll_offset % period)
    for repeat in range(2):
        _draw_text(plot, text, start + repeat * period, vertical_offset, spacing)

    return buf


def create_scroll_buffer(
    text: str,
    buffer_multiplier: int = 3,
    spacing: int = CHAR_SPACING,
    brightness: int = 255,
) -> np.ndarray:
    """
    Render repeated text into a 7-row strip.

    The strip is at least buffer_multiplier matrix widths wide and at least
    the text width plus two matrix widths. Copies of the text start every
    scroll_period columns; the last copy is cut off at the strip end.

    Returns:
        Array of shape (7, strip width); all zeros for empty text
    """
    if not text:
        return np.zeros((CHAR_HEIGHT, MAX_COLUMNS * buffer_multiplier), dtype=int)

    text_width = calculate_text_width(text, spacing)
    width = max(text_width + MAX_COLUMNS * 2, MAX_COLUMNS * buffer_multiplier)
    strip = np.zeros((CHAR_HEIGHT, width), dtype=int)
    value = clamp_brightness(brightness)

    def plot(x: int, y: int) -> None:
        if 0 <= x < width:
            strip[y, x] = value

    period = scroll_period(text, spacing)
    for start in range(0, width, period):
        _draw_text(plot, text, start, 0, spacing)

    logger.debug(f"Scroll buffer for {len(text)} characters: {width} columns")
    return strip


def extract_matrix_window(
    strip: np.ndarray,
    scroll_offset: int,
    vertical_offset: int = DEFAULT_TEXT_ROW,
) -> FlatBuffer:
    """
    Copy a window of a scroll strip into a new flat buffer.

    Strip row y lands on matrix row vertical_offset + y; rows outside the
    matrix are skipped. Each matrix row takes as many strip columns as it
    has pixels, starting at the scroll offset (wrapping at the strip end),
    and places them from the row's first pixel.
    """
    buf = create_empty_flat()
    height, width = strip.shape
    if width == 0:
        return buf

    start = scroll_offset % width
    for y in range(height):
        row = vertical_offset + y
        if not 0 <= row < TOTAL_ROWS:
            continue
        columns = (start + np.arange(GLYPH_SHAPE[row])) % width
        first = row * MAX_COLUMNS + ROW_OFFSETS[row]
        buf[first:first + GLYPH_SHAPE[row]] = [int(v) for v in strip[y, columns]]

    return buf


def draw_scroll_text_frame(
    buf: MutableSequence[int],
    frame_index: int,
    text: str,
    scroll_speed: int = 1,
    spacing: int = CHAR_SPACING,
    brightness: int = 255,
    vertical_offset: int = DEFAULT_TEXT_ROW,
) -> None:
    """Draw the text scrolled by frame_index * scroll_speed pixels."""
    buf[:] = render_text_to_matrix(
        text, frame_index * scroll_speed, spacing, brightness, vertical_offset
    )


def scroll_text_frames(
    text: str,
    frame_count: Optional[int] = None,
    scroll_speed: int = 1,
    spacing: int = CHAR_SPACING,
    brightness: int = 255,
    vertical_offset: int = DEFAULT_TEXT_ROW,
    max_workers: Optional[int] = None,
) -> list[FlatBuffer]:
    """
    Frames of the text scrolling scroll_speed pixels per frame.

    With frame_count None the sequence covers one full loop
    (ceil(scroll_period / scroll_speed) frames).
    """
    if frame_count is None:
        frame_count = -(-scroll_period(text, spacing) // scroll_speed)

    draw = partial(draw_scroll_text_frame, text=text, scroll_speed=scroll_speed, spacing=spacing,
                   brightness=brightness, vertical_offset=vertical_offset)
    return build_frames(frame_count, draw, max_workers)
