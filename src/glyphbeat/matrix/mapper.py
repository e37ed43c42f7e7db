"""Conversion between the shaped and flat pixel formats.

Two representations of the same image:

1. Shaped grid: 25 rows, row r holding exactly GLYPH_SHAPE[r] values
   (only the pixels that physically exist)
2. Flat buffer: 625 values, row-major over a 25x25 rectangle, with every
   cell outside a row's span fixed at 0 (what the display driver expects)

A third, textual form is used for interchange: the flat buffer's values
joined with commas.

All functions here are stateless. Validation always happens before any
output is built, so a failing call never produces a partial result.
"""

import logging
import re
from collections.abc import Sequence

import numpy as np

from glyphbeat.exceptions import ParseError, ShapeMismatchError, SizeMismatchError

from .shape import (
    FLAT_ARRAY_SIZE,
    GLYPH_SHAPE,
    MAX_BRIGHTNESS,
    MAX_COLUMNS,
    MIN_BRIGHTNESS,
    ROW_OFFSETS,
    TOTAL_ROWS,
    shape_mask,
)

logger = logging.getLogger(__name__)

ShapedGrid = list[list[int]]
FlatBuffer = list[int]

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def _check_flat_size(flat: Sequence[int]) -> None:
    if len(flat) != FLAT_ARRAY_SIZE:
        raise SizeMismatchError(FLAT_ARRAY_SIZE, len(flat))


def shaped_to_flat(shaped_grid: Sequence[Sequence[int]]) -> FlatBuffer:
    """
    Convert a shaped grid to the flat 625-cell format.

    Args:
        shaped_grid: 25 rows, row r holding exactly GLYPH_SHAPE[r] values

    Returns:
        List of 625 values with each row centred and inert cells set to 0

    Raises:
        ShapeMismatchError: If the grid does not have 25 rows or a row has
            the wrong number of pixels

    Example:
        >>> flat = shaped_to_flat(create_empty_shaped())
        >>> len(flat)
        625
    """
    if len(shaped_grid) != TOTAL_ROWS:
        raise ShapeMismatchError(TOTAL_ROWS, len(shaped_grid))

    for row, (row_data, expected) in enumerate(zip(shaped_grid, GLYPH_SHAPE)):
        if len(row_data) != expected:
            raise ShapeMismatchError(expected, len(row_data), row=row)

    flat = create_empty_flat()
    for row, row_data in enumerate(shaped_grid):
        start = row * MAX_COLUMNS + ROW_OFFSETS[row]
        flat[start:start + GLYPH_SHAPE[row]] = list(row_data)

    return flat


def flat_to_shaped(flat: Sequence[int]) -> ShapedGrid:
    """
    Convert a flat 625-cell buffer back to a shaped grid.

    Cells outside each row's span are ignored.

    Args:
        flat: Sequence of 625 values

    Returns:
        25 rows, row r holding GLYPH_SHAPE[r] values

    Raises:
        SizeMismatchError: If flat does not have exactly 625 elements
    """
    _check_flat_size(flat)

    shaped = []
    for row, width in enumerate(GLYPH_SHAPE):
        start = row * MAX_COLUMNS + ROW_OFFSETS[row]
        shaped.append([flat[i] for i in range(start, start + width)])
    return shaped


def create_empty_shaped() -> ShapedGrid:
    """Create a shaped grid with every pixel set to 0."""
    return [[0] * width for width in GLYPH_SHAPE]


def create_empty_flat() -> FlatBuffer:
    """Create a flat buffer of 625 zeros."""
    return [0] * FLAT_ARRAY_SIZE


def clamp_brightness(brightness) -> int:
    """
    Clamp a brightness value into [0, 255].

    Never fails: out-of-range values are clamped, not rejected.
    Fractional values are truncated toward zero first. Infinities clamp
    to the nearest bound and NaN maps to 0.

    Example:
        >>> clamp_brightness(-5), clamp_brightness(300), clamp_brightness(128)
        (0, 255, 128)
    """
    if brightness != brightness:  # NaN
        return MIN_BRIGHTNESS
    if brightness >= MAX_BRIGHTNESS:
        return MAX_BRIGHTNESS
    if brightness <= MIN_BRIGHTNESS:
        return MIN_BRIGHTNESS
    return int(brightness)


def parse_pixel_string(pixel_string: str) -> FlatBuffer:
    """
    Parse a comma-separated pixel string into a flat buffer.

    Args:
        pixel_string: 625 decimal integers separated by commas

    Returns:
        List of 625 parsed values (not clamped)

    Raises:
        ParseError: If a token is not an integer or the count is not 625
    """
    tokens = pixel_string.split(",")
    if len(tokens) != FLAT_ARRAY_SIZE:
        raise ParseError(
            f"must contain exactly {FLAT_ARRAY_SIZE} values, got {len(tokens)}"
        )

    values = []
    for index, raw in enumerate(tokens):
        token = raw.strip()
        if not _INTEGER_TOKEN.fullmatch(token):
            raise ParseError("not a decimal integer", token=token, index=index)
        values.append(int(token))
    return values


def flat_array_to_pixel_string(flat: Sequence[int]) -> str:
    """
    Serialise a flat buffer as comma-separated values.

    Raises:
        SizeMismatchError: If flat does not have exactly 625 elements
    """
    _check_flat_size(flat)
    return ",".join(str(int(value)) for value in flat)


def as_matrix(flat: Sequence[int]) -> np.ndarray:
    """
    View a flat buffer as a 25x25 integer matrix indexed [y, x].

    Raises:
        SizeMismatchError: If flat does not have exactly 625 elements
    """
    _check_flat_size(flat)
    return np.asarray(flat, dtype=np.int32).reshape(TOTAL_ROWS, MAX_COLUMNS)


_SHAPE_MASK = np.array(shape_mask(), dtype=bool)


def apply_shape_mask(flat: Sequence[int]) -> FlatBuffer:
    """
    Zero every cell that is not a physical pixel.

    Drawing primitives only check the 25x25 bounds, so they may write into
    the inert corners; the driver requires those cells to be 0.

    Raises:
        SizeMismatchError: If flat does not have exactly 625 elements
    """
    _check_flat_size(flat)
    values = np.asarray(flat, dtype=np.int64)
    masked = np.where(_SHAPE_MASK, values, 0)
    cleared = int(np.count_nonzero(values[~_SHAPE_MASK]))
    if cleared:
        logger.debug(f"Cleared {cleared} inert cells")
    return [int(v) for v in masked]
