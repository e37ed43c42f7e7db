"""Physical layout of the Glyph Matrix.

The matrix is a 25-row diamond where each row holds a different number of
pixels. Rows are centred inside a 25x25 rectangle, so a row of width w
starts at column (25 - w) // 2:

    row  0:  7 pixels, columns  9-15
    row  9: 25 pixels, columns  0-24
    row 24:  7 pixels, columns  9-15
"""

import operator

from glyphbeat.exceptions import RangeError

# Pixel count for each row, top to bottom
GLYPH_SHAPE: tuple[int, ...] = (
    7, 11, 15, 17, 19, 21, 21, 23, 23, 25,
    25, 25, 25, 25, 25, 25, 23, 23, 21, 21,
    19, 17, 15, 11, 7,
)

TOTAL_ROWS = 25
MAX_COLUMNS = 25
FLAT_ARRAY_SIZE = TOTAL_ROWS * MAX_COLUMNS  # 625

CENTER_X = MAX_COLUMNS // 2
CENTER_Y = TOTAL_ROWS // 2

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 255

# First column of each row once centred in the flat buffer
ROW_OFFSETS: tuple[int, ...] = tuple((MAX_COLUMNS - width) // 2 for width in GLYPH_SHAPE)


def _validate_row(row) -> int:
    try:
        index = operator.index(row)
    except TypeError:
        raise RangeError(row, TOTAL_ROWS) from None
    if not 0 <= index < TOTAL_ROWS:
        raise RangeError(row, TOTAL_ROWS)
    return index


def get_row_width(row: int) -> int:
    """
    Get the number of real pixels in a row.

    Args:
        row: Row index (0-24)

    Returns:
        Number of pixels in that row

    Raises:
        RangeError: If row is not an integer in [0, 24]
    """
    return GLYPH_SHAPE[_validate_row(row)]


def get_row_offset(row: int) -> int:
    """
    Get the starting column of a row inside the flat buffer.

    Args:
        row: Row index (0-24)

    Returns:
        Column where the row's first real pixel sits

    Raises:
        RangeError: If row is not an integer in [0, 24]
    """
    return ROW_OFFSETS[_validate_row(row)]


def in_bounds(x: int, y: int) -> bool:
    """Check whether (x, y) lies inside the 25x25 rectangle."""
    return 0 <= x < MAX_COLUMNS and 0 <= y < TOTAL_ROWS


def is_lit_cell(x: int, y: int) -> bool:
    """Check whether (x, y) is a physically real pixel of the matrix."""
    if not in_bounds(x, y):
        return False
    start = ROW_OFFSETS[y]
    return start <= x < start + GLYPH_SHAPE[y]


def shape_mask() -> tuple[bool, ...]:
    """Row-major 625-entry mask, True for real pixels."""
    return tuple(
        is_lit_cell(x, y)
        for y in range(TOTAL_ROWS)
        for x in range(MAX_COLUMNS)
    )
