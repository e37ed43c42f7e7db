"""Pytest fixtures for tests."""

import pytest

from glyphbeat.matrix import (
    GLYPH_SHAPE,
    MAX_COLUMNS,
    create_empty_flat,
    create_empty_shaped,
    flat_array_to_pixel_string,
)


def pixel_at(flat, x, y):
    """Value of the flat buffer cell at (x, y)."""
    return flat[y * MAX_COLUMNS + x]


def lit_cells(flat):
    """Set of (x, y) cells with a non-zero value."""
    return {(i % MAX_COLUMNS, i // MAX_COLUMNS) for i, v in enumerate(flat) if v}


@pytest.fixture
def empty_flat():
    """A flat buffer of 625 zeros."""
    return create_empty_flat()


@pytest.fixture
def numbered_shaped():
    """Shaped grid where every pixel holds a distinct value (row * 100 + column)."""
    return [[row * 100 + col for col in range(width)] for row, width in enumerate(GLYPH_SHAPE)]


@pytest.fixture
def single_pixel_shaped():
    """Shaped grid with only the first pixel of row 0 lit at 200."""
    grid = create_empty_shaped()
    grid[0][0] = 200
    return grid


@pytest.fixture
def full_bright_pixel_string():
    """Pixel string for a buffer with only the centre cell at 255."""
    flat = create_empty_flat()
    flat[12 * MAX_COLUMNS + 12] = 255
    return flat_array_to_pixel_string(flat)
