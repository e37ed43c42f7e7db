"""Unit tests for the Glyph Matrix shape table."""

import pytest

from glyphbeat.exceptions import RangeError
from glyphbeat.matrix import (
    CENTER_X,
    CENTER_Y,
    FLAT_ARRAY_SIZE,
    GLYPH_SHAPE,
    MAX_COLUMNS,
    ROW_OFFSETS,
    TOTAL_ROWS,
    get_row_offset,
    get_row_width,
    in_bounds,
    is_lit_cell,
    shape_mask,
)


class TestShapeTable:
    """Test the static shape constants."""

    @pytest.mark.unit
    def test_table_values(self):
        """Test the row widths top to bottom."""
        assert GLYPH_SHAPE == (
            7, 11, 15, 17, 19, 21, 21, 23, 23, 25,
            25, 25, 25, 25, 25, 25, 23, 23, 21, 21,
            19, 17, 15, 11, 7,
        )

    @pytest.mark.unit
    def test_dimensions(self):
        """Test buffer dimensions and centre."""
        assert TOTAL_ROWS == 25
        assert MAX_COLUMNS == 25
        assert FLAT_ARRAY_SIZE == 625
        assert (CENTER_X, CENTER_Y) == (12, 12)

    @pytest.mark.unit
    def test_widths_fit_and_are_odd(self):
        """Test every row fits the rectangle and can be centred exactly."""
        for width in GLYPH_SHAPE:
            assert 0 < width <= MAX_COLUMNS
            assert width % 2 == 1

    @pytest.mark.unit
    def test_rows_are_centred(self):
        """Test offset + width + offset == 25 for every row."""
        for offset, width in zip(ROW_OFFSETS, GLYPH_SHAPE):
            assert offset * 2 + width == MAX_COLUMNS

    @pytest.mark.unit
    def test_vertical_symmetry(self):
        """Test the diamond is symmetric top to bottom."""
        assert GLYPH_SHAPE == GLYPH_SHAPE[::-1]

    @pytest.mark.unit
    def test_real_pixel_count(self):
        """Test the number of physical pixels."""
        assert sum(GLYPH_SHAPE) == 489


class TestRowAccessors:
    """Test get_row_width and get_row_offset."""

    @pytest.mark.unit
    def test_row_width(self):
        """Test widths at top, middle and bottom."""
        assert get_row_width(0) == 7
        assert get_row_width(12) == 25
        assert get_row_width(24) == 7

    @pytest.mark.unit
    def test_row_offset(self):
        """Test offsets at top, middle and bottom."""
        assert get_row_offset(0) == 9
        assert get_row_offset(1) == 7
        assert get_row_offset(12) == 0
        assert get_row_offset(24) == 9

    @pytest.mark.unit
    @pytest.mark.parametrize("row", [-1, 25, 100])
    def test_out_of_range(self, row):
        """Test rows outside 0-24 raise RangeError."""
        with pytest.raises(RangeError) as exc_info:
            get_row_width(row)
        assert exc_info.value.row == row
        assert "between 0 and 24" in str(exc_info.value)

        with pytest.raises(RangeError):
            get_row_offset(row)

    @pytest.mark.unit
    def test_non_integer_row(self):
        """Test non-integer rows raise RangeError."""
        with pytest.raises(RangeError):
            get_row_width(1.5)
        with pytest.raises(RangeError):
            get_row_offset("3")


class TestCellHelpers:
    """Test bounds and real-pixel checks."""

    @pytest.mark.unit
    def test_in_bounds(self):
        """Test the 25x25 rectangle bounds."""
        assert in_bounds(0, 0)
        assert in_bounds(24, 24)
        assert not in_bounds(-1, 0)
        assert not in_bounds(0, 25)

    @pytest.mark.unit
    def test_is_lit_cell(self):
        """Test corners are inert and row spans are real."""
        assert not is_lit_cell(0, 0)
        assert not is_lit_cell(8, 0)
        assert is_lit_cell(9, 0)
        assert is_lit_cell(15, 0)
        assert not is_lit_cell(16, 0)
        assert is_lit_cell(0, 12)
        assert not is_lit_cell(25, 12)

    @pytest.mark.unit
    def test_shape_mask(self):
        """Test the mask has one True entry per physical pixel."""
        mask = shape_mask()
        assert len(mask) == FLAT_ARRAY_SIZE
        assert sum(mask) == sum(GLYPH_SHAPE)
