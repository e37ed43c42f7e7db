"""Unit tests for the pixel font and the text scroller."""

import numpy as np
import pytest

from conftest import lit_cells, pixel_at
from glyphbeat.animation import (
    create_scroll_buffer,
    extract_matrix_window,
    render_text_to_matrix,
    scroll_step,
    scroll_text_frames,
)
from glyphbeat.matrix import (
    CHAR_HEIGHT,
    CHAR_WIDTH,
    calculate_text_width,
    get_character,
    has_character,
    is_lit_cell,
)

# "I" drawn at column 0, row 9
I_CELLS = (
    {(1, 9), (2, 9), (3, 9)}
    | {(2, y) for y in range(10, 15)}
    | {(1, 15), (2, 15), (3, 15)}
)


def shifted(cells, dx):
    return {(x + dx, y) for x, y in cells}


class TestFont:
    """Test the 5x7 font."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,spacing,width", [("", 1, 0), ("A", 1, 5), ("AB", 1, 11), ("ABC", 2, 19)])
    def test_text_width(self, text, spacing, width):
        """Test width is characters plus the gaps between them."""
        assert calculate_text_width(text, spacing) == width

    @pytest.mark.unit
    def test_glyph(self):
        """Test the crossbar of A is a full row."""
        assert get_character("A")[3] == (True,) * 5
        assert get_character("A")[0] == (False, True, True, True, False)

    @pytest.mark.unit
    def test_missing_character_is_space(self):
        """Test characters without a glyph render as a space."""
        assert not has_character("~")
        assert has_character("z")
        assert get_character("~") == get_character(" ")
        assert not any(any(row) for row in get_character("~"))

    @pytest.mark.unit
    def test_glyph_size(self):
        """Test every glyph is 7 rows of 5 pixels."""
        for char in "0123456789ABCXYZabcxyz.,!-":
            glyph = get_character(char)
            assert len(glyph) == CHAR_HEIGHT
            assert all(len(row) == CHAR_WIDTH for row in glyph)


class TestRenderText:
    """Test drawing text straight into a frame."""

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty text renders a blank frame."""
        assert not any(render_text_to_matrix(""))

    @pytest.mark.unit
    def test_single_character(self):
        """Test I at offset 0 on the default row."""
        frame = render_text_to_matrix("I")
        assert lit_cells(frame) == I_CELLS
        assert set(frame) == {0, 255}

    @pytest.mark.unit
    def test_scrolls_left(self):
        """Test each offset moves the text one column left."""
        assert lit_cells(render_text_to_matrix("I", 1)) == shifted(I_CELLS, -1)

    @pytest.mark.unit
    def test_wraps_after_period(self):
        """Test the loop repeats after text width + 25 and the next copy enters from the right."""
        assert render_text_to_matrix("I", 30) == render_text_to_matrix("I", 0)
        assert lit_cells(render_text_to_matrix("I", 29)) == shifted(I_CELLS, 1)

    @pytest.mark.unit
    def test_brightness(self):
        """Test lit pixels take the clamped brightness."""
        assert max(render_text_to_matrix("I", brightness=100)) == 100
        assert max(render_text_to_matrix("I", brightness=999)) == 255

    @pytest.mark.unit
    def test_clipped_to_shape(self):
        """Test text on the top rows never lands outside the physical pixels."""
        frame = render_text_to_matrix("WWWWW", vertical_offset=0)
        cells = lit_cells(frame)
        assert cells
        assert all(is_lit_cell(x, y) for x, y in cells)
        # Row 0 holds only columns 9-15
        assert pixel_at(frame, 0, 0) == 0


class TestScrollBuffer:
    """Test the pre-rendered scroll strip."""

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty text gives a blank strip of buffer_multiplier widths."""
        strip = create_scroll_buffer("")
        assert strip.shape == (7, 75)
        assert not strip.any()

    @pytest.mark.unit
    def test_repeats_every_period(self):
        """Test copies of the text start every 30 columns for a single character."""
        strip = create_scroll_buffer("I")
        assert strip.shape == (7, 75)
        assert list(np.flatnonzero(strip[0])) == [1, 2, 3, 31, 32, 33, 61, 62, 63]

    @pytest.mark.unit
    def test_long_text_width(self):
        """Test long text widens the strip to text width + 50."""
        assert create_scroll_buffer("HELLO WORLD").shape == (7, 115)

    @pytest.mark.unit
    def test_window_matches_direct_render(self):
        """Test a window of the strip matches rendering on the same rows."""
        strip = create_scroll_buffer("I")
        assert extract_matrix_window(strip, 0) == render_text_to_matrix("I", 0)
        assert extract_matrix_window(strip, 3) == render_text_to_matrix("I", 3)

    @pytest.mark.unit
    def test_window_follows_row_offsets(self):
        """Test narrow rows take strip columns from their own left edge."""
        strip = create_scroll_buffer("I")
        frame = extract_matrix_window(strip, 0, vertical_offset=20)
        # Row 20 starts at column 2, so strip columns 1-3 land on 3-5
        assert [pixel_at(frame, x, 20) for x in range(2, 7)] == [0, 255, 255, 255, 0]
        # Strip rows below the matrix are dropped
        assert all(y < 25 for _, y in lit_cells(frame))

    @pytest.mark.unit
    def test_window_wraps(self):
        """Test the window offset wraps at the strip width."""
        strip = create_scroll_buffer("I")
        assert extract_matrix_window(strip, 75) == extract_matrix_window(strip, 0)


class TestScrollSequence:
    """Test scrolling text sequences."""

    @pytest.mark.unit
    def test_frames_follow_speed(self):
        """Test frame k is the text scrolled by k * speed."""
        frames = scroll_text_frames("I", 4, scroll_speed=2)
        assert frames == [render_text_to_matrix("I", 2 * k) for k in range(4)]

    @pytest.mark.unit
    def test_default_length_is_one_loop(self):
        """Test the default sequence covers exactly one loop."""
        assert len(scroll_text_frames("I")) == 30
        assert len(scroll_text_frames("I", scroll_speed=4)) == 8

    @pytest.mark.unit
    @pytest.mark.parametrize("speed,step", [(1, 1), (5, 2), (10, 4), (0, 1), (42, 4)])
    def test_scroll_step(self, speed, step):
        """Test the 1-10 speed table, clamped at both ends."""
        assert scroll_step(speed) == step
