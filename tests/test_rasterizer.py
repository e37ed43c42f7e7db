"""Unit tests for drawing primitives."""

import pytest

from conftest import lit_cells, pixel_at
from glyphbeat.matrix import draw_circle, draw_dot, draw_line, fill_grid, round_half_up


class TestRoundHalfUp:
    """Test coordinate rounding."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(0.4, 0), (0.5, 1), (2.5, 3), (-0.4, 0), (-0.5, 0), (-0.6, -1), (1e-15, 0), (-1e-15, 0)],
    )
    def test_round(self, value, expected):
        """Test halves round toward +infinity."""
        assert round_half_up(value) == expected


class TestDrawLine:
    """Test line drawing."""

    @pytest.mark.unit
    def test_horizontal_line(self, empty_flat):
        """Test a horizontal line lights every cell between the endpoints."""
        draw_line(empty_flat, 12, 12, 20, 12, 255)
        assert lit_cells(empty_flat) == {(x, 12) for x in range(12, 21)}

    @pytest.mark.unit
    def test_diagonal_line(self, empty_flat):
        """Test a 45 degree line."""
        draw_line(empty_flat, 0, 0, 3, 3, 100)
        assert lit_cells(empty_flat) == {(0, 0), (1, 1), (2, 2), (3, 3)}
        assert pixel_at(empty_flat, 2, 2) == 100

    @pytest.mark.unit
    def test_reversed_endpoints(self, empty_flat):
        """Test direction does not matter for an axis-aligned line."""
        draw_line(empty_flat, 5, 10, 5, 4, 255)
        assert lit_cells(empty_flat) == {(5, y) for y in range(4, 11)}

    @pytest.mark.unit
    def test_single_point(self, empty_flat):
        """Test identical endpoints plot one cell."""
        draw_line(empty_flat, 7, 7, 7, 7, 255)
        assert lit_cells(empty_flat) == {(7, 7)}

    @pytest.mark.unit
    def test_clipped_at_bounds(self, empty_flat):
        """Test points outside the rectangle are skipped."""
        draw_line(empty_flat, 20, 0, 30, 0, 255)
        assert lit_cells(empty_flat) == {(x, 0) for x in range(20, 25)}

    @pytest.mark.unit
    def test_brightness_clamped(self, empty_flat):
        """Test brightness above 255 is written as 255."""
        draw_line(empty_flat, 0, 12, 2, 12, 999)
        assert pixel_at(empty_flat, 1, 12) == 255


class TestDrawCircle:
    """Test circle outlines."""

    @pytest.mark.unit
    def test_radius_one(self, empty_flat):
        """Test radius 1 samples every 45 degrees: the 8 neighbours."""
        draw_circle(empty_flat, 12, 12, 1, 255)
        expected = {
            (12 + dx, 12 + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        }
        assert lit_cells(empty_flat) == expected

    @pytest.mark.unit
    def test_radius_zero(self, empty_flat):
        """Test radius 0 plots the centre only."""
        draw_circle(empty_flat, 12, 12, 0, 255)
        assert lit_cells(empty_flat) == {(12, 12)}

    @pytest.mark.unit
    def test_negative_radius(self, empty_flat):
        """Test a negative radius draws nothing."""
        draw_circle(empty_flat, 12, 12, -3, 255)
        assert not lit_cells(empty_flat)

    @pytest.mark.unit
    def test_points_on_axes(self, empty_flat):
        """Test the four axis points of a larger circle."""
        draw_circle(empty_flat, 12, 12, 10, 200)
        for x, y in [(22, 12), (12, 22), (2, 12), (12, 2)]:
            assert pixel_at(empty_flat, x, y) == 200
        assert pixel_at(empty_flat, 12, 12) == 0

    @pytest.mark.unit
    def test_clipped_circle(self, empty_flat):
        """Test a circle partly off the rectangle does not fail."""
        draw_circle(empty_flat, 0, 0, 5, 255)
        assert (5, 0) in lit_cells(empty_flat)
        assert (0, 5) in lit_cells(empty_flat)

    @pytest.mark.unit
    def test_huge_radius(self, empty_flat):
        """Test radii above 45 (angle step below one degree) do not fail."""
        draw_circle(empty_flat, 12, 12, 60, 255)
        assert not lit_cells(empty_flat)
        draw_circle(empty_flat, -38, 12, 50, 255)
        assert (12, 12) in lit_cells(empty_flat)


class TestDrawDot:
    """Test filled disks."""

    @pytest.mark.unit
    def test_radius_one(self, empty_flat):
        """Test radius 1 is the centre plus its 4 direct neighbours."""
        draw_dot(empty_flat, 12, 12, 1, 255)
        assert lit_cells(empty_flat) == {(12, 12), (11, 12), (13, 12), (12, 11), (12, 13)}

    @pytest.mark.unit
    def test_radius_two(self, empty_flat):
        """Test radius 2 covers 13 cells."""
        draw_dot(empty_flat, 12, 12, 2, 255)
        assert len(lit_cells(empty_flat)) == 13

    @pytest.mark.unit
    def test_radius_zero(self, empty_flat):
        """Test radius 0 is a single pixel."""
        draw_dot(empty_flat, 3, 4, 0, 50)
        assert lit_cells(empty_flat) == {(3, 4)}
        assert pixel_at(empty_flat, 3, 4) == 50

    @pytest.mark.unit
    def test_overwrites(self, empty_flat):
        """Test later draws replace earlier values."""
        draw_dot(empty_flat, 12, 12, 2, 255)
        draw_dot(empty_flat, 12, 12, 0, 10)
        assert pixel_at(empty_flat, 12, 12) == 10
        assert pixel_at(empty_flat, 12, 10) == 255


class TestFillGrid:
    """Test filling the whole buffer."""

    @pytest.mark.unit
    def test_fill(self, empty_flat):
        """Test every cell is set, inert corners included."""
        fill_grid(empty_flat, 77)
        assert empty_flat == [77] * 625

    @pytest.mark.unit
    def test_fill_clamps(self, empty_flat):
        """Test fill values are clamped."""
        fill_grid(empty_flat, -20)
        assert empty_flat == [0] * 625
