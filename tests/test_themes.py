"""Unit tests for the shape, beat pulse and waveform generators."""

import math

import pytest

from conftest import lit_cells, pixel_at
from glyphbeat.animation import (
    beat_intensity,
    beat_pulse_frames,
    draw_beat_pulse_frame,
    draw_shape,
    draw_waveform_frame,
    shape_frames,
    waveform_frames,
)
from glyphbeat.matrix import is_lit_cell
from glyphbeat.models import ShapeStyle


def distance(x, y):
    return math.hypot(x - 12, y - 12)


class TestShapes:
    """Test the static shape patterns."""

    @pytest.mark.unit
    @pytest.mark.parametrize("style", list(ShapeStyle))
    def test_cut_to_disc(self, style, empty_flat):
        """Test every style stays within radius 12.5 and on real pixels."""
        draw_shape(empty_flat, style)
        cells = lit_cells(empty_flat)
        assert cells
        for x, y in cells:
            assert distance(x, y) <= 12.5
            assert is_lit_cell(x, y)

    @pytest.mark.unit
    def test_cross(self, empty_flat):
        """Test the cross is three rows and three columns wide."""
        draw_shape(empty_flat, ShapeStyle.CROSS)
        for x, y in lit_cells(empty_flat):
            assert 11 <= x <= 13 or 11 <= y <= 13
        assert pixel_at(empty_flat, 0, 12) == 255
        assert pixel_at(empty_flat, 12, 0) == 255
        assert pixel_at(empty_flat, 5, 5) == 0

    @pytest.mark.unit
    def test_dots(self, empty_flat):
        """Test nine 3x3 dots."""
        draw_shape(empty_flat, ShapeStyle.DOTS)
        assert len(lit_cells(empty_flat)) == 81
        assert {(5, 5), (6, 6), (7, 7), (18, 12), (19, 19)} <= lit_cells(empty_flat)
        assert pixel_at(empty_flat, 9, 9) == 0

    @pytest.mark.unit
    def test_lines(self, empty_flat):
        """Test five horizontal lines."""
        draw_shape(empty_flat, ShapeStyle.LINES)
        assert {y for _, y in lit_cells(empty_flat)} == {4, 8, 12, 16, 20}
        assert sum(1 for x, y in lit_cells(empty_flat) if y == 12) == 25

    @pytest.mark.unit
    def test_border(self, empty_flat):
        """Test a ring two pixels deep at the edge."""
        draw_shape(empty_flat, ShapeStyle.BORDER)
        for x, y in lit_cells(empty_flat):
            assert distance(x, y) >= 10.5
        assert pixel_at(empty_flat, 1, 12) == 255
        assert pixel_at(empty_flat, 2, 12) == 0
        assert pixel_at(empty_flat, 12, 12) == 0

    @pytest.mark.unit
    def test_diamond(self, empty_flat):
        """Test cells at Manhattan distance 6 to 8."""
        draw_shape(empty_flat, ShapeStyle.DIAMOND)
        for x, y in lit_cells(empty_flat):
            assert 6 <= abs(x - 12) + abs(y - 12) <= 8
        assert pixel_at(empty_flat, 12, 6) == 255
        assert pixel_at(empty_flat, 12, 3) == 0

    @pytest.mark.unit
    def test_grid(self, empty_flat):
        """Test every fourth row and column."""
        draw_shape(empty_flat, ShapeStyle.GRID)
        for x, y in lit_cells(empty_flat):
            assert x % 4 == 0 or y % 4 == 0
        assert pixel_at(empty_flat, 4, 4) == 255
        assert pixel_at(empty_flat, 13, 13) == 0

    @pytest.mark.unit
    def test_style_by_name(self, empty_flat):
        """Test styles can be given by their string value."""
        by_name = [0] * 625
        draw_shape(by_name, "grid")
        draw_shape(empty_flat, ShapeStyle.GRID)
        assert by_name == empty_flat

    @pytest.mark.unit
    def test_frames_are_static(self):
        """Test a shape sequence repeats the same frame at the given brightness."""
        frames = shape_frames(4, ShapeStyle.DIAMOND, brightness=300)
        assert len(frames) == 4
        assert all(frame == frames[0] for frame in frames)
        assert set(frames[0]) == {0, 255}


class TestBeatPulse:
    """Test the layered beat pulse."""

    @pytest.mark.unit
    def test_envelope(self):
        """Test the envelope starts at 0.5 and stays in [0, 1]."""
        assert beat_intensity(0.0) == pytest.approx(0.5)
        assert beat_intensity(0.25) == pytest.approx(2.4 / 2.8)
        for step in range(64):
            assert 0.0 <= beat_intensity(step / 64) <= 1.0

    @pytest.mark.unit
    def test_strong_beat_frame(self, empty_flat):
        """Test a quarter of the way in: radius 9, layers 3/6/9, lit centre."""
        draw_beat_pulse_frame(empty_flat, 1, 4, max_radius=11, brightness=255)
        # Core layer at full beat brightness (255 * 0.857)
        assert pixel_at(empty_flat, 15, 12) == 218
        # Outer layer at 0.4 of that
        assert pixel_at(empty_flat, 21, 12) == 87
        assert pixel_at(empty_flat, 18, 12) > 0
        # Strong beat lights the centre at full brightness
        assert pixel_at(empty_flat, 12, 12) == 255

    @pytest.mark.unit
    def test_quiet_frame(self, empty_flat):
        """Test the first frame: envelope 0.5, no centre pixel."""
        draw_beat_pulse_frame(empty_flat, 0, 4, max_radius=11, brightness=255)
        assert pixel_at(empty_flat, 13, 12) == 127
        assert pixel_at(empty_flat, 12, 12) == 0
        # Outer layer has radius 5
        assert max(distance(x, y) for x, y in lit_cells(empty_flat)) < 6

    @pytest.mark.unit
    def test_sequence(self):
        """Test length, determinism and that the pulse changes."""
        frames = beat_pulse_frames(16)
        assert len(frames) == 16
        assert frames == beat_pulse_frames(16, max_workers=4)
        assert frames[0] != frames[4]


class TestWaveform:
    """Test the scrolling waveform."""

    @pytest.mark.unit
    def test_one_pixel_per_column(self, empty_flat):
        """Test thickness 1 without the centre line."""
        draw_waveform_frame(empty_flat, 0, 8, thickness=1, center_line=False)
        cells = lit_cells(empty_flat)
        assert sorted(x for x, _ in cells) == list(range(25))
        assert pixel_at(empty_flat, 0, 12) == 178
        assert set(empty_flat) == {0, 178}

    @pytest.mark.unit
    def test_center_line(self, empty_flat):
        """Test the dim centre line never covers the wave."""
        draw_waveform_frame(empty_flat, 0, 8, thickness=1)
        assert all(pixel_at(empty_flat, x, 12) > 0 for x in range(25))
        assert pixel_at(empty_flat, 0, 12) == 178
        assert set(empty_flat) == {0, 51, 178}

    @pytest.mark.unit
    def test_thickness(self, empty_flat):
        """Test thickness 3 lights one row above and below; larger values clamp."""
        draw_waveform_frame(empty_flat, 0, 8, thickness=3, center_line=False)
        assert [pixel_at(empty_flat, 0, y) for y in (11, 12, 13)] == [178, 178, 178]

        clamped = [0] * 625
        draw_waveform_frame(clamped, 0, 8, thickness=9, center_line=False)
        assert clamped == empty_flat

    @pytest.mark.unit
    def test_scrolls(self):
        """Test the wave moves over the sequence."""
        frames = waveform_frames(8)
        assert len(frames) == 8
        assert frames[0] != frames[2]
