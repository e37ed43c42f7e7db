"""Enumerations for glyphbeat."""

from enum import Enum


class AnimationPattern(str, Enum):
    """Built-in frame sequence generators."""

    ROTATING_LINE = "rotating_line"  # Line sweeping around the centre
    PULSE = "pulse"  # Circle growing then shrinking around a centre dot
    WAVE = "wave"  # One-pixel sine wave scrolling across the matrix
    HORIZONTAL_WAVE = "horizontal_wave"  # Sine wave with clamped amplitude and thickness
    SPECTRUM = "spectrum"  # Bass/mid/treble bands driven by simulated audio levels
    SHAPE = "shape"  # Static geometric pattern, see ShapeStyle
    BEAT_PULSE = "beat_pulse"  # Three circle layers following a layered beat envelope
    WAVEFORM = "waveform"  # Two-harmonic wave scrolling over a dim centre line
    SCROLL_TEXT = "scroll_text"  # Text in the 5x7 pixel font scrolling right to left


class ShapeStyle(str, Enum):
    """Patterns drawn by the shape generator."""

    CROSS = "cross"
    DOTS = "dots"
    LINES = "lines"
    BORDER = "border"
    DIAMOND = "diamond"
    GRID = "grid"
