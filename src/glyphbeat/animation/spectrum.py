"""Audio spectrum renderer.

Draws up to three sine bands whose amplitude and brightness follow the
bass, mid and treble levels. Bands sit on fixed baseline rows:

    row  6: treble (fast wave, small amplitude)
    row 12: mid
    row 18: bass (slow wave, large amplitude)

Bands are drawn bass first, treble last, so a higher band overwrites a
lower one where they cross.
"""

import logging
import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from glyphbeat.audio import AudioLevels
from glyphbeat.matrix import (
    MAX_COLUMNS,
    FlatBuffer,
    clamp_brightness,
    create_empty_flat,
    in_bounds,
    round_half_up,
)

logger = logging.getLogger(__name__)

# Levels at or below this are treated as silence for the band
LEVEL_THRESHOLD = 0.05


@dataclass(frozen=True)
class SpectrumBand:
    """Drawing parameters for one frequency band."""
    name: str
    baseline_row: int
    max_amplitude: int       # Also the level-to-amplitude scale
    brightness_scale: float
    frequency: float         # Wave cycles factor across the display


BASS_BAND = SpectrumBand("bass", baseline_row=18, max_amplitude=6, brightness_scale=0.9, frequency=0.8)
MID_BAND = SpectrumBand("mid", baseline_row=12, max_amplitude=4, brightness_scale=0.8, frequency=1.5)
TREBLE_BAND = SpectrumBand("treble", baseline_row=6, max_amplitude=3, brightness_scale=0.7, frequency=2.5)


def _phase_offset(frame_index: int, frame_count: int) -> float:
    if frame_count <= 1:
        return 0.0
    return frame_index * 2 * math.pi / frame_count


def _draw_band(
    buf: MutableSequence[int],
    band: SpectrumBand,
    level: float,
    phase: float,
    max_brightness: int,
) -> None:
    # Levels above 1.0 (including inf) draw as full level
    level = min(level, 1.0)
    amplitude = max(1, min(band.max_amplitude, round_half_up(level * band.max_amplitude)))
    value = clamp_brightness(max_brightness * level * band.brightness_scale)

    for x in range(MAX_COLUMNS):
        y = band.baseline_row + round_half_up(
            math.sin(x * band.frequency * math.pi / MAX_COLUMNS + phase) * amplitude
        )
        if in_bounds(x, y):
            buf[y * MAX_COLUMNS + x] = value


def draw_audio_spectrum_waves(
    buf: MutableSequence[int],
    bass_level: float,
    mid_level: float,
    treble_level: float,
    frame_index: int = 0,
    frame_count: int = 1,
    max_brightness: int = 255,
) -> None:
    """
    Draw the bass, mid and treble bands into a flat buffer.

    A band is skipped when its level is 0.05 or lower.

    Args:
        buf: Flat buffer to draw into
        bass_level: Bass level (0.0-1.0)
        mid_level: Mid level (0.0-1.0)
        treble_level: Treble level (0.0-1.0)
        frame_index: Current frame, sets the shared wave phase
        frame_count: Frames per cycle (phase is 0 when <= 1)
        max_brightness: Brightness of a band at level 1.0 before its scale
    """
    phase = _phase_offset(frame_index, frame_count)

    for band, level in ((BASS_BAND, bass_level), (MID_BAND, mid_level), (TREBLE_BAND, treble_level)):
        if level > LEVEL_THRESHOLD:
            _draw_band(buf, band, level, phase, max_brightness)


def audio_spectrum_frames(levels: Sequence[AudioLevels], max_brightness: int = 255) -> list[FlatBuffer]:
    """
    Build one frame per audio snapshot.

    The sequence length is the frame count, so the waves complete one phase
    cycle over the sequence.
    """
    frame_count = len(levels)
    frames = []
    for frame_index, snapshot in enumerate(levels):
        buf = create_empty_flat()
        draw_audio_spectrum_waves(
            buf,
            snapshot.bass_level,
            snapshot.mid_level,
            snapshot.treble_level,
            frame_index=frame_index,
            frame_count=frame_count,
            max_brightness=max_brightness,
        )
        frames.append(buf)

    logger.debug(f"Built {frame_count} spectrum frames")
    return frames
