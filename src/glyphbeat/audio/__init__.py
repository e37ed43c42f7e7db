"""Audio analysis for audio-reactive animations."""

from .analyzer import (
    AudioLevels,
    BeatDetector,
    analyze,
    analyze_spectrum,
    beat_pattern,
    rms_level,
    simulated_levels,
)

__all__ = [
    "AudioLevels",
    "BeatDetector",
    "analyze",
    "analyze_spectrum",
    "beat_pattern",
    "rms_level",
    "simulated_levels",
]
