"""Audio level extraction for audio-reactive animations.

Turns raw PCM samples into the 0-1 levels the spectrum renderer consumes:

- bass / mid / treble: peak spectral magnitude inside each frequency band
- beat intensity: normalised RMS of the block, gated by BeatDetector

When no audio is available, simulated_levels() produces a deterministic
demo signal so audio-reactive animations still move.
"""

import logging
import math
from collections.abc import Sequence
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Band edges as fractions of the usable spectrum
BASS_BAND_END = 0.08
MID_BAND_END = 0.40


class AudioLevels(BaseModel):
    """Snapshot of audio analysis results, every level in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    beat_intensity: float = Field(default=0.0, ge=0.0, le=1.0)
    bass_level: float = Field(default=0.0, ge=0.0, le=1.0)
    mid_level: float = Field(default=0.0, ge=0.0, le=1.0)
    treble_level: float = Field(default=0.0, ge=0.0, le=1.0)
    is_playing: bool = False

    @classmethod
    def silent(cls) -> "AudioLevels":
        """Create an all-zero, not-playing snapshot."""
        return cls()


def _clamp01(value: float) -> float:
    return float(min(1.0, max(0.0, value)))


def _as_samples(samples: Sequence[float]) -> np.ndarray:
    data = np.asarray(samples, dtype=np.float64)
    if data.ndim != 1 or data.size == 0:
        raise ValueError(f"Expected a non-empty 1-D block of samples, got shape {data.shape}")
    return data


def rms_level(samples: Sequence[float]) -> float:
    """
    Root-mean-square level of a block of samples.

    Args:
        samples: Mono samples normalised to [-1.0, 1.0]

    Returns:
        RMS clamped to [0, 1]

    Raises:
        ValueError: If samples is empty or not one-dimensional
    """
    data = _as_samples(samples)
    return _clamp01(math.sqrt(float(np.mean(data * data))))


def analyze_spectrum(samples: Sequence[float]) -> tuple[float, float, float]:
    """
    Split a block of samples into bass, mid and treble levels.

    The DC bin is dropped; the remaining bins are split at 8 % and 40 % of
    the spectrum. Magnitudes are scaled so a full-scale sine lands at 1.0,
    and each band reports its strongest bin.

    Args:
        samples: Mono samples normalised to [-1.0, 1.0]

    Returns:
        Tuple of (bass, mid, treble), each in [0, 1]

    Raises:
        ValueError: If samples is empty or not one-dimensional
    """
    data = _as_samples(samples)
    magnitudes = np.abs(np.fft.rfft(data))[1:] / (data.size / 2)

    bins = magnitudes.size
    bass_end = max(1, int(bins * BASS_BAND_END))
    mid_end = max(bass_end, int(bins * MID_BAND_END))

    def band_level(band: np.ndarray) -> float:
        return _clamp01(float(band.max())) if band.size else 0.0

    return (
        band_level(magnitudes[:bass_end]),
        band_level(magnitudes[bass_end:mid_end]),
        band_level(magnitudes[mid_end:]),
    )


def analyze(samples: Sequence[float]) -> AudioLevels:
    """Full analysis of one block of samples."""
    bass, mid, treble = analyze_spectrum(samples)
    levels = AudioLevels(
        beat_intensity=rms_level(samples),
        bass_level=bass,
        mid_level=mid,
        treble_level=treble,
        is_playing=True,
    )
    logger.debug(f"Analyzed {len(samples)} samples: {levels}")
    return levels


def beat_pattern(progress: float) -> float:
    """
    Beat envelope for a position inside one beat.

    Strong punch on the downbeat (positive half of a squared sine) with
    smaller sub- and micro-beats layered on top.

    Args:
        progress: Position inside the beat, 0.0-1.0

    Returns:
        Intensity in [0, 1]
    """
    main_beat = math.sin(progress * 2 * math.pi)
    main_beat = main_beat * main_beat if main_beat > 0 else 0.0
    sub_beat = math.sin(progress * 4 * math.pi) * 0.3
    micro_beat = math.sin(progress * 8 * math.pi) * 0.1
    return _clamp01(main_beat + sub_beat + micro_beat)


def simulated_levels(t: float, bpm: float = 128.0) -> AudioLevels:
    """
    Deterministic demo levels at time t (seconds).

    Used when no audio source is available. Same t always gives the same
    snapshot, so sequences built from it are restartable.
    """
    progress = (t * bpm / 60.0) % 1.0
    return AudioLevels(
        beat_intensity=beat_pattern(progress),
        bass_level=_clamp01(math.sin(t * 2.0) * 0.5 + 0.5),
        mid_level=_clamp01(math.sin(t * 3.0) * 0.3 + 0.4),
        treble_level=_clamp01(math.sin(t * 5.0) * 0.2 + 0.3),
        is_playing=False,
    )


class BeatDetector:
    """
    Energy-based beat detector.

    A beat fires when the RMS level crosses the threshold and enough time has
    passed since the previous beat; between beats the intensity decays.
    Timestamps are supplied by the caller, so the detector never reads a clock.
    """

    def __init__(self, threshold: float = 0.3, min_interval: float = 0.2, decay: float = 0.95):
        """
        Args:
            threshold: RMS level a block must exceed to count as a beat
            min_interval: Minimum seconds between two beats
            decay: Multiplier applied to the intensity on non-beat updates
        """
        self.threshold = threshold
        self.min_interval = min_interval
        self.decay = decay
        self.intensity = 0.0
        self._last_beat: Optional[float] = None

    def update(self, rms: float, timestamp: float) -> float:
        """
        Feed one RMS reading and get the current beat intensity.

        Args:
            rms: Normalised RMS level of the latest block
            timestamp: Time of the reading in seconds

        Returns:
            Beat intensity in [0, 1]
        """
        ready = self._last_beat is None or timestamp - self._last_beat > self.min_interval
        if rms > self.threshold and ready:
            self._last_beat = timestamp
            self.intensity = _clamp01(rms)
            logger.debug(f"Beat at {timestamp:.3f}s (rms={rms:.2f})")
        else:
            self.intensity = max(self.intensity * self.decay, 0.0)
        return self.intensity

    def reset(self) -> None:
        """Forget previous beats."""
        self.intensity = 0.0
        self._last_beat = None
