"""Frame sequence generators, themes, scrolling text and the audio spectrum renderer."""

from .frames import (
    draw_horizontal_wave,
    draw_pulse_frame,
    draw_rotating_line_frame,
    draw_wave_frame,
    frame_drawer,
    horizontal_wave_frames,
    pulse_frames,
    render_frames,
    rotating_line_frames,
    wave_frames,
)
from .sequence import FrameDrawer, build_frames, iter_frames
from .spectrum import (
    BASS_BAND,
    LEVEL_THRESHOLD,
    MID_BAND,
    TREBLE_BAND,
    SpectrumBand,
    audio_spectrum_frames,
    draw_audio_spectrum_waves,
)
from .text import (
    create_scroll_buffer,
    draw_scroll_text_frame,
    extract_matrix_window,
    render_text_to_matrix,
    scroll_period,
    scroll_step,
    scroll_text_frames,
)
from .themes import (
    beat_intensity,
    beat_pulse_frames,
    draw_beat_pulse_frame,
    draw_shape,
    draw_shape_frame,
    draw_waveform_frame,
    shape_frames,
    waveform_frames,
)

__all__ = [
    # Sequences
    "FrameDrawer",
    "build_frames",
    "iter_frames",
    # Frames
    "draw_horizontal_wave",
    "draw_pulse_frame",
    "draw_rotating_line_frame",
    "draw_wave_frame",
    "frame_drawer",
    "horizontal_wave_frames",
    "pulse_frames",
    "render_frames",
    "rotating_line_frames",
    "wave_frames",
    # Spectrum
    "BASS_BAND",
    "LEVEL_THRESHOLD",
    "MID_BAND",
    "TREBLE_BAND",
    "SpectrumBand",
    "audio_spectrum_frames",
    "draw_audio_spectrum_waves",
    # Text
    "create_scroll_buffer",
    "draw_scroll_text_frame",
    "extract_matrix_window",
    "render_text_to_matrix",
    "scroll_period",
    "scroll_step",
    "scroll_text_frames",
    # Themes
    "beat_intensity",
    "beat_pulse_frames",
    "draw_beat_pulse_frame",
    "draw_shape",
    "draw_shape_frame",
    "draw_waveform_frame",
    "shape_frames",
    "waveform_frames",
]
