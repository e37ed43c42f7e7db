"""glyphbeat: rendering core for the Glyph Matrix display."""

__version__ = "0.1.0"

from .animation import (
    beat_pulse_frames,
    draw_audio_spectrum_waves,
    horizontal_wave_frames,
    pulse_frames,
    render_frames,
    rotating_line_frames,
    scroll_text_frames,
    shape_frames,
    wave_frames,
    waveform_frames,
)
from .matrix import (
    clamp_brightness,
    create_empty_flat,
    create_empty_shaped,
    flat_array_to_pixel_string,
    flat_to_shaped,
    parse_pixel_string,
    shaped_to_flat,
)

__all__ = [
    "beat_pulse_frames",
    "clamp_brightness",
    "create_empty_flat",
    "create_empty_shaped",
    "draw_audio_spectrum_waves",
    "flat_array_to_pixel_string",
    "flat_to_shaped",
    "horizontal_wave_frames",
    "parse_pixel_string",
    "pulse_frames",
    "render_frames",
    "rotating_line_frames",
    "scroll_text_frames",
    "shape_frames",
    "shaped_to_flat",
    "wave_frames",
    "waveform_frames",
]
