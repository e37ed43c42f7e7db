"""Animation request model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from glyphbeat.matrix import clamp_brightness

from .enums import AnimationPattern, ShapeStyle


class AnimationRequest(BaseModel):
    """Parameters for one frame sequence.

    Only structural values are validated. Brightness is clamped into
    0-255 instead of being rejected, the same way the drawing primitives
    treat it.
    """

    model_config = ConfigDict(frozen=True)

    pattern: AnimationPattern = Field(
        default=AnimationPattern.ROTATING_LINE, description="Frame generator to run"
    )
    frame_count: int = Field(default=24, ge=1, description="Number of frames to generate")
    brightness: int = Field(default=255, description="Brightness of drawn pixels (0-255)")
    line_length: int = Field(default=8, description="Rotating line length in pixels")
    max_radius: int = Field(default=10, description="Largest pulse or beat pulse radius in pixels")
    amplitude: int = Field(default=5, description="Wave amplitude in rows")
    wavelength: float = Field(
        default=2.0, description="Horizontal wave cycles factor across the display"
    )
    thickness: int = Field(
        default=1, description="Horizontal wave and waveform thickness (clamped to 1-3)"
    )
    shape_style: ShapeStyle = Field(default=ShapeStyle.CROSS, description="Pattern for the shape generator")
    text: str = Field(default="GLYPHBEAT", description="Text for the scroll generator")
    text_spacing: int = Field(default=1, ge=0, description="Pixels between characters")
    scroll_speed: int = Field(default=1, ge=1, description="Text scroll step in pixels per frame")
    text_row: int = Field(default=9, description="Matrix row of the top of the text")
    frame_interval_ms: int = Field(
        default=50, gt=0, description="Time between frames, used to sample simulated audio"
    )

    @field_validator("brightness", mode="before")
    @classmethod
    def clamp_brightness_value(cls, v) -> int:
        """Clamp brightness into 0-255."""
        if isinstance(v, str):
            v = int(v)  # "abc" fails validation instead of being clamped
        return clamp_brightness(v)
