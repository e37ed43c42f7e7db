"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator

from glyphbeat.matrix import clamp_brightness
from glyphbeat.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".glyphbeat" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    output_dir: Path = Field(
        default_factory=lambda: Path.home() / ".glyphbeat" / "frames",
        description="Directory where rendered frame files are written",
    )

    # Rendering defaults (used when the command line does not override them)
    default_frame_count: int = Field(
        default=24, ge=1, description="Frames per generated animation"
    )
    default_brightness: int = Field(
        default=255, description="Brightness of drawn pixels (0-255)"
    )
    theme_brightness: int = Field(
        default=255,
        description="Global brightness applied to every frame before output (255 = 100%)",
    )
    frame_interval_ms: int = Field(
        default=50, gt=0, description="Delay between animation frames in milliseconds"
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Threads used to build frames (None = build sequentially)",
    )

    @field_validator("default_brightness", "theme_brightness", mode="before")
    @classmethod
    def clamp_brightness_value(cls, v) -> int:
        """Clamp brightness settings into 0-255."""
        if isinstance(v, str):
            v = int(v)  # "abc" fails validation instead of being clamped
        return clamp_brightness(v)

    @field_serializer("output_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.glyphbeat/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
