"""Data models for glyphbeat."""

from .animation import AnimationRequest
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import AnimationPattern, ShapeStyle

__all__ = [
    "AnimationPattern",
    "AnimationRequest",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "ShapeStyle",
]
