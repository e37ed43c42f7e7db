"""CLI commands for glyphbeat."""

from .config import config_group
from .convert import convert_group
from .preview import preview
from .render import render
from .spectrum import spectrum

__all__ = ["config_group", "convert_group", "preview", "render", "spectrum"]
