"""Frame output exceptions."""

from pathlib import Path

from .base import GlyphBeatError


class FrameOutputError(GlyphBeatError):
    """Rendered frames could not be written to the requested file."""

    def __init__(self, path: Path, reason: str):
        """
        Initialize frame output error.

        Args:
            path: Destination file
            reason: OS error text (e.g. "Is a directory")
        """
        super().__init__(
            user_message=f"Cannot write frames to {path}: {reason}",
            recoverable=True,
            recovery_hint="Choose a writable file path with -o, or omit -o to print frames to stdout",
            details={"path": str(path)},
        )
        self.path = path
        self.reason = reason
