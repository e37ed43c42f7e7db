"""Base exception class for glyphbeat.

Every glyphbeat error renders two ways: `user_message` is what the CLI
prints, `technical_message` is what goes to the log. The values that
explain the failure (expected and actual sizes, the offending row or token,
a file path) are kept in `details` so callers can inspect them without
parsing text. When no technical message is given, the log line is the user
message followed by those details.
"""

from typing import Any, Optional


class GlyphBeatError(Exception):
    """
    Base exception for all glyphbeat errors.

    Attributes:
        user_message: Short message for the CLI
        technical_message: Message for logs, including the details
        details: Values describing the failure (row, token, path, ...)
        recoverable: True when fixing input or config lets a retry succeed
        recovery_hint: What to change, if there is a known fix
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        *,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.details = dict(details or {})
        self.technical_message = technical_message or self._with_details(user_message)
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def _with_details(self, message: str) -> str:
        shown = {key: value for key, value in self.details.items() if value is not None}
        if not shown:
            return message
        context = ", ".join(f"{key}={value!r}" for key, value in shown.items())
        return f"{message} [{context}]"

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message plus the recovery hint, for one-shot display."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
