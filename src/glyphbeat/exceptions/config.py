"""Configuration-related exceptions.

The config file is JSON read through pydantic, so syntax problems arrive
as pydantic's JSON parser messages ("trailing comma at line 3 column 1",
"EOF while parsing an object at line 4 column 0", ...) and value problems
as per-field validation errors. These classes turn both into CLI messages
that point at `glyphbeat config` commands:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file is empty or not valid JSON
- ConfigValidationError: A config value fails validation
"""

import re
from typing import Any, Optional

from .base import GlyphBeatError

_POSITION = re.compile(r"line (\d+) column (\d+)")

# Extra hints per AppConfig field prefix
_FIELD_HINTS = {
    "default_brightness": "Brightness values are integers from 0 to 255",
    "theme_brightness": "Brightness values are integers from 0 to 255",
    "default_frame_count": "The frame count must be at least 1",
    "frame_interval_ms": "The frame interval is a positive number of milliseconds",
    "max_workers": "Use null for sequential rendering or a worker count of at least 1",
}


class ConfigurationError(GlyphBeatError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file is empty or not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the config file
            parse_error: Parser message, e.g. "trailing comma at line 2 column 1"
        """
        lowered = parse_error.lower()
        match = _POSITION.search(parse_error)
        line, column = (int(match.group(1)), int(match.group(2))) if match else (None, None)
        where = f" at line {line}, column {column}" if match else ""

        if "empty" in lowered:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'glyphbeat config reset'"
        elif "trailing comma" in lowered:
            user_msg = f"Configuration file has a trailing comma{where}"
            recovery = f"Remove the comma after the last setting in {file_path}"
        elif "eof while parsing" in lowered:
            user_msg = "Configuration file ends before the JSON object is closed"
            recovery = f"Add the missing '}}' to {file_path} or run 'glyphbeat config reset'"
        else:
            user_msg = f"Configuration file is not valid JSON{where}"
            recovery = f"Fix {file_path} by hand or run 'glyphbeat config reset'"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
            details={"file_path": file_path, "line": line, "column": column},
        )
        self.file_path = file_path
        self.parse_error = parse_error
        self.line = line
        self.column = column


class ConfigValidationError(ConfigurationError):
    """A configuration value fails validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: Dotted field name, or "multiple fields"
            value: The rejected value
            error_msg: Why the value was rejected
            file_path: Path to the config file (optional)
        """
        recovery = f"Run 'glyphbeat config set {field} <value>' or edit the file by hand"
        if field == "multiple fields":
            recovery = "Fix the listed settings or run 'glyphbeat config reset'"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        hint = _FIELD_HINTS.get(field.split(".")[0])
        if hint:
            recovery += f"\n{hint}"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
            details={"field": field, "value": value, "file_path": file_path},
        )
        self.field = field
        self.value = value
        self.file_path = file_path
