"""
Custom exception hierarchy for glyphbeat.

## Exception Hierarchy

```
GlyphBeatError (base)
├── MatrixError
│   ├── ShapeMismatchError
│   ├── SizeMismatchError
│   ├── ParseError
│   └── RangeError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── FrameOutputError
```

## Usage

All custom exceptions inherit from `GlyphBeatError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
- `details`: Values describing the failure (row, token, file path)

### Example: Bad Pixel String

```python
from glyphbeat.exceptions import ParseError
from glyphbeat.matrix import parse_pixel_string

try:
    frame = parse_pixel_string(text)
except ParseError as e:
    print(e.get_full_message())
```

Brightness values and drawing coordinates are never an error source:
brightness is clamped and out-of-bounds points are skipped.
"""

from .base import GlyphBeatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .matrix import MatrixError, ParseError, RangeError, ShapeMismatchError, SizeMismatchError
from .output import FrameOutputError

__all__ = [
    # Base
    "GlyphBeatError",
    # Matrix
    "MatrixError",
    "ParseError",
    "RangeError",
    "ShapeMismatchError",
    "SizeMismatchError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Output
    "FrameOutputError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
