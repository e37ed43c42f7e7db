"""
Centralized error handling utilities.

The core (mapper, rasterizer, generators) raises typed `MatrixError`
subclasses eagerly and never catches them. This module is for the layers
above it (persistence, CLI):

1. **Error Context** - Log start/finish/failure of a critical section
2. **Error Collection** - Try many conversions, report every failure at once
3. **Translation** - Turn pydantic errors into `ConfigurationError` with hints
4. **Display** - Split any exception into a user message and recovery hint

## Handling Patterns

| Pattern | Code |
|---------|------|
| Try multiple ops, collect errors | `collector = collect_errors("convert"); with collector.try_operation(...): ...` |
| Critical section with auto-logging | `with ErrorContext("write frames"): ...` |
| Config validation failure | `raise wrap_pydantic_error(e, str(path)) from e` |
| CLI output | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import GlyphBeatError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager that logs a critical section and re-raises failures.

    The exception is kept on `error` before it propagates, so an outer
    handler can translate it.

    Example:
        ```python
        try:
            with ErrorContext("write frames", logger_instance=logger):
                path.write_text(payload)
        except OSError as e:
            raise FrameOutputError(path, e.strerror or str(e)) from e
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and log any exception.

        Returns:
            False, so the exception always propagates
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, GlyphBeatError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return False


def wrap_pydantic_error(error: Exception, file_path: str) -> GlyphBeatError:
    """
    Convert Pydantic validation errors to glyphbeat exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Pydantic reports broken JSON as "Invalid JSON: <detail> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, GlyphBeatError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("convert pixel strings")

        for number, line in enumerate(lines, start=1):
            with collector.try_operation(f"line {number}"):
                frames.append(parse_pixel_string(line))

        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation

        Returns:
            Context manager that catches and stores errors
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, GlyphBeatError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            # Only glyphbeat errors are collected; anything else is a bug
            if not isinstance(exc_val, GlyphBeatError):
                return False

            self.collector.errors.append((self.sub_operation, exc_val))
            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val}")
            return True
