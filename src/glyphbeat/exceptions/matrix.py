"""Matrix validation exceptions.

This module defines the errors raised by the coordinate mapper and the
shape table accessors:
- MatrixError: Base class for matrix data errors
- ShapeMismatchError: Shaped grid has the wrong row count or row length
- SizeMismatchError: Flat buffer does not hold exactly 625 cells
- ParseError: Pixel string has a bad token or the wrong token count
- RangeError: Row index outside [0, 24]

None of these are recoverable by retrying; the caller has to fix the data.
"""

from typing import Optional

from .base import GlyphBeatError


class MatrixError(GlyphBeatError):
    """Pixel data does not fit the Glyph Matrix layout."""
    pass


class ShapeMismatchError(MatrixError):
    """Shaped grid does not match the shape table."""

    def __init__(self, expected: int, actual: int, row: Optional[int] = None):
        """
        Initialize shape mismatch error.

        Args:
            expected: Expected row count (row=None) or row width
            actual: Row count or row width that was supplied
            row: Offending row index, or None when the row count is wrong
        """
        if row is None:
            user_msg = f"Shaped grid must have exactly {expected} rows, got {actual}"
        else:
            user_msg = f"Row {row} should have {expected} pixels, got {actual}"

        super().__init__(
            user_message=user_msg,
            recovery_hint="Build shaped grids with create_empty_shaped() to get the right row widths",
            details={"expected": expected, "actual": actual, "row": row},
        )
        self.expected = expected
        self.actual = actual
        self.row = row


class SizeMismatchError(MatrixError):
    """Flat buffer (or its string form) has the wrong number of cells."""

    def __init__(self, expected: int, actual: int):
        """
        Initialize size mismatch error.

        Args:
            expected: Required cell count
            actual: Cell count that was supplied
        """
        super().__init__(
            user_message=f"Flat array must have exactly {expected} elements, got {actual}",
            recovery_hint="Flat buffers are 25 rows x 25 columns, row-major",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class ParseError(MatrixError):
    """Pixel string could not be parsed."""

    def __init__(self, reason: str, token: Optional[str] = None, index: Optional[int] = None):
        """
        Initialize parse error.

        Args:
            reason: What went wrong
            token: The offending token (if any)
            index: Zero-based position of the offending token (if any)
        """
        if token is not None:
            user_msg = f"Invalid pixel value {token!r} at position {index}: {reason}"
        else:
            user_msg = f"Invalid pixel string: {reason}"

        super().__init__(
            user_message=user_msg,
            recovery_hint="Pixel strings are 625 comma-separated decimal integers",
            details={"token": token, "index": index},
        )
        self.reason = reason
        self.token = token
        self.index = index


class RangeError(MatrixError):
    """Row index is outside the shape table."""

    def __init__(self, row, total_rows: int = 25):
        """
        Initialize range error.

        Args:
            row: The row index that was requested
            total_rows: Number of rows in the shape table
        """
        super().__init__(
            user_message=f"Row must be between 0 and {total_rows - 1}, got {row}",
            details={"row": row, "total_rows": total_rows},
        )
        self.row = row
        self.total_rows = total_rows
