"""Exceptions raised by the solving engine."""

from typing import Any


class SudokuError(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MalformedInputError(SudokuError):
    """Raised when a grid is not 9x9 or holds a value outside 1..9."""


class InvalidPlacementError(SudokuError):
    """Raised when a placement targets a filled cell or a non-candidate digit.

    This never comes from user input; it means a deduction or search step is wrong.
    """
