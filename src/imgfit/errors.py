"""Exception classes for imgfit.

This module defines the exceptions raised when strict input validation
fails or when a configuration file cannot be loaded.
"""

from __future__ import annotations

from typing import Any


class ImgFitError(Exception):
    """Base class for all imgfit errors."""


class InvalidDimensionsError(ImgFitError, ValueError):
    """Raised when a dimension is not a positive finite number.

    Only raised in strict mode or when converting non-finite dimensions
    to whole pixels. The permissive default lets NaN and infinity
    propagate through the arithmetic instead.
    """

    def __init__(self, field: str, value: Any) -> None:
        """Initialize the exception.

        Args:
            field: Name of the offending input (e.g. "max_width")
            value: The rejected value
        """
        super().__init__(f"{field} must be a positive finite number, got {value!r}")
        self.field: str = field
        self.value: Any = value


class ConfigError(ImgFitError):
    """Raised when a configuration file cannot be read or fails validation."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with config error details.

        Args:
            message: Description of the configuration problem
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error
