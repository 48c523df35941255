# src/cascadeim/errors.py

"""Exceptions raised by cascadeim."""

from typing import Optional


class CascadeIMError(Exception):
    """Base class for all cascadeim errors."""


class EmptyCascadeSetError(CascadeIMError, ValueError):
    """Raised when an operation needs at least one cascade and got none."""


class CascadeFormatError(CascadeIMError, ValueError):
    """
    Raised when an edge-list line cannot be parsed.

    Attributes:
        source: file name (or other label) the line came from.
        line_number: 1-based line number inside `source`.
    """

    def __init__(self, message: str, source: str = "<lines>", line_number: Optional[int] = None):
        self.source = source
        self.line_number = line_number
        if line_number is not None:
            message = f"{source}:{line_number}: {message}"
        else:
            message = f"{source}: {message}"
        super().__init__(message)


class ConfigError(CascadeIMError, ValueError):
    """Raised by RunConfig.validate() for invalid run parameters."""
