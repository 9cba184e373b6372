"""Exception classes for the blog fixtures package.

This module defines the exception classes raised by the lookup helpers,
configuration loading, output rendering and the CLI.
"""

from typing import Optional, Dict, Any, Union
from pathlib import Path


class BlogFixturesError(Exception):
    """Base exception class for all blog fixtures errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PostNotFoundError(BlogFixturesError):
    """Exception raised when no fixture post has the requested permalink id."""

    def __init__(self, permalink_id: str) -> None:
        super().__init__(
            f"No fixture post with permalink id '{permalink_id}'",
            details={"permalink_id": permalink_id},
        )
        self.permalink_id = permalink_id


class ValidationError(BlogFixturesError):
    """Exception raised for invalid user input, such as an unknown output format."""
    pass


class ConfigError(BlogFixturesError):
    """Exception raised for configuration-related errors."""
    pass


class ExportError(BlogFixturesError):
    """Exception raised when fixture data cannot be written to a file."""

    def __init__(
        self,
        message: str,
        file_path: Optional[Union[str, Path]] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            file_path: Path of the file being written
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.file_path = str(file_path) if file_path is not None else None
