"""Utility modules for the blog fixtures CLI."""

from .exceptions import format_error_for_user

__all__ = [
    "format_error_for_user",
]
