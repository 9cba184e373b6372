"""Data models for blog fixtures.

This package contains the Pydantic models describing the fixture
records handed to the site automation tests.
"""

from .post import BlogPost


__all__ = [
    "BlogPost",
]
