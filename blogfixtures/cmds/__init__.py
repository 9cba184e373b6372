"""Command modules for the blog fixtures CLI.

This module exports all command groups (Typer apps) that can be registered
with the main application.
"""

from .posts import app as posts_app
from .tags import app as tags_app

__all__ = [
    "posts_app",
    "tags_app",
]
