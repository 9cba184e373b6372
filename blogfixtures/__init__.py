"""Blog post fixture data.

The fixed set of blog posts the dusted.codes site automation tests expect
to find, with lookup helpers, a small CLI for inspecting and exporting the
set, and a pytest plugin exposing it as fixtures.
"""

__version__ = "0.1.0"
__description__ = "Blog post fixture data for site automation tests"

# Re-export main classes for convenience
from .models import BlogPost
from .data import (
    FixtureDataProvider,
    posts,
    get_post,
    posts_tagged,
    tags,
    permalink_ids,
)
from .exceptions import (
    BlogFixturesError,
    PostNotFoundError,
    ValidationError,
    ConfigError,
    ExportError,
)

__all__ = [
    "__version__",
    "__description__",
    "BlogPost",
    "FixtureDataProvider",
    "posts",
    "get_post",
    "posts_tagged",
    "tags",
    "permalink_ids",
    "BlogFixturesError",
    "PostNotFoundError",
    "ValidationError",
    "ConfigError",
    "ExportError",
]
