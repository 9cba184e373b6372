"""Blog post fixture data.

The posts below are the ones the site automation tests expect to find on
the live blog. The set is built once at import time and never changes.
"""

from typing import Dict, Tuple

from .exceptions import PostNotFoundError
from .models import BlogPost


_BLOG_POSTS: Tuple[BlogPost, ...] = (
    BlogPost(
        title="Hello World",
        permalink_id="hello-world",
    ),
    BlogPost(
        title="PHP UK Conference 2015",
        permalink_id="php-uk-conference-2015",
        tags=("php-uk", "versioning", "hhvm"),
    ),
    BlogPost(
        title="Making Font Awesome awesome - Using icons without i-tags",
        permalink_id="making-font-awesome-awesome-using-icons-without-i-tags",
        tags=("font-awesome", "css"),
    ),
    BlogPost(
        title="Guard clauses without test coverage, a common TDD pitfall",
        permalink_id="guard-clauses-without-test-coverage-a-common-tdd-pitfall",
        tags=("tdd", "guard-clauses"),
    ),
    BlogPost(
        title="Demystifying ASP.NET MVC 5 Error Pages and Error Logging",
        permalink_id="demystifying-aspnet-mvc-5-error-pages-and-error-logging",
        tags=("asp-net", "mvc", "error-pages", "error-logging"),
    ),
)

_BY_PERMALINK: Dict[str, BlogPost] = {post.permalink_id: post for post in _BLOG_POSTS}


def posts() -> Tuple[BlogPost, ...]:
    """Return every fixture post in declaration order."""
    return _BLOG_POSTS


def get_post(permalink_id: str) -> BlogPost:
    """Look up a fixture post by its permalink id.

    Raises:
        PostNotFoundError: If no fixture post has that permalink id
    """
    try:
        return _BY_PERMALINK[permalink_id]
    except KeyError:
        raise PostNotFoundError(permalink_id) from None


def posts_tagged(tag: str) -> Tuple[BlogPost, ...]:
    """Return the posts carrying ``tag``, in fixture order."""
    return tuple(post for post in _BLOG_POSTS if post.tags and tag in post.tags)


def tags() -> Tuple[str, ...]:
    """Return the distinct tags across all posts, in first-seen order."""
    seen: Dict[str, None] = {}
    for post in _BLOG_POSTS:
        for tag in post.tags or ():
            seen.setdefault(tag, None)
    return tuple(seen)


def permalink_ids() -> Tuple[str, ...]:
    return tuple(post.permalink_id for post in _BLOG_POSTS)


class FixtureDataProvider:
    """Read-only access to the blog post fixture set.

    Lets consumers take the fixture set as an injected dependency instead of
    importing module-level functions.
    """

    def posts(self) -> Tuple[BlogPost, ...]:
        return posts()

    def get_post(self, permalink_id: str) -> BlogPost:
        return get_post(permalink_id)

    def posts_tagged(self, tag: str) -> Tuple[BlogPost, ...]:
        return posts_tagged(tag)

    def tags(self) -> Tuple[str, ...]:
        return tags()

    def permalink_ids(self) -> Tuple[str, ...]:
        return permalink_ids()
