"""pytest fixtures exposing the blog post fixture set.

Enable from a ``conftest.py`` with::

    pytest_plugins = ["blogfixtures.pytest_plugin"]

A test that takes ``blog_post`` runs once per fixture post, with the
permalink id as the test id.
"""

import pytest

from .data import FixtureDataProvider, posts


@pytest.fixture(scope="session")
def fixture_provider():
    """Provider for the blog post fixture set."""
    return FixtureDataProvider()


@pytest.fixture(scope="session")
def blog_posts(fixture_provider):
    """All fixture posts, in declaration order."""
    return fixture_provider.posts()


@pytest.fixture(params=posts(), ids=lambda post: post.permalink_id)
def blog_post(request):
    """Each fixture post in turn."""
    return request.param
