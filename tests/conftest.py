"""Shared pytest configuration for the blog fixtures test suite."""

pytest_plugins = ["blogfixtures.pytest_plugin"]
