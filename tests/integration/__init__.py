"""Integration tests for the blog fixtures package.

Covers the CLI end to end and the pytest plugin fixtures.
"""
