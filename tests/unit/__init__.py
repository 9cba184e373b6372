"""Unit tests for the blog fixtures package."""
