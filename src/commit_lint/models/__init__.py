"""Data models for commit-lint."""

from .commit import Commit

__all__ = ["Commit"]
