"""commit-lint: read commits from a git repository for linting and reporting."""

from commit_lint.core.commits import Commits, commits_in, pretty, printed
from commit_lint.core.errors import (
    CommitLintError,
    ConfigError,
    RepositoryAccessError,
    SinkWriteError,
)
from commit_lint.core.repository import Repository, filesystem
from commit_lint.models.commit import Commit

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "CommitLintError",
    "Commits",
    "ConfigError",
    "Repository",
    "RepositoryAccessError",
    "SinkWriteError",
    "commits_in",
    "filesystem",
    "pretty",
    "printed",
]
