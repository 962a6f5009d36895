"""Exceptions raised by commit-lint."""


class CommitLintError(Exception):
    """Base class for commit-lint errors."""


class RepositoryAccessError(CommitLintError):
    """The repository could not be opened, or its HEAD or log could not be read."""


class SinkWriteError(CommitLintError):
    """Writing a rendered commit to the output sink failed."""


class ConfigError(CommitLintError):
    """The configuration file could not be read or is invalid."""
