"""Repository openers handing git handles to the commit enumerator."""

import logging
from pathlib import Path
from typing import Callable, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from commit_lint.core.errors import RepositoryAccessError

logger = logging.getLogger(__name__)

Repository = Callable[[], Repo]


def filesystem(path: Union[str, Path]) -> Repository:
    """Return a repository opener for the git repository at ``path``.

    Nothing is read from disk until the opener is called. Every call opens a
    fresh ``Repo`` handle owned by the caller, which should close it.
    """
    repo_path = Path(path)

    def open_repo() -> Repo:
        logger.debug("Opening git repository at %s", repo_path)
        try:
            return Repo(repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryAccessError(
                f"No git repository found in {repo_path}"
            ) from e

    return open_repo
