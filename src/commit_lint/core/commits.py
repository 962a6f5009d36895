"""Commit enumeration and printing.

A ``Commits`` value is a zero-argument callable returning the commits reachable
from the repository's HEAD. Nothing is read until it is called, and every call
reads the log again. ``printed`` wraps one ``Commits`` in another that writes a
line per commit to a binary sink as a side effect.
"""

import logging
from typing import BinaryIO, Callable, List

from git import GitError

from commit_lint.core.errors import RepositoryAccessError, SinkWriteError
from commit_lint.core.repository import Repository
from commit_lint.models.commit import Commit

logger = logging.getLogger(__name__)

Commits = Callable[[], List[Commit]]


def _message_text(message) -> str:
    # GitPython hands back bytes when the commit encoding can't be decoded
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    return message


def commits_in(repository: Repository) -> Commits:
    """Return a ``Commits`` reading the log from HEAD of ``repository``.

    Args:
        repository: Zero-argument callable returning a ``git.Repo``

    Returns:
        Callable producing the commits in the order git log yields them

    Raises (on invocation):
        RepositoryAccessError: HEAD can't be resolved or the log can't be opened
    """

    def commits() -> List[Commit]:
        with repository() as repo:
            return _read_log(repo)

    return commits


def _read_log(repo) -> List[Commit]:
    try:
        head = repo.head.commit.hexsha
    except (GitError, ValueError) as e:
        raise RepositoryAccessError(f"Unable to resolve HEAD: {e}") from e

    try:
        log = iter(repo.iter_commits(head))
    except (GitError, ValueError) as e:
        raise RepositoryAccessError(f"Unable to open log at {head}") from e

    result: List[Commit] = []
    while True:
        try:
            raw = next(log)
        except StopIteration:
            break
        except (GitError, ValueError, OSError) as e:
            logger.warning(
                "Stopped reading log after %d commits: %s", len(result), e
            )
            break
        result.append(Commit(hash=raw.hexsha, message=_message_text(raw.message)))

    logger.debug("Read %d commits from %s", len(result), head)
    return result


def pretty(commit: Commit) -> str:
    """Render a commit as ``hash: <hash> subject=<subject> body=<body>``."""
    return f"hash: {commit.hash} subject={commit.subject} body={commit.body}"


def printed(commits: Commits, writer: BinaryIO, sep: str) -> Commits:
    """Wrap ``commits`` so each invocation also prints every commit to ``writer``.

    Each commit is written as one ``write`` call of its rendering followed by
    ``sep``, UTF-8 encoded. The wrapped list is returned unchanged. ``writer``
    is never closed or flushed here.
    """

    def printing() -> List[Commit]:
        result = commits()
        for commit in result:
            try:
                writer.write(f"{pretty(commit)}{sep}".encode("utf-8"))
            except (OSError, ValueError) as e:
                raise SinkWriteError(f"Failed to write commit {commit.hash}") from e
        return result

    return printing
