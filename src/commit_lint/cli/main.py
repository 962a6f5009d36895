"""Command line interface for commit-lint."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from commit_lint import __version__
from commit_lint.config import Settings, load_settings
from commit_lint.core.commits import commits_in, printed
from commit_lint.core.errors import CommitLintError
from commit_lint.core.repository import filesystem
from commit_lint.models.commit import Commit

console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Send library logging to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _settings(config: Optional[str], path: Optional[str]) -> Settings:
    try:
        settings = load_settings(Path(config) if config else None)
    except CommitLintError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e
    if path is not None:
        settings = settings.model_copy(update={"repo_path": Path(path)})
    return settings


def _unescape(ctx, param, value: Optional[str]) -> Optional[str]:
    """Interpret backslash escapes such as ``\\n`` and ``\\t`` in option text."""
    if value is None:
        return None
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise click.BadParameter(f"invalid escape sequence in {value!r}") from e


def _run(enumerate_commits) -> List[Commit]:
    """Run an enumeration, reporting library errors on the console."""
    try:
        return enumerate_commits()
    except CommitLintError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e


@click.group()
@click.version_option(version=__version__)
def main():
    """commit-lint - Read commits for linting and reporting."""


@main.command()
@click.option("--path", type=click.Path(), default=None, help="Path to git repository")
@click.option(
    "--separator",
    default=None,
    callback=_unescape,
    help="Text written after each commit (backslash escapes allowed)",
)
@click.option("--config", type=click.Path(), default=None, help="Settings file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def log(path: Optional[str], separator: Optional[str], config: Optional[str], verbose: bool):
    """Print every commit reachable from HEAD."""
    setup_logging(verbose)
    settings = _settings(config, path)

    sep = separator if separator is not None else settings.separator

    out = sys.stdout.buffer
    _run(printed(commits_in(filesystem(settings.repo_path)), out, sep))
    out.flush()


@main.command()
@click.option("--path", type=click.Path(), default=None, help="Path to git repository")
@click.option("--config", type=click.Path(), default=None, help="Settings file")
def count(path: Optional[str], config: Optional[str]):
    """Print the number of commits reachable from HEAD."""
    setup_logging(False)
    settings = _settings(config, path)

    commits = _run(commits_in(filesystem(settings.repo_path)))
    click.echo(str(len(commits)))


if __name__ == "__main__":
    main()
