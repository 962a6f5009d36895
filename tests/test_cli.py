"""Tests for the commit-lint command line."""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner
from git import Repo

from commit_lint.cli.main import main


@pytest.fixture
def temp_git_project():
    """Create a temporary git project with two commits."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)

        repo = Repo.init(project_path)
        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        (project_path / "test.py").write_text("print('test')\n")
        repo.index.add(["test.py"])
        repo.index.commit("Initial commit")

        (project_path / "test.py").write_text("print('changed')\n")
        repo.index.add(["test.py"])
        repo.index.commit("Change output\n\nPrints something else.")

        yield project_path


def _expected(project_path: Path, sep: str) -> bytes:
    repo = Repo(project_path)
    lines = []
    for c in repo.iter_commits("HEAD"):
        subject = c.message.split("\n\n")[0]
        body = "".join(c.message.split("\n\n")[1:])
        lines.append(f"hash: {c.hexsha} subject={subject} body={body}{sep}")
    return "".join(lines).encode("utf-8")


def test_log_prints_commits(temp_git_project):
    """The log command prints one line per commit."""
    runner = CliRunner()
    result = runner.invoke(main, ["log", "--path", str(temp_git_project)])

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == _expected(temp_git_project, "\n")
    assert b"subject=Change output body=Prints something else." in result.stdout_bytes


def test_log_separator_escapes(temp_git_project):
    """Backslash escapes in the separator are interpreted."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["log", "--path", str(temp_git_project), "--separator", "\\t;"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == _expected(temp_git_project, "\t;")


def test_log_non_ascii_separator(temp_git_project):
    """Non-ASCII separators are written unchanged as UTF-8."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["log", "--path", str(temp_git_project), "--separator", " \u2192 "]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == _expected(temp_git_project, " \u2192 ")


def test_log_trailing_backslash_separator_is_rejected(temp_git_project):
    """A dangling escape in the separator is a usage error, not a crash."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["log", "--path", str(temp_git_project), "--separator", "\\"]
    )

    assert result.exit_code == 2
    assert "invalid escape sequence" in result.output
    assert result.stdout_bytes == b""


def test_log_reads_settings_file(temp_git_project):
    """Repository path and separator can come from a settings file."""
    config_file = temp_git_project.parent / f"{temp_git_project.name}.json"
    config_file.write_text(
        json.dumps({"repo_path": str(temp_git_project), "separator": "|"})
    )
    try:
        runner = CliRunner()
        result = runner.invoke(main, ["log", "--config", str(config_file)])
    finally:
        config_file.unlink()

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == _expected(temp_git_project, "|")


def test_log_missing_settings_file_fails(temp_git_project):
    """An explicit settings file that does not exist aborts with an error."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["log", "--config", str(temp_git_project / "missing.json")]
    )

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_log_outside_repository_fails():
    """Pointing at a directory without git aborts with an error."""
    with tempfile.TemporaryDirectory() as temp_dir:
        runner = CliRunner()
        result = runner.invoke(main, ["log", "--path", temp_dir])

    assert result.exit_code == 1
    assert "No git repository found" in result.output


def test_log_empty_repository_fails():
    """A repository without commits aborts with an error."""
    with tempfile.TemporaryDirectory() as temp_dir:
        Repo.init(temp_dir)
        runner = CliRunner()
        result = runner.invoke(main, ["log", "--path", temp_dir])

    assert result.exit_code == 1
    assert "Unable to resolve HEAD" in result.output


def test_count(temp_git_project):
    """The count command prints the number of commits."""
    runner = CliRunner()
    result = runner.invoke(main, ["count", "--path", str(temp_git_project)])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2"


def test_version():
    """The version option reports the package version."""
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
