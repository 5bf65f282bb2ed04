"""
Tests for the ght command line.
"""

import logging
from collections.abc import Generator
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from ght import __version__
from ght.cli import cli
from ght.logging import get_logger
from ght.testing import MockGitHubClient, create_not_found, create_remote_error


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the command installs so they don't outlive the runner's streams."""
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    get_logger("http").setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, mock: MockGitHubClient, *args: str):
    with patch("ght.cli.GitHubClient.from_env", return_value=mock):
        return runner.invoke(cli, list(args))


def test_repo_existing(runner: CliRunner, fixture_path) -> None:
    mock = MockGitHubClient()

    result = invoke(
        runner, mock, "repo", "-o", "test-owner", "-n", "test-repo", "-t", fixture_path("empty.json")
    )

    assert result.exit_code == 0, result.output
    assert "repository test-owner/test-repo already exists, configuration applied" in result.output


def test_repo_created(runner: CliRunner, fixture_path) -> None:
    mock = MockGitHubClient()
    mock.repos.configure_get(error=create_not_found())

    result = invoke(
        runner,
        mock,
        "repo",
        "--owner", "test-owner",
        "--name", "test-repo",
        "--description", "A test repo",
        "--template", fixture_path("simple-repo.json"),
    )

    assert result.exit_code == 0, result.output
    assert "repository test-owner/test-repo created and configured" in result.output
    _, config = mock.get_calls("repos.create")[0].args
    assert config.description == "A test repo"


@pytest.mark.parametrize("alias", ["r", "repository"])
def test_repo_aliases(runner: CliRunner, fixture_path, alias: str) -> None:
    mock = MockGitHubClient()

    result = invoke(
        runner, mock, alias, "-o", "test-owner", "-n", "test-repo", "-t", fixture_path("empty.json")
    )

    assert result.exit_code == 0, result.output
    assert mock.was_called("repos.get")


def test_topics_and_branches_lists(runner: CliRunner, fixture_path) -> None:
    mock = MockGitHubClient()

    result = invoke(
        runner,
        mock,
        "repo",
        "-o", "test-owner",
        "-n", "test-repo",
        "-t", fixture_path("repo-branch-protection.json"),
        "-l", "python,cli",
        "-l", "platform",
        "-b", "main,develop",
    )

    assert result.exit_code == 0, result.output
    assert mock.get_calls("repos.replace_topics")[0].args[2] == ["python", "cli", "platform"]
    assert [c.args[2] for c in mock.get_calls("branches.update_protection")] == ["main", "develop"]


def test_missing_required_option(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["repo", "-o", "test-owner", "-n", "test-repo"])

    assert result.exit_code == 2
    assert "--template" in result.output


def test_run_error_exits_non_zero(runner: CliRunner, fixture_path) -> None:
    mock = MockGitHubClient()
    mock.repos.configure_get(error=create_remote_error(500, "GET /repos/test-owner/test-repo"))

    result = invoke(
        runner, mock, "repo", "-o", "test-owner", "-n", "test-repo", "-t", fixture_path("empty.json")
    )

    assert result.exit_code == 1
    assert "failed to fetch repo test-owner/test-repo" in result.output


def test_missing_token(runner: CliRunner, fixture_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    result = runner.invoke(
        cli, ["repo", "-o", "test-owner", "-n", "test-repo", "-t", fixture_path("empty.json")]
    )

    assert result.exit_code == 1
    assert "GITHUB_TOKEN is not set" in result.output


def test_debug_flag_enables_debug_logging(runner: CliRunner, fixture_path) -> None:
    mock = MockGitHubClient()

    result = invoke(
        runner, mock, "repo", "-o", "test-owner", "-n", "test-repo", "-t", fixture_path("empty.json"), "-v"
    )

    assert result.exit_code == 0, result.output
    assert get_logger().level == logging.DEBUG
    assert "debug mode enabled" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 0
    assert f"Version: {__version__}" in result.output
