"""
Pytest fixtures and factories for testing code that uses ght.
"""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from ght.exceptions import NotFoundError, RemoteError, ServerError, ValidationError
from ght.testing.mock import MockGitHubClient
from ght.types.repos import Branch, FileContent, Repository
from ght.types.run import RepoOptions


# ============================================================================
# Factories
# ============================================================================


def create_not_found(operation: str | None = None) -> NotFoundError:
    """Build the error GitHub's 404 responses are parsed into."""
    return NotFoundError("NOT_FOUND", "Not Found", 404, operation)


def create_remote_error(status_code: int, operation: str | None = None) -> RemoteError:
    """Build a non-404 remote error for the given status."""
    if status_code >= 500:
        return ServerError("INTERNAL_SERVER_ERROR", "Server Error", status_code, operation)
    return ValidationError("BAD_REQUEST", "Bad Request", status_code, operation)


def create_mock_repository(owner: str = "test-owner", name: str = "test-repo", **kwargs: Any) -> Repository:
    """Create a Repository with sensible defaults."""
    defaults: dict[str, Any] = {
        "owner": owner,
        "name": name,
        "full_name": f"{owner}/{name}",
        "private": False,
        "default_branch": "main",
        "html_url": f"https://github.com/{owner}/{name}",
        "description": None,
    }
    defaults.update(kwargs)
    return Repository(**defaults)


def create_mock_branch(name: str = "main", **kwargs: Any) -> Branch:
    """Create a Branch with sensible defaults."""
    defaults: dict[str, Any] = {"name": name, "protected": False, "commit_sha": "a" * 40}
    defaults.update(kwargs)
    return Branch(**defaults)


def create_mock_file(path: str, sha: str = "b" * 40, content: bytes = b"") -> FileContent:
    """Create a FileContent as returned for an existing file."""
    return FileContent(path=path, sha=sha, content=content)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure_get(error=create_not_found())
            run(mock_client, opts)
            assert mock_client.was_called("repos.create")
        ```
    """
    client = MockGitHubClient(login="test-user")
    yield client
    client.reset()


@pytest.fixture
def mock_client_missing_repo(mock_client: MockGitHubClient) -> MockGitHubClient:
    """Provide a mock client whose target repository does not exist yet."""
    mock_client.repos.configure_get(error=create_not_found("GET /repos/test-owner/test-repo"))
    return mock_client


@pytest.fixture
def write_template(tmp_path: Path) -> Callable[[dict[str, Any]], str]:
    """
    Provide a function that writes a template document and returns its path.

    Example:
        ```python
        def test_my_feature(write_template):
            path = write_template({"repository": {"auto_init": True}})
        ```
    """

    def _write(document: dict[str, Any], filename: str = "template.json") -> str:
        path = tmp_path / filename
        path.write_text(json.dumps(document))
        return str(path)

    return _write


@pytest.fixture
def repo_options() -> Callable[..., RepoOptions]:
    """Provide a RepoOptions factory targeting test-owner/test-repo."""

    def _options(template: str, **kwargs: Any) -> RepoOptions:
        values: dict[str, Any] = {"owner": "test-owner", "name": "test-repo", "template": template}
        values.update(kwargs)
        return RepoOptions(**values)

    return _options
