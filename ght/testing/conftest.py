"""
Pytest plugin for ght testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ght.testing.conftest"]
"""

from ght.testing.fixtures import (
    mock_client,
    mock_client_missing_repo,
    repo_options,
    write_template,
)

__all__ = [
    "mock_client",
    "mock_client_missing_repo",
    "repo_options",
    "write_template",
]
