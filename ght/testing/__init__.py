"""ght testing utilities.

Provides a mock client and fixtures for testing code that drives ght.
"""

from ght.testing.fixtures import (
    create_mock_branch,
    create_mock_file,
    create_mock_repository,
    create_not_found,
    create_remote_error,
)
from ght.testing.mock import MUTATING_METHODS, MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    "MUTATING_METHODS",
    # Helper functions
    "create_mock_repository",
    "create_mock_branch",
    "create_mock_file",
    "create_not_found",
    "create_remote_error",
]
