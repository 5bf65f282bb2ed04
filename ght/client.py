"""
ght GitHub client.

Provides the interface the reconciliation run uses to read and change
repositories on GitHub.
"""

import os
from typing import Any

from ght.clients import BranchesClient, ContentsClient, OrgsClient, ReposClient
from ght.exceptions import ConfigurationError
from ght.transport import HTTPTransport


class GitHubClient:
    """
    Main client for the GitHub REST API.

    Aggregates the resource clients and holds no state between calls.

    Example:
        ```python
        from ght import GitHubClient

        with GitHubClient.from_env() as client:
            repo = client.repos.get("octo-org", "hello")
            client.repos.replace_topics("octo-org", "hello", ["python"])
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: Personal access token or app installation token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
        )

        self.orgs = OrgsClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.branches = BranchesClient(self._transport)
        self.contents = ContentsClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Token used to authenticate (required)
            GITHUB_API_URL: Base URL for the API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If GITHUB_TOKEN is not set
        """
        token = os.environ.get("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError("GITHUB_TOKEN is not set")

        base_url = os.environ.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL

        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
