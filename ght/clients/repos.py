"""Repositories resource client.

GitHub API docs: https://docs.github.com/en/rest/repos/repos
"""

from typing import TYPE_CHECKING, Any

from ght.types.config import RepositoryConfig
from ght.types.repos import Repository

if TYPE_CHECKING:
    from ght.transport import HTTPTransport


def _parse_repository(data: dict[str, Any]) -> Repository:
    owner = (data.get("owner") or {}).get("login", "")
    name = data["name"]
    return Repository(
        owner=owner,
        name=name,
        full_name=data.get("full_name") or f"{owner}/{name}",
        private=data.get("private", False),
        default_branch=data.get("default_branch"),
        html_url=data.get("html_url"),
        description=data.get("description"),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, owner: str, name: str) -> Repository:
        """
        Get repository information.

        Raises:
            NotFoundError: If the repository does not exist
        """
        response = self.transport.request("GET", f"/repos/{owner}/{name}")
        return _parse_repository(response)

    def create(self, owner: str, config: RepositoryConfig) -> Repository:
        """
        Create a new repository.

        Args:
            owner: Organization login, or "" to create under the authenticated user
            config: Repository fields; ``name`` must be set

        Returns:
            The created Repository
        """
        path = f"/orgs/{owner}/repos" if owner else "/user/repos"
        response = self.transport.request("POST", path, body=config.to_dict())
        return _parse_repository(response)

    def create_from_template(
        self,
        template_owner: str,
        template_repo: str,
        owner: str,
        name: str,
        description: str | None = None,
        include_all_branches: bool | None = None,
        private: bool | None = None,
    ) -> Repository:
        """
        Create a new repository using a template repository.

        GitHub API docs: https://docs.github.com/en/rest/repos/repos#create-a-repository-using-a-template
        """
        body: dict[str, Any] = {"owner": owner, "name": name}
        if description:
            body["description"] = description
        if include_all_branches is not None:
            body["include_all_branches"] = include_all_branches
        if private is not None:
            body["private"] = private

        response = self.transport.request(
            "POST",
            f"/repos/{template_owner}/{template_repo}/generate",
            body=body,
        )
        return _parse_repository(response)

    def replace_topics(self, owner: str, name: str, topics: list[str]) -> list[str]:
        """
        Replace all topics of a repository.

        Returns:
            The topics now set on the repository
        """
        response = self.transport.request(
            "PUT",
            f"/repos/{owner}/{name}/topics",
            body={"names": list(topics)},
        )
        return list(response.get("names", []))
