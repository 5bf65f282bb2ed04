"""Organizations resource client."""

from typing import TYPE_CHECKING

from ght.types.repos import Organization

if TYPE_CHECKING:
    from ght.transport import HTTPTransport


class OrgsClient:
    """Client for organization lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, org: str) -> Organization:
        """
        Get an organization.

        GitHub API docs: https://docs.github.com/en/rest/orgs/orgs#get-an-organization

        Raises:
            NotFoundError: If no organization has this login
        """
        data = self.transport.request("GET", f"/orgs/{org}")
        return Organization(
            login=data.get("login", org),
            name=data.get("name"),
            description=data.get("description"),
        )
