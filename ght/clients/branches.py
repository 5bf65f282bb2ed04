"""Branches and branch protection resource client.

GitHub API docs: https://docs.github.com/en/rest/branches
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ght.types.config import BranchProtectionConfig
from ght.types.repos import Branch

if TYPE_CHECKING:
    from ght.transport import HTTPTransport


def _segment(branch: str) -> str:
    """Escape a branch name into a single URL path segment ('feature/x' -> 'feature%2Fx')."""
    return quote(branch, safe="")


class BranchesClient:
    """Client for branch-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, owner: str, repo: str, branch: str) -> Branch:
        """
        Get a branch.

        Raises:
            NotFoundError: If the branch does not exist (or the repository is empty)
        """
        data = self.transport.request("GET", f"/repos/{owner}/{repo}/branches/{_segment(branch)}")
        return Branch(
            name=data.get("name", branch),
            protected=data.get("protected", False),
            commit_sha=(data.get("commit") or {}).get("sha"),
        )

    def update_protection(
        self,
        owner: str,
        repo: str,
        branch: str,
        protection: BranchProtectionConfig,
    ) -> dict[str, Any]:
        """
        Set the protection rules of a branch, replacing any existing ones.

        GitHub API docs: https://docs.github.com/en/rest/branches/branch-protection#update-branch-protection
        """
        return self.transport.request(
            "PUT",
            f"/repos/{owner}/{repo}/branches/{_segment(branch)}/protection",
            body=protection.to_payload(),
        )

    def require_signatures(self, owner: str, repo: str, branch: str) -> bool:
        """
        Require signed commits on a protected branch.

        GitHub API docs: https://docs.github.com/en/rest/branches/branch-protection#create-commit-signature-protection

        Returns:
            Whether signatures are now enabled
        """
        data = self.transport.request(
            "POST",
            f"/repos/{owner}/{repo}/branches/{_segment(branch)}/protection/required_signatures",
        )
        return bool(data.get("enabled", True))
