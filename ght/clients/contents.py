"""Repository contents resource client.

GitHub API docs: https://docs.github.com/en/rest/repos/contents
"""

import base64
from typing import TYPE_CHECKING, Any

from ght.types.repos import FileContent

if TYPE_CHECKING:
    from ght.transport import HTTPTransport


class ContentsClient:
    """Client for reading and writing files in a repository."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, owner: str, repo: str, path: str, ref: str | None = None) -> FileContent:
        """
        Get a file.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path of the file inside the repository
            ref: Branch, tag or commit (default: the repository's default branch)

        Raises:
            NotFoundError: If the file does not exist
        """
        params = {"ref": ref} if ref else None
        data = self.transport.request(
            "GET", f"/repos/{owner}/{repo}/contents/{path}", params=params
        )
        encoded = data.get("content") or ""
        return FileContent(
            path=data.get("path", path),
            sha=data["sha"],
            content=base64.b64decode(encoded) if encoded else b"",
        )

    def create_or_update(
        self,
        owner: str,
        repo: str,
        path: str,
        content: bytes,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a file, or update it when ``sha`` (the current blob sha) is given.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path of the file inside the repository
            content: Raw file bytes
            message: Commit message
            sha: Blob sha of the file being replaced
        """
        body: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
        }
        if sha:
            body["sha"] = sha

        return self.transport.request(
            "PUT", f"/repos/{owner}/{repo}/contents/{path}", body=body
        )
