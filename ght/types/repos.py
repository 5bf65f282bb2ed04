"""Remote platform data models."""

from dataclasses import dataclass


@dataclass
class Organization:
    """Organization information."""

    login: str
    name: str | None = None
    description: str | None = None


@dataclass
class Repository:
    """Repository information."""

    owner: str
    name: str
    full_name: str
    private: bool = False
    default_branch: str | None = None
    html_url: str | None = None
    description: str | None = None


@dataclass
class Branch:
    """Branch information."""

    name: str
    protected: bool = False
    commit_sha: str | None = None


@dataclass
class FileContent:
    """A file stored in a repository."""

    path: str
    sha: str
    content: bytes = b""
