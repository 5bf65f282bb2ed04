"""ght resource clients."""

from ght.clients.branches import BranchesClient
from ght.clients.contents import ContentsClient
from ght.clients.orgs import OrgsClient
from ght.clients.repos import ReposClient

__all__ = [
    "OrgsClient",
    "ReposClient",
    "BranchesClient",
    "ContentsClient",
]
