"""ght type definitions.

This module exports all data model types used by the package.
"""

from ght.types.config import (
    BranchProtectionConfig,
    DesiredConfig,
    RepositoryConfig,
    RequiredPullRequestReviews,
    RequiredStatusChecks,
    Restrictions,
    StatusCheck,
    TemplateRepoConfig,
)
from ght.types.repos import Branch, FileContent, Organization, Repository
from ght.types.run import RepoOptions, RunResult

__all__ = [
    # Remote types
    "Organization",
    "Repository",
    "Branch",
    "FileContent",
    # Desired state
    "DesiredConfig",
    "RepositoryConfig",
    "TemplateRepoConfig",
    "BranchProtectionConfig",
    "RequiredStatusChecks",
    "StatusCheck",
    "RequiredPullRequestReviews",
    "Restrictions",
    # Run
    "RepoOptions",
    "RunResult",
]
