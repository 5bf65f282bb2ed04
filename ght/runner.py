"""
Repository reconciliation.

Brings a single repository in line with a template document. The steps always
run in this order, each assuming the previous ones succeeded:

1. load the template
2. look the repository up and create it when it is missing
3. replace topics
4. write the pull request and issue templates
5. protect branches (and require signed commits on them)

A 404 from the repository, organization or file lookups selects an alternate
path. Every other failure stops the run; whatever was already changed on the
remote stays changed.
"""

import dataclasses
import logging
from typing import TYPE_CHECKING

from ght.exceptions import (
    GhtError,
    NotFoundError,
    RepoConfigNotFoundError,
)
from ght.logging import get_logger
from ght.report import build_result
from ght.template import load_config, read_content
from ght.types.config import BranchProtectionConfig, DesiredConfig
from ght.types.run import RepoOptions, RunResult

if TYPE_CHECKING:
    from ght.client import GitHubClient

PULL_REQUEST_TEMPLATE = ".github/pull_request_template.md"
ISSUE_TEMPLATE = ".github/issue_template.md"


def run(
    client: "GitHubClient",
    opts: RepoOptions,
    logger: logging.Logger | None = None,
) -> RunResult:
    """
    Create (if needed) and configure the repository described by ``opts``.

    Args:
        client: GitHub client (or a test double with the same resource clients)
        opts: Target repository and run options
        logger: Logger for progress messages (default: ``ght.runner``)

    Returns:
        RunResult with the full name and whether the repository was created

    Raises:
        RepoConfigNotFoundError: The repository is missing and the template cannot create it
        ConfigurationError: The template could not be read or decoded
        GhtError: The first remote failure, with the failing step as context
    """
    log = logger or get_logger("runner")

    log.debug("loading repo config from %s", opts.template)
    cfg = load_config(opts.template)

    created = False
    if not repository_exists(client, opts, log):
        create_repository(client, opts, cfg, log)
        created = True

    if opts.topics:
        replace_topics(client, opts, log)

    if cfg.pull_request_template:
        create_or_update_content(
            client,
            opts.owner,
            opts.name,
            PULL_REQUEST_TEMPLATE,
            read_content(cfg.pull_request_template),
            "Add/Update Pull Request Template",
            log,
        )

    if cfg.issue_template:
        create_or_update_content(
            client,
            opts.owner,
            opts.name,
            ISSUE_TEMPLATE,
            read_content(cfg.issue_template),
            "Add/Update Issue Template",
            log,
        )

    if cfg.branch_protection is not None:
        protect_branches(
            client,
            opts.owner,
            opts.name,
            opts.branches,
            cfg.branch_protection,
            cfg.required_signed_commits,
            log,
        )

    return build_result(opts, created)


def repository_exists(
    client: "GitHubClient", opts: RepoOptions, log: logging.Logger
) -> bool:
    """Whether the target repository exists; only a 404 means it does not."""
    try:
        client.repos.get(opts.owner, opts.name)
    except NotFoundError:
        log.debug("repo %s does not exist", opts.full_name)
        return False
    except GhtError as e:
        raise e.with_context(f"failed to fetch repo {opts.full_name}")

    log.debug("repo %s already exists", opts.full_name)
    return True


def create_repository(
    client: "GitHubClient",
    opts: RepoOptions,
    cfg: DesiredConfig,
    log: logging.Logger,
) -> None:
    """
    Create the target repository, from a template repository when one is configured.

    The template source defaults to the target owner and name when the
    template document does not name one.

    Raises:
        RepoConfigNotFoundError: Neither ``repository`` nor ``template_repo`` is configured
    """
    if cfg.repository is None and cfg.template_repo is None:
        raise RepoConfigNotFoundError()

    if cfg.template_repo is not None:
        tmpl = cfg.template_repo
        template_owner = tmpl.template_owner or opts.owner
        template_repo = tmpl.template_repo or opts.name

        log.info(
            "creating repo %s using template %s/%s",
            opts.full_name,
            template_owner,
            template_repo,
        )
        try:
            client.repos.create_from_template(
                template_owner,
                template_repo,
                owner=opts.owner,
                name=opts.name,
                description=opts.description or None,
                include_all_branches=tmpl.include_all_branches,
                private=tmpl.private,
            )
        except GhtError as e:
            raise e.with_context(
                f"failed to create repo {opts.full_name} using template "
                f"{template_owner}/{template_repo}"
            )
        return

    owner = resolve_owner(client, opts.owner, log)
    repo_cfg = dataclasses.replace(
        cfg.repository,
        name=opts.name,
        description=opts.description or cfg.repository.description,
        topics=list(opts.topics) or cfg.repository.topics,
    )

    log.info("creating repo %s", opts.full_name)
    try:
        client.repos.create(owner, repo_cfg)
    except GhtError as e:
        raise e.with_context(f"failed to create repo {opts.full_name}")


def resolve_owner(client: "GitHubClient", owner: str, log: logging.Logger) -> str:
    """
    Owner to create the repository under.

    Returns ``owner`` when it is an organization and "" (the authenticated
    user) when the organization lookup answers 404. Any other lookup failure
    is raised rather than guessed at.
    """
    try:
        client.orgs.get(owner)
    except NotFoundError:
        log.debug("%s is not an organization, using the authenticated user", owner)
        return ""
    except GhtError as e:
        raise e.with_context(f"failed to fetch org {owner}")
    return owner


def replace_topics(client: "GitHubClient", opts: RepoOptions, log: logging.Logger) -> None:
    log.info("replacing topics on %s: %s", opts.full_name, ", ".join(opts.topics))
    try:
        client.repos.replace_topics(opts.owner, opts.name, list(opts.topics))
    except GhtError as e:
        raise e.with_context(f"failed to replace topics on {opts.full_name}")


def create_or_update_content(
    client: "GitHubClient",
    owner: str,
    repo: str,
    path: str,
    content: bytes,
    message: str,
    log: logging.Logger,
) -> None:
    """Write ``content`` to ``path``, updating the file in place when it already exists."""
    target = f"{owner}/{repo}/{path}"

    sha = None
    try:
        current = client.contents.get(owner, repo, path)
    except NotFoundError:
        log.debug("file %s does not exist", target)
    except GhtError as e:
        raise e.with_context(f"failed to get file {target}")
    else:
        sha = current.sha

    action = "update" if sha else "create"
    log.info("%s file %s", "updating" if sha else "creating", target)
    try:
        client.contents.create_or_update(owner, repo, path, content, message, sha=sha)
    except GhtError as e:
        raise e.with_context(f"failed to {action} file {target}")


def protect_branches(
    client: "GitHubClient",
    owner: str,
    repo: str,
    branches: list[str],
    protection: BranchProtectionConfig,
    signed_commits: bool,
    log: logging.Logger,
) -> None:
    """Apply protection rules to each branch in order, stopping at the first failure."""
    for branch in branches:
        log.info("setting branch protection rules on %s", branch)

        try:
            client.branches.get(owner, repo, branch)
        except GhtError as e:
            raise e.with_context(
                f"failed to get branch {branch}. check if the branch exists; "
                "if you are creating a new repository use the auto_init option"
            )

        try:
            client.branches.update_protection(owner, repo, branch, protection)
        except GhtError as e:
            raise e.with_context(f"failed to set branch protection rules on {branch}")

        if signed_commits:
            log.debug("setting branch protection rules for signed commits on %s", branch)
            try:
                client.branches.require_signatures(owner, repo, branch)
            except GhtError as e:
                raise e.with_context(
                    f"failed to set branch protection rules for signed commits on {branch}"
                )
