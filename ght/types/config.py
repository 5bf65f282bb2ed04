"""
Desired-state data models decoded from a template document.

Every section knows how to build itself from the decoded JSON (``from_dict``)
and how to turn back into the remote API's payload shape (``to_dict``). Keys
the models do not recognize are ignored; recognized keys with the wrong JSON
type are rejected with TemplateParseError.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from ght.exceptions import TemplateParseError


def _section(data: Any, where: str) -> dict[str, Any] | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TemplateParseError(f"{where} must be an object")
    return data


def _bool(data: dict[str, Any], key: str, where: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise TemplateParseError(f"{where}.{key} must be a boolean")
    return value


def _int(data: dict[str, Any], key: str, where: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TemplateParseError(f"{where}.{key} must be an integer")
    return value


def _str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TemplateParseError(f"{where}.{key} must be a string")
    return value


def _str_list(data: dict[str, Any], key: str, where: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TemplateParseError(f"{where}.{key} must be a list of strings")
    return list(value)


def _compact(obj: Any) -> dict[str, Any]:
    """Dataclass to dict, dropping unset fields and recursing into sections."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if is_dataclass(value):
            value = value.to_dict()
        elif isinstance(value, list):
            value = [v.to_dict() if is_dataclass(v) else v for v in value]
        result[f.name] = value
    return result


@dataclass
class StatusCheck:
    """A required status check, optionally pinned to a GitHub App."""

    context: str
    app_id: int | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "StatusCheck":
        data = _section(data, where)
        if data is None:
            raise TemplateParseError(f"{where} must be an object")
        context = _str(data, "context", where)
        if context is None:
            raise TemplateParseError(f"{where}.context is required")
        return cls(context=context, app_id=_int(data, "app_id", where))

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class RequiredStatusChecks:
    """Status checks that must pass before merging."""

    strict: bool | None = None
    contexts: list[str] | None = None
    checks: list[StatusCheck] | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "RequiredStatusChecks | None":
        data = _section(data, where)
        if data is None:
            return None
        checks = data.get("checks")
        if checks is not None:
            if not isinstance(checks, list):
                raise TemplateParseError(f"{where}.checks must be a list")
            checks = [
                StatusCheck.from_dict(c, f"{where}.checks[{i}]")
                for i, c in enumerate(checks)
            ]
        return cls(
            strict=_bool(data, "strict", where),
            contexts=_str_list(data, "contexts", where),
            checks=checks,
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class Restrictions:
    """Users, teams and apps allowed to do something on a protected branch."""

    users: list[str] | None = None
    teams: list[str] | None = None
    apps: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "Restrictions | None":
        data = _section(data, where)
        if data is None:
            return None
        return cls(
            users=_str_list(data, "users", where),
            teams=_str_list(data, "teams", where),
            apps=_str_list(data, "apps", where),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class RequiredPullRequestReviews:
    """Pull request review requirements."""

    dismissal_restrictions: Restrictions | None = None
    dismiss_stale_reviews: bool | None = None
    require_code_owner_reviews: bool | None = None
    required_approving_review_count: int | None = None
    require_last_push_approval: bool | None = None
    bypass_pull_request_allowances: Restrictions | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "RequiredPullRequestReviews | None":
        data = _section(data, where)
        if data is None:
            return None
        return cls(
            dismissal_restrictions=Restrictions.from_dict(
                data.get("dismissal_restrictions"), f"{where}.dismissal_restrictions"
            ),
            dismiss_stale_reviews=_bool(data, "dismiss_stale_reviews", where),
            require_code_owner_reviews=_bool(data, "require_code_owner_reviews", where),
            required_approving_review_count=_int(
                data, "required_approving_review_count", where
            ),
            require_last_push_approval=_bool(data, "require_last_push_approval", where),
            bypass_pull_request_allowances=Restrictions.from_dict(
                data.get("bypass_pull_request_allowances"),
                f"{where}.bypass_pull_request_allowances",
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class BranchProtectionConfig:
    """Protection rules applied to every branch named on the command line."""

    required_status_checks: RequiredStatusChecks | None = None
    enforce_admins: bool | None = None
    required_pull_request_reviews: RequiredPullRequestReviews | None = None
    restrictions: Restrictions | None = None
    required_linear_history: bool | None = None
    allow_force_pushes: bool | None = None
    allow_deletions: bool | None = None
    block_creations: bool | None = None
    required_conversation_resolution: bool | None = None
    lock_branch: bool | None = None
    allow_fork_syncing: bool | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str = "branch_protection") -> "BranchProtectionConfig | None":
        data = _section(data, where)
        if data is None:
            return None
        return cls(
            required_status_checks=RequiredStatusChecks.from_dict(
                data.get("required_status_checks"), f"{where}.required_status_checks"
            ),
            enforce_admins=_bool(data, "enforce_admins", where),
            required_pull_request_reviews=RequiredPullRequestReviews.from_dict(
                data.get("required_pull_request_reviews"),
                f"{where}.required_pull_request_reviews",
            ),
            restrictions=Restrictions.from_dict(
                data.get("restrictions"), f"{where}.restrictions"
            ),
            required_linear_history=_bool(data, "required_linear_history", where),
            allow_force_pushes=_bool(data, "allow_force_pushes", where),
            allow_deletions=_bool(data, "allow_deletions", where),
            block_creations=_bool(data, "block_creations", where),
            required_conversation_resolution=_bool(
                data, "required_conversation_resolution", where
            ),
            lock_branch=_bool(data, "lock_branch", where),
            allow_fork_syncing=_bool(data, "allow_fork_syncing", where),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)

    def to_payload(self) -> dict[str, Any]:
        """
        Request body for the update-branch-protection endpoint.

        The endpoint requires these four keys to be present, null when unused.
        """
        payload = self.to_dict()
        payload.setdefault("required_status_checks", None)
        payload["enforce_admins"] = bool(self.enforce_admins)
        payload.setdefault("required_pull_request_reviews", None)
        payload.setdefault("restrictions", None)
        return payload


@dataclass
class RepositoryConfig:
    """Fields sent when creating a repository from scratch."""

    name: str | None = None
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    visibility: str | None = None
    has_issues: bool | None = None
    has_projects: bool | None = None
    has_wiki: bool | None = None
    has_discussions: bool | None = None
    is_template: bool | None = None
    team_id: int | None = None
    auto_init: bool | None = None
    gitignore_template: str | None = None
    license_template: str | None = None
    allow_squash_merge: bool | None = None
    allow_merge_commit: bool | None = None
    allow_rebase_merge: bool | None = None
    allow_auto_merge: bool | None = None
    delete_branch_on_merge: bool | None = None
    topics: list[str] | None = None

    _STRINGS = ("name", "description", "homepage", "visibility", "gitignore_template", "license_template")
    _INTS = ("team_id",)

    @classmethod
    def from_dict(cls, data: Any, where: str = "repository") -> "RepositoryConfig | None":
        data = _section(data, where)
        if data is None:
            return None
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "topics":
                values[f.name] = _str_list(data, f.name, where)
            elif f.name in cls._STRINGS:
                values[f.name] = _str(data, f.name, where)
            elif f.name in cls._INTS:
                values[f.name] = _int(data, f.name, where)
            else:
                values[f.name] = _bool(data, f.name, where)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class TemplateRepoConfig:
    """Source template repository and how much of it to copy."""

    template_owner: str | None = None
    template_repo: str | None = None
    include_all_branches: bool | None = None
    private: bool | None = None

    @classmethod
    def from_dict(cls, data: Any, where: str = "template_repo") -> "TemplateRepoConfig | None":
        data = _section(data, where)
        if data is None:
            return None
        return cls(
            template_owner=_str(data, "template_owner", where),
            template_repo=_str(data, "template_repo", where),
            include_all_branches=_bool(data, "include_all_branches", where),
            private=_bool(data, "private", where),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(self)


@dataclass
class DesiredConfig:
    """The complete desired state described by a template document."""

    repository: RepositoryConfig | None = None
    branch_protection: BranchProtectionConfig | None = None
    template_repo: TemplateRepoConfig | None = None
    required_signed_commits: bool = False
    pull_request_template: str = ""
    issue_template: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "DesiredConfig":
        if not isinstance(data, dict):
            raise TemplateParseError("template document must be a JSON object")
        return cls(
            repository=RepositoryConfig.from_dict(data.get("repository")),
            branch_protection=BranchProtectionConfig.from_dict(data.get("branch_protection")),
            template_repo=TemplateRepoConfig.from_dict(data.get("template_repo")),
            required_signed_commits=bool(_bool(data, "required_signed_commits", "template")),
            pull_request_template=_str(data, "pull_request_template", "template") or "",
            issue_template=_str(data, "issue_template", "template") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.repository is not None:
            result["repository"] = self.repository.to_dict()
        if self.branch_protection is not None:
            result["branch_protection"] = self.branch_protection.to_dict()
        if self.template_repo is not None:
            result["template_repo"] = self.template_repo.to_dict()
        result["required_signed_commits"] = self.required_signed_commits
        if self.pull_request_template:
            result["pull_request_template"] = self.pull_request_template
        if self.issue_template:
            result["issue_template"] = self.issue_template
        return result
