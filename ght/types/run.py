"""Per-run input and output models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RepoOptions:
    """What the user asked for on the command line."""

    owner: str
    name: str
    template: str
    description: str = ""
    topics: list[str] = field(default_factory=list)
    branches: list[str] = field(default_factory=list)
    debug: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class RunResult:
    """Outcome of a reconciliation run."""

    full_name: str
    created: bool
