"""Run outcome reporting."""

from ght.types.run import RepoOptions, RunResult


def build_result(opts: RepoOptions, created: bool) -> RunResult:
    """Build the outcome record for a finished run."""
    return RunResult(full_name=opts.full_name, created=created)


def format_result(result: RunResult) -> str:
    """One-line summary of a run for humans."""
    if result.created:
        return f"repository {result.full_name} created and configured"
    return f"repository {result.full_name} already exists, configuration applied"
