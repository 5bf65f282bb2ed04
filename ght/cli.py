"""Command line interface for ght."""

import logging
import sys

import click

from ght import __version__
from ght.client import GitHubClient
from ght.exceptions import GhtError
from ght.logging import configure_logging, get_logger
from ght.report import format_result
from ght.runner import run
from ght.types.run import RepoOptions

logger = get_logger("cli")


class AliasedGroup(click.Group):
    """Click group that resolves command aliases."""

    ALIASES = {
        "r": "repo",
        "repository": "repo",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


def _split_csv(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[str]:
    """Accept both ``-l a -l b`` and ``-l a,b``."""
    items: list[str] = []
    for value in values:
        items.extend(v.strip() for v in value.split(",") if v.strip())
    return items


@click.group(cls=AliasedGroup)
def cli() -> None:
    """ght is a CLI tool for creating a new repository based on the template."""


@cli.command()
@click.option("--name", "-n", required=True, help="The name of the repository")
@click.option(
    "--owner",
    "-o",
    required=True,
    help="The name of the owner, can be an organization or the authenticated user",
)
@click.option("--description", "-d", default="", help="A short description of the repository")
@click.option(
    "--topics",
    "-l",
    multiple=True,
    callback=_split_csv,
    help="Topics to add to the repository (repeatable or comma separated)",
)
@click.option(
    "--branches",
    "-b",
    multiple=True,
    callback=_split_csv,
    help="Branches the protection rules are applied to (repeatable or comma separated)",
)
@click.option(
    "--template",
    "-t",
    required=True,
    help="JSON file containing the template, can be a local path or an https:// URL",
)
@click.option("--debug", "-v", is_flag=True, help="Enable debug mode")
def repo(
    name: str,
    owner: str,
    description: str,
    topics: list[str],
    branches: list[str],
    template: str,
    debug: bool,
) -> None:
    """Create a new repository based on the template."""
    configure_logging(level=logging.DEBUG if debug else logging.INFO)
    logger.debug("debug mode enabled")

    opts = RepoOptions(
        owner=owner,
        name=name,
        template=template,
        description=description,
        topics=topics,
        branches=branches,
        debug=debug,
    )

    try:
        with GitHubClient.from_env() as client:
            result = run(client, opts)
    except GhtError as e:
        logger.error("%s", e)
        sys.exit(1)

    click.echo(format_result(result))


@cli.command()
def version() -> None:
    """Print the version number of ght."""
    click.echo(f"Version: {__version__}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
