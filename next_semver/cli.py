"""CLI entry point for next-semver."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from next_semver.config import load_settings
from next_semver.engine import compute_next_version
from next_semver.errors import ConfigError
from next_semver.models import VersionDecision
from next_semver.outputs import write_github_output
from next_semver.repository import GitRepository
from next_semver.shell import step


def _print_summary(decision: VersionDecision) -> None:
    step("Next version")
    print(f"  branch:   {decision.target_branch}")
    print(f"  last tag: {decision.last_release_tag or '<none>'}")
    print(f"  bump:     {decision.bump_type.value}")
    print(f"  {decision.current_version} → {decision.new_version}")
    if decision.is_first_release:
        print("  (first release)")


@click.group()
@click.version_option(package_name="next-semver")
def cli() -> None:
    """Compute the next semantic version from git tags, commits and branch."""


@cli.command()
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Path to the git repository to inspect.",
)
@click.option(
    "--branch",
    envvar="GITHUB_REF_NAME",
    default=None,
    help="Branch being built. Discovered from the checkout if omitted.",
)
@click.option(
    "--target-branch",
    default=None,
    help="Branch to pick the pre-release channel from (overrides --branch).",
)
@click.option(
    "--force-first-release",
    is_flag=True,
    help="Ignore existing tags and release 1.0.0.",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append step outputs to this file (defaults to $GITHUB_OUTPUT).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the decision as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log each decision step.")
def compute(
    repo: Path,
    branch: str | None,
    target_branch: str | None,
    force_first_release: bool,
    github_output: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Decide the next version for the repository (usually called from CI)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        settings = load_settings(repo)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    decision = compute_next_version(
        GitRepository(repo),
        branch_name=branch,
        target_branch=target_branch,
        force_first_release=force_first_release,
        settings=settings,
    )

    if github_output:
        write_github_output(github_output, decision)

    if as_json:
        click.echo(decision.model_dump_json(by_alias=True, indent=2))
    else:
        _print_summary(decision)

    if decision.action_required:
        click.echo(f"WARNING: {decision.warning}", err=True)
        click.echo(f"Action required: {decision.action_instructions}", err=True)
