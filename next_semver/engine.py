"""Next-version decision: tags + commits + branch → VersionDecision.

The engine combines the leaf components in a fixed order:
1. Select the latest release tag (no tag → first release, 1.0.0)
2. Classify the commits since that tag (none → nothing to release)
3. Resolve the target branch's pre-release channel
4. Validate the channel transition (beta → alpha is refused)
5. Step the base version and attach the next build number

``decide`` is pure and works on data already in memory.
``compute_next_version`` gathers that data from a repository and is the
only place repository failures are caught: whatever happens, the caller
gets a well-formed decision back.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .branches import channel_for_branch, classify_branch
from .commits import classify_commits
from .config import DEFAULT_BRANCH, Settings
from .errors import PreReleaseLifecycleViolation, RepositoryAccessFailure
from .lifecycle import ensure_transition, next_build_number
from .models import BumpType, Channel, SemanticVersion, VersionDecision
from .repository import Repository
from .tags import TagHistory, select_tags
from .versions import parse_version, step_version_or_keep

logger = logging.getLogger(__name__)

INITIAL_VERSION = "0.0.0"
FIRST_RELEASE = SemanticVersion(major=1, minor=0, patch=0)

REPOSITORY_INSTRUCTIONS = (
    "Check that the repository is a git checkout with its full history and "
    "tags fetched (e.g. actions/checkout with fetch-depth: 0) and that git is "
    "installed, then re-run the version computation."
)


def resolve_channel(target_branch: str, default_branch: str = DEFAULT_BRANCH) -> Channel:
    """Channel a branch releases on.

    The default branch releases stable unless the table puts it on alpha,
    so a repository whose default is ``dev`` still ships alpha builds.
    """
    is_default = target_branch.lower() == default_branch.lower()
    if is_default and classify_branch(default_branch) in (Channel.BETA, None):
        return Channel.NONE
    return channel_for_branch(target_branch)


def _with_build(base: SemanticVersion, channel: Channel, build: int) -> SemanticVersion:
    if channel is Channel.NONE:
        return base
    return SemanticVersion(
        major=base.major, minor=base.minor, patch=base.patch, channel=channel, build=build
    )


def _inflight_bump(base: SemanticVersion) -> BumpType:
    """Bump a pre-release triple already represents (2.0.0 → major, 1.3.0 → minor)."""
    if base.minor == 0 and base.patch == 0:
        return BumpType.MAJOR
    if base.patch == 0:
        return BumpType.MINOR
    return BumpType.PATCH


def next_base(current: SemanticVersion, bump: BumpType) -> SemanticVersion:
    """Stable triple the next release is built on.

    A stable version is always stepped. A pre-release already points at an
    unreleased triple, so it is only stepped when the commits require a
    bigger bump than that triple carries; otherwise the series continues.

    Examples:
        1.2.3, minor → 1.3.0
        1.3.0-alpha.2, patch → 1.3.0
        1.3.0-alpha.2, major → 2.0.0
    """
    base = current.base
    if current.is_prerelease and bump.level <= _inflight_bump(base).level:
        return base
    stepped = parse_version(step_version_or_keep(str(base), bump))
    return SemanticVersion(major=stepped.major, minor=stepped.minor, patch=stepped.patch)


def first_release(target_branch: str, channel: Channel = Channel.NONE) -> VersionDecision:
    """Decision for a repository without any release tag: 0.0.0 → 1.0.0."""
    new = _with_build(FIRST_RELEASE, channel, 1)
    logger.info("No release tags found; first release is %s", new)
    return VersionDecision(
        current_version=INITIAL_VERSION,
        bump_type=BumpType.MAJOR,
        new_version=str(new),
        target_branch=target_branch,
        channel=new.channel.value if new.is_prerelease else "",
        suffix=new.suffix,
        is_first_release=True,
    )


def repository_failure(target_branch: str, error: Exception) -> VersionDecision:
    """Decision returned when the repository history couldn't be read."""
    return VersionDecision(
        current_version=INITIAL_VERSION,
        bump_type=BumpType.NONE,
        new_version=INITIAL_VERSION,
        target_branch=target_branch,
        warning=str(error),
        action_required=True,
        action_instructions=REPOSITORY_INSTRUCTIONS,
        is_first_release=True,
    )


def decide(
    history: TagHistory,
    commits: Sequence[str],
    target_branch: str,
    *,
    default_branch: str = DEFAULT_BRANCH,
) -> VersionDecision:
    """Compute the next version from an already-loaded history.

    Args:
        history: Release tags, newest first.
        commits: Commit subjects since ``history.latest`` (any order).
        target_branch: Branch the release is for; selects the channel.
        default_branch: Repository default branch; releases stable unless
                        the table maps it to alpha.
    """
    channel = resolve_channel(target_branch, default_branch)
    latest = history.latest
    if latest is None:
        return first_release(target_branch, channel)

    current = latest.version
    unchanged = {
        "current_version": str(current),
        "new_version": str(current),
        "last_release_tag": latest.raw,
        "target_branch": target_branch,
        "channel": current.channel.value if current.is_prerelease else "",
        "suffix": current.suffix,
    }

    bump = classify_commits(commits)
    if bump is BumpType.NONE:
        logger.info("No commits since %s; keeping %s", latest.raw, current)
        return VersionDecision(bump_type=BumpType.NONE, **unchanged)

    try:
        ensure_transition(current.channel, channel)
    except PreReleaseLifecycleViolation as exc:
        logger.warning("%s", exc)
        return VersionDecision(
            bump_type=BumpType.NONE,
            warning=exc.explanation,
            action_required=True,
            action_instructions=exc.instructions,
            **unchanged,
        )

    base = next_base(current, bump)
    new = _with_build(base, channel, next_build_number(base, channel, history.versions))
    logger.info("%s → %s (%s bump on %s)", current, new, bump.value, target_branch)
    return VersionDecision(
        current_version=str(current),
        bump_type=bump,
        new_version=str(new),
        last_release_tag=latest.raw,
        target_branch=target_branch,
        channel=new.channel.value if new.is_prerelease else "",
        suffix=new.suffix,
    )


def compute_next_version(
    repo: Repository,
    branch_name: str | None = None,
    target_branch: str | None = None,
    force_first_release: bool = False,
    settings: Settings | None = None,
) -> VersionDecision:
    """Inspect a repository and decide its next version.

    Args:
        repo: Source of tags, commits and branch names.
        branch_name: Branch being built. Discovered from ``repo`` if omitted.
        target_branch: Overrides ``branch_name`` for channel selection
                       (e.g. the base branch of a pull request).
        force_first_release: Ignore existing tags and release 1.0.0.
        settings: Repository settings; defaults apply if omitted.

    Never raises for repository problems: those produce a decision with
    ``action_required`` set and the error in ``warning``.
    """
    settings = settings or Settings()
    branch = target_branch or branch_name
    try:
        default_branch = repo.default_branch_name() or settings.default_branch
        if not branch:
            branch = repo.current_branch_name() or default_branch

        if force_first_release:
            return first_release(branch, resolve_channel(branch, default_branch))

        history = select_tags(repo.list_tags())
        commits = repo.list_commit_messages(history.latest.raw) if history.latest else []
    except RepositoryAccessFailure as exc:
        logger.warning("Could not read repository history: %s", exc)
        return repository_failure(branch or settings.default_branch, exc)

    return decide(history, commits, branch, default_branch=default_branch)
