"""Exceptions raised by next-semver.

None of these are fatal to a caller of ``compute_next_version``: the
engine converts lifecycle violations and repository failures into a
``VersionDecision`` with ``action_required`` set.
"""

from __future__ import annotations


class NextSemverError(Exception):
    """Base class for all next-semver errors."""


class InvalidVersionFormat(NextSemverError, ValueError):
    """A version string is not ``major.minor.patch``."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Invalid version format: {version!r} (expected MAJOR.MINOR.PATCH)")
        self.version = version


class PreReleaseLifecycleViolation(NextSemverError):
    """A pre-release channel transition that moves backwards (e.g. beta → alpha).

    Attributes:
        explanation: What transition was attempted and why it is refused.
        instructions: What a human should do to unblock the release.
    """

    def __init__(self, explanation: str, instructions: str) -> None:
        super().__init__(explanation)
        self.explanation = explanation
        self.instructions = instructions


class RepositoryAccessFailure(NextSemverError):
    """Tags, commits or branches could not be read from the repository."""


class ConfigError(NextSemverError):
    """Invalid [tool.next-semver] settings in pyproject.toml."""
