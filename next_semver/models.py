"""Data models for next-semver.

These Pydantic models are the value types passed between the tag selector,
the classifiers, the lifecycle checks and the decision engine. All of them
are frozen: a decision is computed once and never mutated afterwards.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt, model_validator
from pydantic.alias_generators import to_camel


class Channel(str, Enum):
    """Pre-release track of a version. ``NONE`` means stable."""

    NONE = "none"
    ALPHA = "alpha"
    BETA = "beta"

    @property
    def rank(self) -> int:
        """Sort rank within one (major, minor, patch): alpha < beta < stable."""
        return _CHANNEL_RANK[self]


_CHANNEL_RANK = {Channel.ALPHA: 0, Channel.BETA: 1, Channel.NONE: 2}


class BumpType(str, Enum):
    """Magnitude of change since the last release."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    @property
    def level(self) -> int:
        return _BUMP_LEVEL[self]


_BUMP_LEVEL = {BumpType.NONE: 0, BumpType.PATCH: 1, BumpType.MINOR: 2, BumpType.MAJOR: 3}


@total_ordering
class SemanticVersion(BaseModel):
    """A ``major.minor.patch[-channel.build]`` version.

    Ordering compares the triple first. For equal triples a stable version
    sorts after every pre-release, alpha sorts before beta, and builds within
    one channel compare numerically.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        channel: Pre-release channel, ``Channel.NONE`` for stable releases.
        build: Pre-release counter. Set iff ``channel`` is not ``NONE``.
    """

    model_config = ConfigDict(frozen=True)

    major: NonNegativeInt
    minor: NonNegativeInt
    patch: NonNegativeInt
    channel: Channel = Channel.NONE
    build: PositiveInt | None = None

    @model_validator(mode="after")
    def _build_matches_channel(self) -> SemanticVersion:
        if (self.channel is Channel.NONE) != (self.build is None):
            raise ValueError("build must be set exactly when channel is alpha or beta")
        return self

    @property
    def is_prerelease(self) -> bool:
        return self.channel is not Channel.NONE

    @property
    def base(self) -> SemanticVersion:
        """The stable version with the same triple (pre-release suffix stripped)."""
        return SemanticVersion(major=self.major, minor=self.minor, patch=self.patch)

    @property
    def suffix(self) -> str:
        """``-channel.build`` for pre-releases, empty for stable versions."""
        if not self.is_prerelease:
            return ""
        return f"-{self.channel.value}.{self.build}"

    def sort_key(self) -> tuple[int, int, int, int, int]:
        return (self.major, self.minor, self.patch, self.channel.rank, self.build or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}{self.suffix}"


class Tag(BaseModel):
    """A release tag as it appears in the repository, plus its parsed version.

    Attributes:
        raw: Tag name exactly as listed by git (e.g. "v1.2.3").
        version: Parsed semantic version.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    version: SemanticVersion


class VersionDecision(BaseModel):
    """The result of one next-version computation.

    Serializes with camelCase keys (``model_dump(by_alias=True)``), which
    are the names CI pipelines consume.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    current_version: str
    bump_type: BumpType
    new_version: str
    last_release_tag: str = ""
    target_branch: str = ""
    channel: str = ""
    suffix: str = ""
    warning: str = ""
    action_required: bool = False
    action_instructions: str = ""
    is_first_release: bool = False
