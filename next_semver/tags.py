"""Release tag discovery and ordering.

Turns the unfiltered tag list of a repository into an ordered release
history. Only tags that look like ``v1.2.3`` / ``1.2.3``, optionally with an
``-alpha.N`` or ``-beta.N`` suffix, are considered releases; everything
else (``nightly``, ``v1.2``, ``v1.0.0-rc.1``) is ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

import semver
from pydantic import BaseModel, ConfigDict

from .models import Channel, SemanticVersion, Tag

logger = logging.getLogger(__name__)

TAG_RE = re.compile(r"^v?\d+\.\d+\.\d+(-[\w.]+)?$", re.ASCII)
_PRERELEASE_RE = re.compile(r"^(?P<channel>alpha|beta)\.(?P<build>[1-9]\d*)$", re.ASCII)


class TagHistory(BaseModel):
    """Release tags sorted newest first.

    Attributes:
        tags: Parsed tags in descending version order. When two spellings
              name the same version ("v1.0.0" and "1.0.0"), the one with
              the ``v`` prefix comes first.
    """

    model_config = ConfigDict(frozen=True)

    tags: tuple[Tag, ...] = ()

    @property
    def latest(self) -> Tag | None:
        return self.tags[0] if self.tags else None

    @property
    def versions(self) -> Iterator[SemanticVersion]:
        return (tag.version for tag in self.tags)

    def __len__(self) -> int:
        return len(self.tags)


def parse_tag(raw: str) -> Tag | None:
    """Parse a raw tag name, returning None if it isn't a release tag.

    Examples:
        parse_tag("v1.2.3") → Tag(raw="v1.2.3", version=1.2.3)
        parse_tag("1.3.0-beta.2") → Tag(raw="1.3.0-beta.2", version=1.3.0-beta.2)
        parse_tag("v1.0.0-rc.1") → None (unknown channel)
        parse_tag("latest") → None
    """
    raw = raw.strip()
    if not TAG_RE.match(raw):
        return None

    try:
        parsed = semver.Version.parse(raw.removeprefix("v"))
    except ValueError:
        logger.debug("Ignoring tag %s: not valid semver", raw)
        return None

    channel = Channel.NONE
    build = None
    if parsed.prerelease:
        match = _PRERELEASE_RE.match(parsed.prerelease)
        if not match:
            logger.debug("Ignoring tag %s: unsupported pre-release %s", raw, parsed.prerelease)
            return None
        channel = Channel(match["channel"])
        build = int(match["build"])

    version = SemanticVersion(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        channel=channel,
        build=build,
    )
    return Tag(raw=raw, version=version)


def select_tags(raw_tags: Iterable[str]) -> TagHistory:
    """Filter and order a repository's tags into a release history.

    The result is deterministic for a given set of tag names regardless of
    the order they are listed in.
    """
    parsed = [tag for tag in (parse_tag(raw) for raw in set(raw_tags)) if tag is not None]
    parsed.sort(
        key=lambda tag: (tag.version.sort_key(), tag.raw.startswith("v"), tag.raw),
        reverse=True,
    )
    return TagHistory(tags=tuple(parsed))
