"""Version parsing and bumping utilities.

Strict ``MAJOR.MINOR.PATCH`` parsing on top of ``semver`` plus the bump
arithmetic used by the decision engine. Pre-release suffixes must be
stripped by the caller before stepping.
"""

from __future__ import annotations

import logging
import re

import semver

from .errors import InvalidVersionFormat
from .models import BumpType

logger = logging.getLogger(__name__)

_TRIPLE_RE = re.compile(r"^\d+\.\d+\.\d+$", re.ASCII)


def parse_version(version_str: str) -> semver.Version:
    """Parse a plain ``MAJOR.MINOR.PATCH`` string into a semver.Version.

    Unlike ``semver.Version.parse``, pre-release and build metadata are
    rejected here: "1.2.3-beta.1" is not a valid base version.

    Raises:
        InvalidVersionFormat: If the string is not three dot-separated
            non-negative integers.
    """
    if not _TRIPLE_RE.match(version_str):
        raise InvalidVersionFormat(version_str)
    try:
        return semver.Version.parse(version_str)
    except ValueError as exc:
        # semver refuses leading zeros ("01.2.3")
        raise InvalidVersionFormat(version_str) from exc


def step_version(version_str: str, bump: BumpType) -> str:
    """Apply a bump to a base version and return the new version string.

    Examples:
        step_version("1.2.3", BumpType.MAJOR) → "2.0.0"
        step_version("1.2.3", BumpType.MINOR) → "1.3.0"
        step_version("1.2.3", BumpType.PATCH) → "1.2.4"

    Raises:
        InvalidVersionFormat: If ``version_str`` is not ``MAJOR.MINOR.PATCH``.
        ValueError: If ``bump`` is ``BumpType.NONE``.
    """
    version = parse_version(version_str)
    if bump is BumpType.MAJOR:
        return str(version.bump_major())
    if bump is BumpType.MINOR:
        return str(version.bump_minor())
    if bump is BumpType.PATCH:
        return str(version.bump_patch())
    raise ValueError(f"Cannot step a version by bump type {bump.value!r}")


def step_version_or_keep(version_str: str, bump: BumpType) -> str:
    """Like step_version(), but returns the input unchanged if it can't be parsed."""
    try:
        return step_version(version_str, bump)
    except InvalidVersionFormat as exc:
        logger.warning("%s; keeping version unchanged", exc)
        return version_str
