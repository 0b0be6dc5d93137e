"""Commit message classification.

Maps the commit subjects since the last release to a bump type using two
fixed keyword sets. This is deliberately not a conventional-commits
parser: scopes and footers are not interpreted, and the branch being
released has no influence on the result.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import BumpType

# Uppercase keywords only count when written in uppercase ("BREAKING: ...").
MAJOR_KEYWORDS = ("BREAKING", "MAJOR")
MAJOR_MARKERS = ("!:", "breaking change")

MINOR_KEYWORDS = ("FEATURE", "MINOR")
MINOR_MARKERS = ("feat:", "feat(", "feature:", "add:", "new:")


def _matches(message: str, keywords: tuple[str, ...], markers: tuple[str, ...]) -> bool:
    if any(keyword in message for keyword in keywords):
        return True
    lowered = message.lower()
    return any(marker in lowered for marker in markers)


def classify_commit(message: str) -> BumpType:
    """Classify a single commit subject as major, minor or patch.

    Examples:
        "feat!: drop Python 3.9" → MAJOR
        "BREAKING: new config layout" → MAJOR
        "feat(cli): add --json" → MINOR
        "fix: off-by-one" → PATCH
    """
    if _matches(message, MAJOR_KEYWORDS, MAJOR_MARKERS):
        return BumpType.MAJOR
    if _matches(message, MINOR_KEYWORDS, MINOR_MARKERS):
        return BumpType.MINOR
    return BumpType.PATCH


def classify_commits(messages: Iterable[str]) -> BumpType:
    """Return the largest bump required by any of the messages.

    Returns BumpType.NONE when there are no messages. Scanning stops at the
    first major change since nothing can outrank it.
    """
    result = BumpType.NONE
    for message in messages:
        bump = classify_commit(message)
        if bump is BumpType.MAJOR:
            return bump
        if bump.level > result.level:
            result = bump
    return result
