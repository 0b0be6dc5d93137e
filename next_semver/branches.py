"""Branch name → pre-release channel lookup.

Channels come from an exact-name table. Substrings are never inspected,
so ``feature/alpha-login`` is just an unrecognized branch, not an alpha one.
"""

from __future__ import annotations

import logging

from .models import Channel

logger = logging.getLogger(__name__)

BRANCH_CHANNELS: dict[str, Channel] = {
    "release": Channel.NONE,
    "main": Channel.BETA,
    "master": Channel.BETA,
    "staging": Channel.BETA,
    "dev": Channel.ALPHA,
    "development": Channel.ALPHA,
}


def classify_branch(branch_name: str) -> Channel | None:
    """Look up the channel for a branch, or None if the branch isn't in the table."""
    return BRANCH_CHANNELS.get(branch_name.lower())


def channel_for_branch(branch_name: str) -> Channel:
    """Resolve the channel to release a branch on.

    Unrecognized branches release stable versions.
    """
    channel = classify_branch(branch_name)
    if channel is None:
        logger.info("Branch %r has no pre-release channel; releasing stable", branch_name)
        return Channel.NONE
    return channel
