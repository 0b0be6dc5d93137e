"""Pre-release lifecycle rules.

Channels form a small state machine: stable → alpha → beta → stable.
Moving forward, staying on the same channel, and releasing from any
channel are all fine. Going from beta back to alpha is refused, because
the alpha build would sort below beta builds that were already published.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from .errors import PreReleaseLifecycleViolation
from .models import Channel, SemanticVersion

FORBIDDEN_TRANSITIONS: frozenset[tuple[Channel, Channel]] = frozenset(
    {(Channel.BETA, Channel.ALPHA)}
)


def _label(channel: Channel) -> str:
    return "stable" if channel is Channel.NONE else channel.value


class Transition(BaseModel):
    """Outcome of checking a move between two channels.

    Attributes:
        current: Channel of the latest release tag.
        target: Channel the target branch releases on.
        allowed: Whether the move is legal.
        explanation: Human-readable reason when ``allowed`` is False.
        instructions: How to unblock the release when ``allowed`` is False.
    """

    model_config = ConfigDict(frozen=True)

    current: Channel
    target: Channel
    allowed: bool
    explanation: str = ""
    instructions: str = ""


def check_transition(current: Channel, target: Channel) -> Transition:
    """Check whether a release may move from ``current`` to ``target``."""
    if (current, target) not in FORBIDDEN_TRANSITIONS:
        return Transition(current=current, target=target, allowed=True)

    arrow = f"{_label(current)} → {_label(target)}"
    return Transition(
        current=current,
        target=target,
        allowed=False,
        explanation=(
            f"Pre-release lifecycle violation: cannot go from {_label(current)} "
            f"back to {_label(target)} ({arrow})."
        ),
        instructions=(
            f"The latest release is a {_label(current)} pre-release, so this branch "
            f"cannot publish {_label(target)} builds ({arrow}). Either continue on a "
            f"{_label(current)} branch, or publish a stable release from the release "
            f"branch before starting a new {_label(target)} series."
        ),
    )


def ensure_transition(current: Channel, target: Channel) -> Transition:
    """Like check_transition(), but raises if the move isn't allowed.

    Raises:
        PreReleaseLifecycleViolation: For a forbidden transition.
    """
    transition = check_transition(current, target)
    if not transition.allowed:
        raise PreReleaseLifecycleViolation(transition.explanation, transition.instructions)
    return transition


def next_build_number(
    base: SemanticVersion, channel: Channel, existing: Iterable[SemanticVersion]
) -> int:
    """Next pre-release counter for ``base`` on ``channel``.

    One more than the highest build already tagged for the same
    (major, minor, patch) and channel, or 1 if there is none.

    Example:
        Tags 1.3.0-alpha.1 and 1.3.0-alpha.4 exist → next alpha build of 1.3.0 is 5.
    """
    builds = [
        v.build
        for v in existing
        if v.channel is channel
        and v.build is not None
        and (v.major, v.minor, v.patch) == (base.major, base.minor, base.patch)
    ]
    return max(builds, default=0) + 1
