"""Tests for next_semver.branches."""

from __future__ import annotations

import pytest

from next_semver.branches import channel_for_branch, classify_branch
from next_semver.models import Channel


class TestClassifyBranch:
    @pytest.mark.parametrize(
        ("branch", "channel"),
        [
            ("release", Channel.NONE),
            ("main", Channel.BETA),
            ("master", Channel.BETA),
            ("staging", Channel.BETA),
            ("dev", Channel.ALPHA),
            ("development", Channel.ALPHA),
        ],
    )
    def test_table(self, branch: str, channel: Channel) -> None:
        assert classify_branch(branch) is channel

    def test_lowercases_before_lookup(self) -> None:
        assert classify_branch("Main") is Channel.BETA
        assert classify_branch("DEV") is Channel.ALPHA

    @pytest.mark.parametrize(
        "branch",
        ["feature/alpha-login", "beta", "alpha", "release/1.2", "develop", "my-main", ""],
    )
    def test_no_substring_matching(self, branch: str) -> None:
        assert classify_branch(branch) is None


class TestChannelForBranch:
    def test_recognized(self) -> None:
        assert channel_for_branch("dev") is Channel.ALPHA

    def test_unrecognized_is_stable(self) -> None:
        assert channel_for_branch("feature/alpha-login") is Channel.NONE
