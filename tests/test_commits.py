"""Tests for next_semver.commits."""

from __future__ import annotations

import pytest

from next_semver.commits import classify_commit, classify_commits
from next_semver.models import BumpType


class TestClassifyCommit:
    @pytest.mark.parametrize(
        "message",
        [
            "feat!: drop Python 3.9",
            "refactor(api)!: rename endpoints",
            "BREAKING: new config layout",
            "MAJOR rewrite of the parser",
            "fix: Breaking change in error codes",
            "docs: note the breaking change",
        ],
    )
    def test_major(self, message: str) -> None:
        assert classify_commit(message) is BumpType.MAJOR

    @pytest.mark.parametrize(
        "message",
        [
            "feat: add --json flag",
            "feat(cli): add --json flag",
            "Feat: capitalized prefix",
            "feature: tag filtering",
            "add: retry on network errors",
            "new: dashboard",
            "FEATURE flag support",
            "MINOR: tweak defaults",
        ],
    )
    def test_minor(self, message: str) -> None:
        assert classify_commit(message) is BumpType.MINOR

    @pytest.mark.parametrize(
        "message",
        [
            "fix: off-by-one",
            "chore: bump deps",
            "Merge pull request #12 from org/branch",
            "a minor tweak",
            "fix: major typo in docs",
            "",
        ],
    )
    def test_patch(self, message: str) -> None:
        assert classify_commit(message) is BumpType.PATCH

    def test_major_checked_before_minor(self) -> None:
        assert classify_commit("feat!: new API") is BumpType.MAJOR


class TestClassifyCommits:
    def test_empty_is_none(self) -> None:
        assert classify_commits([]) is BumpType.NONE

    def test_only_fixes_is_patch(self) -> None:
        assert classify_commits(["fix: a", "chore: b"]) is BumpType.PATCH

    def test_any_feature_is_minor(self) -> None:
        assert classify_commits(["fix: a", "feat: b", "docs: c"]) is BumpType.MINOR

    def test_major_is_ceiling(self) -> None:
        commits = ["feat: a", "feat: b", "BREAKING: c", "feat: d"]
        assert classify_commits(commits) is BumpType.MAJOR

    def test_order_does_not_matter(self) -> None:
        commits = ["fix: a", "feat!: b", "feat: c"]
        assert classify_commits(commits) is classify_commits(list(reversed(commits)))

    def test_stops_at_first_major(self) -> None:
        def messages():
            yield "feat!: breaking"
            raise AssertionError("scanned past a major change")

        assert classify_commits(messages()) is BumpType.MAJOR

    def test_accepts_generator(self) -> None:
        assert classify_commits(m for m in ["fix: a"]) is BumpType.PATCH
