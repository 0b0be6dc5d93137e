"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from next_semver.errors import RepositoryAccessFailure


class FakeRepository:
    """In-memory Repository with canned tags, commits and branches."""

    def __init__(
        self,
        tags: set[str] | None = None,
        commits: list[str] | None = None,
        current_branch: str | None = "main",
        default_branch: str | None = "main",
        fail_with: str | None = None,
    ) -> None:
        self.tags = tags or set()
        self.commits = commits or []
        self.current_branch = current_branch
        self.default_branch = default_branch
        self.fail_with = fail_with
        self.commits_since: list[str | None] = []

    def list_tags(self) -> set[str]:
        if self.fail_with:
            raise RepositoryAccessFailure(self.fail_with)
        return set(self.tags)

    def list_commit_messages(self, since_tag: str | None) -> list[str]:
        self.commits_since.append(since_tag)
        return list(self.commits)

    def current_branch_name(self) -> str | None:
        return self.current_branch

    def default_branch_name(self) -> str | None:
        return self.default_branch


@pytest.fixture
def fake_repo() -> type[FakeRepository]:
    """The FakeRepository class, for building per-test repositories."""
    return FakeRepository


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a pyproject.toml with a [tool.next-semver] table."""
    content = """\
[project]
name = "example"
version = "1.0.0"

[tool.next-semver]
default-branch = "trunk"
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject
