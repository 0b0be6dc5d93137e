"""Read-only access to the git history the decision engine needs.

The engine only talks to the ``Repository`` protocol, so tests can hand it
an in-memory fake. ``GitRepository`` is the real implementation.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from .errors import RepositoryAccessFailure
from .shell import git


class Repository(Protocol):
    def list_tags(self) -> set[str]: ...

    def list_commit_messages(self, since_tag: str | None) -> list[str]: ...

    def current_branch_name(self) -> str | None: ...

    def default_branch_name(self) -> str | None: ...


class GitRepository:
    """A git working copy at ``path``.

    Every command runs with ``git -C path`` so several repositories can be
    inspected from one process without touching the working directory.
    """

    def __init__(self, path: Path | str = ".") -> None:
        self.path = Path(path)

    def _git(self, *args: str) -> str:
        try:
            return git(*args, cwd=self.path)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise RepositoryAccessFailure(f"git {' '.join(args)} failed: {detail}") from exc
        except OSError as exc:
            raise RepositoryAccessFailure(f"Could not run git in {self.path}: {exc}") from exc
        except ValueError as exc:
            raise RepositoryAccessFailure(
                f"Could not read output of git {' '.join(args)}: {exc}"
            ) from exc

    def _git_best_effort(self, *args: str) -> str:
        # Branch discovery is optional; callers fall back to configured defaults.
        try:
            return git(*args, cwd=self.path, check=False)
        except (OSError, ValueError):
            return ""

    def list_tags(self) -> set[str]:
        """All tag names in the repository, unfiltered."""
        return set(self._git("tag", "--list").splitlines())

    def list_commit_messages(self, since_tag: str | None) -> list[str]:
        """Subject lines of commits after ``since_tag`` (all commits if None).

        Newest commit first, which is git log's default order.
        """
        rev_range = f"{since_tag}..HEAD" if since_tag else "HEAD"
        output = self._git("log", "--format=%s", rev_range)
        return [line for line in output.splitlines() if line.strip()]

    def current_branch_name(self) -> str | None:
        """Checked-out branch, or None when HEAD is detached or unreadable."""
        name = self._git_best_effort("rev-parse", "--abbrev-ref", "HEAD")
        if not name or name == "HEAD":
            return None
        return name

    def default_branch_name(self) -> str | None:
        """The remote's default branch (from origin/HEAD), if known locally."""
        ref = self._git_best_effort("symbolic-ref", "--short", "refs/remotes/origin/HEAD")
        if not ref:
            return None
        return ref.removeprefix("origin/")
