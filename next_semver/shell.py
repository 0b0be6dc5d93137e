"""Shell and git utilities.

Provides a thin wrapper around subprocess for git, plus an output
formatting helper for the CLI.
"""

from __future__ import annotations

import subprocess
from pathlib import Path


def git(*args: str, cwd: Path | str = ".", check: bool = True) -> str:
    """Run a git command against a repository and return stdout.

    The repository is passed with ``git -C`` rather than by changing the
    process working directory.

    Args:
        *args: Arguments to pass to git (e.g., "tag", "--list").
        cwd: Path of the repository to run in.
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., branch lookup).

    Returns:
        Stripped stdout from the git command.
    """
    # Tag names and commit subjects are arbitrary bytes; undecodable ones
    # come back with U+FFFD and simply fail to parse as versions.
    result = subprocess.run(
        ["git", "-C", str(cwd), *args],
        capture_output=True,
        text=True,
        errors="replace",
        check=check,
    )
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")
