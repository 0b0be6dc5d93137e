"""Settings read from the analyzed repository's pyproject.toml.

Uses tomlkit, the same parser used to edit pyproject files, so the table
looks exactly like any other ``[tool.*]`` section:

    [tool.next-semver]
    default-branch = "trunk"
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict
from tomlkit.exceptions import ParseError

from .errors import ConfigError

DEFAULT_BRANCH = "main"


class Settings(BaseModel):
    """Per-repository configuration.

    Attributes:
        default_branch: Branch assumed to be the repository default when it
                        can't be discovered from the remote.
    """

    model_config = ConfigDict(frozen=True)

    default_branch: str = DEFAULT_BRANCH


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_tool_table(doc: tomlkit.TOMLDocument) -> dict:
    """Extract the [tool.next-semver] table, empty if absent."""
    return dict(doc.get("tool", {}).get("next-semver", {}))


def load_settings(repo_path: Path | str = ".") -> Settings:
    """Read settings for the repository at ``repo_path``.

    A missing pyproject.toml or [tool.next-semver] table gives defaults.

    Raises:
        ConfigError: If the file can't be parsed or a value has the wrong type.
    """
    pyproject = Path(repo_path) / "pyproject.toml"
    if not pyproject.exists():
        return Settings()

    try:
        table = get_tool_table(load_pyproject(pyproject))
    except ParseError as exc:
        raise ConfigError(f"Could not parse {pyproject}: {exc}") from exc

    default_branch = table.get("default-branch", DEFAULT_BRANCH)
    if not isinstance(default_branch, str) or not default_branch.strip():
        raise ConfigError(
            f"[tool.next-semver] default-branch must be a non-empty string in {pyproject}"
        )
    return Settings(default_branch=str(default_branch).strip())
