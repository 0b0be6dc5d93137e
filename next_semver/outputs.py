"""Helpers for publishing a decision as GitHub Actions step outputs."""

from __future__ import annotations

from pathlib import Path
from uuid import uuid4

from .models import VersionDecision


def decision_outputs(decision: VersionDecision) -> dict[str, str]:
    """Flatten a decision to ``name → value`` strings with camelCase names.

    Booleans are rendered as ``true``/``false`` so workflow expressions
    like ``steps.version.outputs.actionRequired == 'true'`` work.
    """
    outputs: dict[str, str] = {}
    for name, value in decision.model_dump(mode="json", by_alias=True).items():
        if isinstance(value, bool):
            outputs[name] = "true" if value else "false"
        else:
            outputs[name] = str(value)
    return outputs


def _write_output(output_path: Path | str, name: str, value: str) -> None:
    with open(output_path, "a") as fh:
        if "\n" in value:
            # Multiline values need the heredoc form; the delimiter must not
            # appear as a line of the value.
            delimiter = f"ghadelim_{uuid4().hex}"
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            fh.write(f"{name}={value}\n")


def write_github_output(output_path: Path | str, decision: VersionDecision) -> None:
    """Append every decision field to a $GITHUB_OUTPUT file."""
    for name, value in decision_outputs(decision).items():
        _write_output(output_path, name, value)
