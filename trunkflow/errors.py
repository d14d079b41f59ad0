"""Failure types reported by the commands.

Each failure is a frozen dataclass exposing ``message`` and ``hint``.
Exit-code mapping and rendering live in ``trunkflow.output.errors``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CommandError",
    "DescriptorReadFailed",
    "DescriptorWriteFailed",
    "InvalidVersionFormat",
    "MissingArgument",
    "PrepareError",
    "UnrecognizedBranch",
    "VersionControlCommitFailed",
    "VersionControlQueryFailed",
    "WrongBranchClass",
]


@dataclass(frozen=True, slots=True)
class MissingArgument:
    name: str
    usage: str
    example: str

    @property
    def message(self) -> str:
        return f"missing required argument: {self.name}\nUsage: {self.usage}"

    @property
    def hint(self) -> str:
        return f"Example: {self.example}"


@dataclass(frozen=True, slots=True)
class InvalidVersionFormat:
    value: str

    @property
    def message(self) -> str:
        return f"Invalid version format: {self.value!r}. Must be X.Y.Z (e.g., 2.1.0)"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class WrongBranchClass:
    """Release preparation attempted outside a release branch."""

    branch: str
    create_command: str

    @property
    def message(self) -> str:
        return f"This command must be run from a release branch (current branch: {self.branch})"

    @property
    def hint(self) -> str:
        return f"To create a release branch: {self.create_command}"


@dataclass(frozen=True, slots=True)
class UnrecognizedBranch:
    branch: str

    @property
    def message(self) -> str:
        return f"Invalid branch name: {self.branch}"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class VersionControlQueryFailed:
    detail: str

    @property
    def message(self) -> str:
        return f"Failed to get current branch: {self.detail}"

    @property
    def hint(self) -> str:
        return "Run this command from inside a git working tree"


@dataclass(frozen=True, slots=True)
class VersionControlCommitFailed:
    """Best-effort commit did not go through. Never fatal."""

    detail: str

    @property
    def message(self) -> str:
        return f"Failed to commit (may already be committed): {self.detail}"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class DescriptorWriteFailed:
    path: Path
    detail: str

    @property
    def message(self) -> str:
        return f"Failed to create {self.path.name}: {self.detail}"

    @property
    def hint(self) -> str:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class DescriptorReadFailed:
    path: Path
    detail: str

    @property
    def message(self) -> str:
        return f"Failed to read {self.path.name}: {self.detail}"

    @property
    def hint(self) -> str:
        return "Run prepare-release on a release branch first"


PrepareError = InvalidVersionFormat | WrongBranchClass | DescriptorWriteFailed

CommandError = (
    MissingArgument
    | InvalidVersionFormat
    | WrongBranchClass
    | UnrecognizedBranch
    | VersionControlQueryFailed
    | DescriptorWriteFailed
    | DescriptorReadFailed
)
