"""Git repository abstraction.

This module is the version-control collaborator of the tool. It answers
three questions about the working tree at the invocation root and performs
one write:

- which branch is checked out
- whether the working tree has uncommitted modifications
- stage a set of paths and commit them with a subject and body

All operations shell out to ``git`` and return Result types.

Usage:
    repo = Repository(Path.cwd())

    match repo.current_branch():
        case Ok(branch):
            print(f"Branch: {branch}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from trunkflow.core.result import Err, Ok, Result
from trunkflow.platform.process import ProcessError
from trunkflow.platform.process import run as run_process

__all__ = [
    "GitError",
    "Repository",
    "StatusEntry",
    "VersionControl",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "rev-parse")
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single line of ``git status --porcelain``.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str


class VersionControl(Protocol):
    """What the release and branch commands need from version control."""

    def current_branch(self) -> Result[str, GitError]: ...

    def is_dirty(self) -> Result[bool, GitError]: ...

    def commit_paths(
        self, paths: Sequence[str], *, subject: str, body: str
    ) -> Result[None, GitError]: ...


class Repository:
    """Git working tree rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def current_branch(self) -> Result[str, GitError]:
        """Get the checked-out branch name, trimmed.

        A detached HEAD is reported as the literal ``HEAD``.
        """
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Err(e):
                return Err(_git_error("rev-parse", e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def status_entries(self) -> Result[tuple[StatusEntry, ...], GitError]:
        """Get uncommitted changes (staged, unstaged and untracked)."""
        result = self._run(["status", "--porcelain"])
        match result:
            case Err(e):
                return Err(_git_error("status", e))
            case Ok(stdout):
                entries = (_parse_entry(ln) for ln in stdout.splitlines())
                return Ok(tuple(e for e in entries if e is not None))

    def is_dirty(self) -> Result[bool, GitError]:
        """True if the working tree has uncommitted modifications."""
        return self.status_entries().map(lambda entries: len(entries) > 0)

    def commit_paths(
        self, paths: Sequence[str], *, subject: str, body: str
    ) -> Result[None, GitError]:
        """Stage ``paths`` and commit them.

        The body becomes a second ``-m`` paragraph. Staging and committing
        are one logical step: the first failure is returned.
        """
        added = self._run(["add", "--", *paths])
        if isinstance(added, Err):
            return Err(_git_error("add", added.error))

        message_args = ["-m", subject]
        if body:
            message_args += ["-m", body]
        committed = self._run(["commit", *message_args])
        if isinstance(committed, Err):
            return Err(_git_error("commit", committed.error))

        return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)


def _git_error(command: str, error: ProcessError) -> GitError:
    return GitError(command=command, message=error.detail, returncode=error.returncode)


def _parse_entry(line: str) -> StatusEntry | None:
    """Parse one porcelain line: ``XY path``."""
    if len(line) < 4:
        return None
    return StatusEntry(xy=line[:2], path=line[3:])
