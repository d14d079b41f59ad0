from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from trunkflow.core.result import Err, Ok, Result
from trunkflow.git.repository import GitError


@dataclass
class FakeVcs:
    branch: str = "release/091025-payments"
    dirty: bool = False
    branch_error: GitError | None = None
    status_error: GitError | None = None
    commit_error: GitError | None = None
    commits: list[tuple[tuple[str, ...], str, str]] = field(default_factory=list)

    def current_branch(self) -> Result[str, GitError]:
        if self.branch_error is not None:
            return Err(self.branch_error)
        return Ok(self.branch)

    def is_dirty(self) -> Result[bool, GitError]:
        if self.status_error is not None:
            return Err(self.status_error)
        return Ok(self.dirty)

    def commit_paths(
        self, paths: Sequence[str], *, subject: str, body: str
    ) -> Result[None, GitError]:
        self.commits.append((tuple(paths), subject, body))
        if self.commit_error is not None:
            return Err(self.commit_error)
        return Ok(None)


class TickingClock:
    """Returns a fixed instant, advanced by one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 10, 9, 8, 30, 0, 123000, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self._now
        self._now = current + timedelta(seconds=1)
        return current
