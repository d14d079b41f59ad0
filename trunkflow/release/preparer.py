"""Release preparation.

Preparing a release writes ``release.json`` at the invocation root and
commits it. The steps run in a fixed order and the first two gate the
rest, so nothing is written unless both pass:

1. the version is exactly ``X.Y.Z``
2. the current branch classifies as a release branch
3. the descriptor is derived from the inputs, the context and the clock
4. the descriptor is written (always overwriting)
5. the file is staged and committed; failure here is only a warning

Any RC counter already recorded in an existing release.json is reset.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from pathlib import Path

from trunkflow.branches.taxonomy import is_release_branch
from trunkflow.core.config import ReleaseContext
from trunkflow.core.result import Err, Ok, Result
from trunkflow.errors import PrepareError, VersionControlCommitFailed, WrongBranchClass
from trunkflow.git.repository import VersionControl
from trunkflow.release.descriptor_file import write_descriptor
from trunkflow.release.model import (
    DEFAULT_DESCRIPTION,
    DESCRIPTOR_FILENAME,
    ReleaseDescriptor,
    parse_version,
)

__all__ = [
    "Clock",
    "PreparedRelease",
    "ReleasePreparer",
    "release_branch_hint",
    "slugify",
    "utc_now",
]

Clock = Callable[[], datetime]

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def utc_now() -> datetime:
    return datetime.now(UTC)


def slugify(text: str) -> str:
    """Lower-case ``text`` and collapse anything outside [a-z0-9] to ``-``."""
    slug = _NON_SLUG_RE.sub("-", text.lower()).strip("-")
    return slug or "release"


def release_branch_hint(description: str, today: date) -> str:
    """Command that creates a correctly named release branch for today."""
    return f"git checkout -b release/{today:%d%m%y}-{slugify(description)}"


def commit_subject(descriptor: ReleaseDescriptor) -> str:
    return f"chore: prepare release {descriptor.version}"


@dataclass(frozen=True, slots=True)
class PreparedRelease:
    """Outcome of a successful preparation.

    ``commit_error`` is set when the descriptor was written but could not
    be committed.
    """

    descriptor: ReleaseDescriptor
    path: Path
    commit_error: VersionControlCommitFailed | None = None


class ReleasePreparer:
    """Creates and commits the release descriptor for one invocation."""

    def __init__(
        self,
        *,
        root: Path,
        context: ReleaseContext,
        vcs: VersionControl,
        clock: Clock = utc_now,
    ) -> None:
        self._root = root
        self._context = context
        self._vcs = vcs
        self._clock = clock

    @property
    def descriptor_path(self) -> Path:
        return self._root / DESCRIPTOR_FILENAME

    def prepare(
        self,
        version: str,
        description: str | None,
        current_branch: str,
    ) -> Result[PreparedRelease, PrepareError]:
        description = description or DEFAULT_DESCRIPTION
        now = self._clock()

        parsed = parse_version(version)
        if isinstance(parsed, Err):
            return parsed

        if not is_release_branch(current_branch):
            return Err(
                WrongBranchClass(
                    branch=current_branch,
                    create_command=release_branch_hint(description, now.astimezone(UTC).date()),
                )
            )

        descriptor = ReleaseDescriptor(
            version=parsed.value,
            release_date=now.astimezone(UTC).date(),
            description=description,
            branch=current_branch,
            prepared_by=self._context.prepared_by,
            prepared_at=now,
        )

        path = self.descriptor_path
        written = write_descriptor(path=path, descriptor=descriptor)
        if isinstance(written, Err):
            return written

        committed = self._vcs.commit_paths(
            [DESCRIPTOR_FILENAME],
            subject=commit_subject(descriptor),
            body=descriptor.description,
        )
        if isinstance(committed, Err):
            return Ok(
                PreparedRelease(
                    descriptor=descriptor,
                    path=path,
                    commit_error=VersionControlCommitFailed(detail=committed.error.message),
                )
            )

        return Ok(PreparedRelease(descriptor=descriptor, path=path))
