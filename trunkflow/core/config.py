"""Ambient invocation context.

The tool has no configuration file. The only outside state it consults is
a handful of environment variables describing who runs it and, under CI,
which build it belongs to. They are read once into ``ReleaseContext`` so
the release logic never touches ``os.environ`` itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .structured import get_str

__all__ = [
    "ReleaseContext",
    "UNKNOWN",
    "LOCAL",
]

UNKNOWN = "unknown"
LOCAL = "local"


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Provenance of one invocation.

    Attributes:
        prepared_by: Invoking user (unauthenticated, from USER/USERNAME)
        build_number: CI build number (BUILD_NUMBER), "local" outside CI
        commit_sha: CI commit (COMMIT_SHA)
        ci_branch: Branch reported by CI (BRANCH_NAME), "local" outside CI
    """

    prepared_by: str = UNKNOWN
    build_number: str = LOCAL
    commit_sha: str = UNKNOWN
    ci_branch: str = LOCAL

    @classmethod
    def from_env(cls, environ: Mapping[str, object]) -> ReleaseContext:
        """Build a context from an environment mapping.

        Blank values are treated as unset.
        """
        return cls(
            prepared_by=get_str(environ, "USER") or get_str(environ, "USERNAME") or UNKNOWN,
            build_number=get_str(environ, "BUILD_NUMBER") or LOCAL,
            commit_sha=get_str(environ, "COMMIT_SHA") or UNKNOWN,
            ci_branch=get_str(environ, "BRANCH_NAME") or LOCAL,
        )
