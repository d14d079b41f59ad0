"""Git operations module.

Usage:
    from trunkflow.git import Repository

    repo = Repository(Path.cwd())
    branch = repo.current_branch()
"""

from trunkflow.git.repository import (
    GitError,
    Repository,
    StatusEntry,
    VersionControl,
)

__all__ = [
    "GitError",
    "Repository",
    "StatusEntry",
    "VersionControl",
]
