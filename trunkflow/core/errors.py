"""Error codes for CLI exit status.

Every command maps its outcome onto one of these codes. They are the only
place where a failure becomes observable to the calling shell or CI step.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing/invalid argument, wrong or unrecognized branch)
    - 2: Environment error (git unavailable, not a repository)
    - 5: I/O error (release.json cannot be written or read)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
