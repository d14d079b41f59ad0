"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from trunkflow.branches.taxonomy import BRANCH_RULES
from trunkflow.core.errors import ErrorCode
from trunkflow.errors import (
    CommandError,
    DescriptorReadFailed,
    DescriptorWriteFailed,
    InvalidVersionFormat,
    MissingArgument,
    UnrecognizedBranch,
    VersionControlQueryFailed,
    WrongBranchClass,
)
from trunkflow.output.console import Style

if TYPE_CHECKING:
    from trunkflow.output.console import ConsoleProtocol

__all__ = ["error_exit_code", "print_error", "print_valid_patterns"]


def print_valid_patterns(console: ConsoleProtocol) -> None:
    console.header("Valid branch patterns:")
    for rule in BRANCH_RULES:
        console.bullet(rule.usage)
    console.header("Examples:")
    for rule in BRANCH_RULES:
        if rule.example:
            console.bullet(rule.example)


def print_error(error: CommandError, console: ConsoleProtocol) -> None:
    """Print a fatal error with its remediation text."""
    console.error(error.message)
    match error:
        case UnrecognizedBranch():
            print_valid_patterns(console)
        case WrongBranchClass(create_command=command):
            console.print("To create a release branch:", Style.DIM)
            console.print(command)
        case _:
            if error.hint:
                console.print(f"hint: {error.hint}", Style.DIM)


def error_exit_code(error: CommandError) -> int:
    """Get the process exit code for a fatal error."""
    match error:
        case MissingArgument() | InvalidVersionFormat() | WrongBranchClass():
            return int(ErrorCode.USER_ERROR)
        case UnrecognizedBranch():
            return int(ErrorCode.USER_ERROR)
        case VersionControlQueryFailed():
            return int(ErrorCode.ENV_ERROR)
        case DescriptorWriteFailed() | DescriptorReadFailed():
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.USER_ERROR)
