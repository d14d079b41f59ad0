"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from trunkflow.core.result import Err
from trunkflow.errors import CommandError, VersionControlQueryFailed
from trunkflow.output.errors import error_exit_code, print_error

if TYPE_CHECKING:
    from trunkflow.cli.context import CLIContext


def fail(error: CommandError, ctx: CLIContext) -> NoReturn:
    """Report a fatal error and exit with its code."""
    print_error(error, ctx.console)
    raise typer.Exit(code=error_exit_code(error))


def current_branch_or_exit(ctx: CLIContext) -> str:
    """Read the checked-out branch once; without it nothing can proceed."""
    result = ctx.vcs.current_branch()
    if isinstance(result, Err):
        fail(VersionControlQueryFailed(detail=result.error.message), ctx)
    return result.value
