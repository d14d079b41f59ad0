"""validate-branch command - check the current branch name."""

from __future__ import annotations

from trunkflow.branches.policy import describe_policy, merge_policy
from trunkflow.branches.taxonomy import classify
from trunkflow.cli.commands._helpers import current_branch_or_exit, fail
from trunkflow.cli.context import build_context
from trunkflow.core.result import Err, Ok
from trunkflow.errors import UnrecognizedBranch
from trunkflow.output.console import Style


def validate_branch() -> None:
    """Check the current branch name and show its merge rules."""
    ctx = build_context()
    console = ctx.console
    branch = current_branch_or_exit(ctx)

    console.header(f"Validating branch: {branch}")

    branch_class = classify(branch)
    if not branch_class.is_recognized:
        fail(UnrecognizedBranch(branch=branch), ctx)

    console.success(f"Valid {branch_class} branch: {branch}")
    console.header("Merge rules for this branch type:")
    for line in describe_policy(merge_policy(branch_class)):
        console.bullet(line)

    # Informational only: never changes the exit code.
    match ctx.vcs.is_dirty():
        case Ok(True):
            console.newline()
            console.warning("You have uncommitted changes")
            console.print('Run "git status" to see details', Style.DIM)
        case Ok(False):
            pass
        case Err(e):
            console.newline()
            console.print(f"Could not check for uncommitted changes: {e.message}", Style.DIM)
