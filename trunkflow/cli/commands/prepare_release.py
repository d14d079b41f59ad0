"""prepare-release command - write and commit release.json."""

from __future__ import annotations

import typer

from trunkflow.cli.commands._helpers import current_branch_or_exit, fail
from trunkflow.cli.context import CLIContext, build_context
from trunkflow.core.result import Err
from trunkflow.errors import MissingArgument
from trunkflow.release.descriptor_file import render_descriptor
from trunkflow.release.model import DESCRIPTOR_FILENAME, parse_version
from trunkflow.release.preparer import PreparedRelease, ReleasePreparer

USAGE = "trunkflow prepare-release <version> [description]"
EXAMPLE = 'trunkflow prepare-release 2.1.0 "New payment features"'


def _print_next_steps(ctx: CLIContext, prepared: PreparedRelease) -> None:
    console = ctx.console
    descriptor = prepared.descriptor
    console.header("Next steps:")
    console.print("1. Review and test your changes")
    console.print(f"2. Push the branch: git push -u origin {descriptor.branch}")
    console.print("3. Create a Pull Request to main branch")
    console.print(f"4. After PR approval and merge, version {descriptor.version} will be released")
    console.newline()
    console.info("RC builds will be automatically created when you push to this branch")


def prepare_release(
    version: str | None = typer.Argument(None, help="Release version (X.Y.Z)"),
    description: str | None = typer.Argument(None, help="Short description of the release"),
) -> None:
    """Create release.json on a release branch and commit it."""
    ctx = build_context()
    console = ctx.console

    if version is None:
        fail(MissingArgument(name="version", usage=USAGE, example=EXAMPLE), ctx)

    parsed = parse_version(version)
    if isinstance(parsed, Err):
        fail(parsed.error, ctx)

    branch = current_branch_or_exit(ctx)

    preparer = ReleasePreparer(root=ctx.root, context=ctx.release, vcs=ctx.vcs, clock=ctx.clock)
    result = preparer.prepare(version, description, branch)
    if isinstance(result, Err):
        fail(result.error, ctx)

    prepared = result.value
    console.success(f"Created {DESCRIPTOR_FILENAME}:")
    console.print_json(render_descriptor(prepared.descriptor))

    if prepared.commit_error is not None:
        console.warning(prepared.commit_error.message)
    else:
        console.success(
            f"Committed {DESCRIPTOR_FILENAME} for version {prepared.descriptor.version}"
        )

    _print_next_steps(ctx, prepared)
