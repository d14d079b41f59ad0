"""release-info command - show the prepared release and build metadata."""

from __future__ import annotations

from trunkflow.cli.commands._helpers import fail
from trunkflow.cli.context import build_context
from trunkflow.core.result import Err
from trunkflow.release.descriptor_file import read_descriptor
from trunkflow.release.model import DESCRIPTOR_FILENAME


def release_info() -> None:
    """Show the release described by release.json."""
    ctx = build_context()
    console = ctx.console

    result = read_descriptor(path=ctx.root / DESCRIPTOR_FILENAME)
    if isinstance(result, Err):
        fail(result.error, ctx)

    d = result.value
    v = d.version
    console.header(f"Release {v}")
    console.bullet(f"major: {v.major}, minor: {v.minor}, patch: {v.patch}")
    console.bullet(f"release date: {d.release_date.isoformat()}")
    console.bullet(f"description: {d.description}")
    console.bullet(f"branch: {d.branch}")
    console.bullet(f"rc builds: {d.rc_build_counter}")
    console.bullet(f"last rc tag: {d.last_rc_tag or '-'}")
    console.bullet(f"prepared by: {d.prepared_by}")

    console.header("Build")
    console.bullet(f"build: {ctx.release.build_number}")
    console.bullet(f"commit: {ctx.release.commit_sha}")
    console.bullet(f"branch: {ctx.release.ci_branch}")
