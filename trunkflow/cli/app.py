from __future__ import annotations

import typer

from trunkflow import __version__
from trunkflow.cli.commands.prepare_release import prepare_release
from trunkflow.cli.commands.release_info import release_info
from trunkflow.cli.commands.validate_branch import validate_branch


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command("validate-branch")(validate_branch)
app.command("prepare-release")(prepare_release)
app.command("release-info")(release_info)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()
