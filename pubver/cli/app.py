from __future__ import annotations

import typer

from pubver import __version__
from pubver.cli.commands.encode import encode
from pubver.cli.commands.reconcile import reconcile


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Decide whether CI should publish the local version or a patch bump.",
)


app.command()(reconcile)
app.command()(encode)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    pass


def main() -> None:
    app()
