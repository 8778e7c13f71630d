from __future__ import annotations

import typer

from pubver.core.errors import ErrorCode
from pubver.core.result import Err, Ok
from pubver.output.console import RichConsole
from pubver.release.version import encode_version


def encode(
    version: str = typer.Argument(..., help="Version in MAJOR.MINOR.PATCH form"),
) -> None:
    """Print the integer a version is compared by."""
    match encode_version(version):
        case Ok(value):
            typer.echo(str(value))
        case Err(error):
            RichConsole(stderr=True).error(str(error))
            raise typer.Exit(code=int(ErrorCode.FAILURE))
