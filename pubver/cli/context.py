from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from pubver.core.config import RegistryConfig, resolve_registry_config
from pubver.core.errors import ErrorCode
from pubver.output.console import ConsoleProtocol, RichConsole
from pubver.registry.http import HttpClient, RealHttpClient


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_dir: Path
    config: RegistryConfig
    http: HttpClient
    console: ConsoleProtocol


def build_context(
    *,
    project_dir: Path | None,
    token: str | None,
    registry: str | None,
    environ: Mapping[str, str] | None = None,
) -> CLIContext:
    """Resolve everything read from the outside world, once, at startup.

    Progress goes to stderr; stdout is reserved for the decided version.
    """
    try:
        root = (project_dir or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --project-dir: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    config = resolve_registry_config(
        environ=os.environ if environ is None else environ,
        project_dir=root,
        token=token,
        registry=registry,
    )
    return CLIContext(
        project_dir=root,
        config=config,
        http=RealHttpClient(),
        console=RichConsole(stderr=True),
    )
