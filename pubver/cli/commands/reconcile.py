"""Reconcile command - pick the version this CI run should publish."""

from __future__ import annotations

from pathlib import Path

import typer

from pubver.cli.context import build_context
from pubver.core.result import Err, Ok
from pubver.output.errors import print_reconcile_error, reconcile_error_exit_code
from pubver.release.registry import RegistryClient
from pubver.release.service import ReconcileService


def reconcile(
    token: str | None = typer.Option(
        None,
        "--token",
        help="Registry bearer token (NPM_TOKEN takes precedence)",
        show_default=False,
    ),
    registry: str | None = typer.Option(
        None,
        "--registry",
        help="Registry URL (default: NPM_REGISTRY, then .npmrc, then npmjs.org)",
        show_default=False,
    ),
    project_dir: Path | None = typer.Option(
        None,
        "--project-dir",
        help="Directory holding package.json (default: current directory)",
        show_default=False,
    ),
) -> None:
    """Compare package.json with the registry and print the version to publish."""
    ctx = build_context(project_dir=project_dir, token=token, registry=registry)

    service = ReconcileService(
        registry=RegistryClient(config=ctx.config, http=ctx.http),
        console=ctx.console,
    )
    match service.run(ctx.project_dir):
        case Ok(outcome):
            typer.echo(outcome.version)
        case Err(error):
            print_reconcile_error(error, ctx.console)
            raise typer.Exit(code=reconcile_error_exit_code(error))
