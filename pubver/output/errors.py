"""Error presentation utilities.

Centralized error formatting and exit code mapping for the reconcile run.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pubver.core.errors import ErrorCode
from pubver.output.console import Style
from pubver.release.errors import DataError, FetchError, ManifestError, ReconcileError
from pubver.release.version import VersionParseError

if TYPE_CHECKING:
    from pubver.output.console import ConsoleProtocol

__all__ = ["print_reconcile_error", "reconcile_error_exit_code"]


def print_reconcile_error(error: ReconcileError, console: ConsoleProtocol) -> None:
    """Print which stage failed, with its details dimmed underneath."""
    match error:
        case ManifestError(path=path, reason=reason):
            console.error(f"Could not read package.json file from {path}")
            console.print(reason, Style.DIM)
        case FetchError(http=http, registry_error=registry_error):
            console.error("Could not fetch current package information")
            if http is not None:
                console.print(str(http), Style.DIM)
            if registry_error is not None:
                console.print(f"registry error: {registry_error}", Style.DIM)
        case DataError(reason=reason, payload=payload):
            console.error("Failed to parse published package information")
            console.print(reason, Style.DIM)
            if payload is not None:
                console.print(_preview(payload), Style.DIM)
        case VersionParseError():
            console.error(str(error))


def reconcile_error_exit_code(error: ReconcileError) -> int:
    """Every reconcile error aborts the release with the same exit code."""
    return int(ErrorCode.FAILURE)


def _preview(payload: dict[str, object], limit: int = 500) -> str:
    text = json.dumps(payload, default=str)
    if len(text) > limit:
        return text[:limit] + "..."
    return text
