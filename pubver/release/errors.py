from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pubver.registry.http import HttpError
from pubver.release.version import VersionParseError


@dataclass(frozen=True, slots=True)
class ManifestError:
    """package.json is missing or does not declare a name and version."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class FetchError:
    """The registry could not be reached, or answered with an error."""

    package: str
    http: HttpError | None = None
    registry_error: str | None = None


@dataclass(frozen=True, slots=True)
class DataError:
    """The registry document has no usable dist-tags.latest."""

    package: str
    reason: str
    payload: dict[str, object] | None = None


ReconcileError = ManifestError | FetchError | DataError | VersionParseError
