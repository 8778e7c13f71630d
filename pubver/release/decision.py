"""Decide which version a CI run should publish.

If the registry's latest version encodes at or above the local one, the
local version would collide with (or fall behind) what is already
published, so a new patch is synthesized from the *published* version.
The local major/minor are not carried into the bump: local "1.10.0"
against published "1.2.0" bumps to "1.2.1" because "1.10.0" encodes lower.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pubver.core.result import Err, Ok, Result
from pubver.release.version import (
    SemanticVersion,
    VersionParseError,
    VersionSide,
    encode_version,
    parse_version,
)

__all__ = [
    "PublishAsLocal",
    "PublishBumped",
    "ReconciliationOutcome",
    "decide",
    "local_ahead_of_bump",
]


@dataclass(frozen=True, slots=True)
class PublishAsLocal:
    """The local version is ahead of the registry; publish it unchanged."""

    version: str


@dataclass(frozen=True, slots=True)
class PublishBumped:
    """Publish `version`, the published version with its patch incremented."""

    version: str
    published: str


ReconciliationOutcome = PublishAsLocal | PublishBumped


def _parse(version: str, side: VersionSide) -> Result[SemanticVersion, VersionParseError]:
    return parse_version(version).map_err(lambda e: replace(e, side=side))


def _encode(version: str, side: VersionSide) -> Result[int, VersionParseError]:
    return encode_version(version).map_err(lambda e: replace(e, side=side))


def decide(
    local_version: str, published_version: str
) -> Result[ReconciliationOutcome, VersionParseError]:
    """Compare the local and published versions and pick what to publish.

    Args:
        local_version: Version declared in the local manifest
        published_version: Registry's dist-tags.latest

    Returns:
        Ok(PublishAsLocal) when the local version encodes strictly higher,
        Ok(PublishBumped) otherwise, or Err(VersionParseError) naming the
        side that is not MAJOR.MINOR.PATCH.
    """
    local = _encode(local_version, "local")
    if isinstance(local, Err):
        return local
    published = _encode(published_version, "published")
    if isinstance(published, Err):
        return published

    if published.value < local.value:
        return Ok(PublishAsLocal(version=local_version))

    parsed = _parse(published_version, "published")
    if isinstance(parsed, Err):
        return parsed
    return Ok(PublishBumped(version=str(parsed.value.bump_patch()), published=published_version))


def local_ahead_of_bump(local_version: str, outcome: ReconciliationOutcome) -> bool:
    """True when a bump lands numerically below the local version.

    This happens when component widths differ (local "1.10.0" vs published
    "1.2.0"); callers surface it as a warning since the bump still stands.
    """
    if not isinstance(outcome, PublishBumped):
        return False
    local = parse_version(local_version)
    bumped = parse_version(outcome.version)
    if isinstance(local, Err) or isinstance(bumped, Err):
        return False
    return bumped.value.as_tuple() < local.value.as_tuple()
