"""Three-component versions and their integer encoding.

The encoding turns "MAJOR.MINOR.PATCH" into one integer so two versions can
be compared with a single `>=`. It must stay bit-for-bit compatible with the
ordering already used for published releases:

- major gets a leading marker digit "1"
- minor and patch are right-padded with "0" up to three characters
- the three strings are concatenated and read as a base-10 integer

Right-padding means the ordering is only numeric when corresponding
components have the same digit width: "1.10.0" and "1.1.0" both encode to
11100000, and "1.2.0" (11200000) sorts above them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from pubver.core.result import Err, Ok, Result

__all__ = [
    "SemanticVersion",
    "VersionParseError",
    "encode_version",
    "parse_version",
]


_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

VersionSide = Literal["local", "published"]


@dataclass(frozen=True, slots=True)
class VersionParseError:
    """A version string that is not MAJOR.MINOR.PATCH."""

    version: str
    side: VersionSide | None = None

    def __str__(self) -> str:
        where = f"{self.side} " if self.side else ""
        return f"invalid {where}version {self.version!r} (expected MAJOR.MINOR.PATCH)"


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """Parsed version.

    The raw component strings are kept next to the integers: the encoding
    depends on digit width, and a bump must reproduce major/minor exactly as
    the registry reported them.
    """

    major: int
    minor: int
    patch: int
    raw: tuple[str, str, str]

    def __str__(self) -> str:
        return ".".join(self.raw)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def bump_patch(self) -> SemanticVersion:
        major, minor, _ = self.raw
        patch = self.patch + 1
        return SemanticVersion(self.major, self.minor, patch, (major, minor, str(patch)))


def parse_version(version: str) -> Result[SemanticVersion, VersionParseError]:
    m = _VERSION_RE.fullmatch(version)
    if m is None:
        return Err(VersionParseError(version=version))
    major, minor, patch = m.group(1), m.group(2), m.group(3)
    return Ok(SemanticVersion(int(major), int(minor), int(patch), (major, minor, patch)))


def _encode(parsed: SemanticVersion) -> int:
    major, minor, patch = parsed.raw
    major = "1" + major
    for i in range(3):
        if len(major) < i:
            major += "0"
        if len(minor) <= i:
            minor += "0"
        if len(patch) <= i:
            patch += "0"
    return int(f"{major}{minor}{patch}", 10)


def encode_version(version: str) -> Result[int, VersionParseError]:
    """Encode a version string into its ordering integer.

    Args:
        version: "MAJOR.MINOR.PATCH", digits only

    Returns:
        Ok(int) on success, Err(VersionParseError) for anything else
        (two components, empty parts, pre-release suffixes, signs).
    """
    return parse_version(version).map(_encode)
