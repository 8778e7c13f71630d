"""Version reconciliation: encode, compare, and pick the version to publish."""

from .decision import PublishAsLocal, PublishBumped, ReconciliationOutcome, decide
from .version import SemanticVersion, VersionParseError, encode_version, parse_version

__all__ = [
    "PublishAsLocal",
    "PublishBumped",
    "ReconciliationOutcome",
    "SemanticVersion",
    "VersionParseError",
    "decide",
    "encode_version",
    "parse_version",
]
