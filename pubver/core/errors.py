"""Exit codes for the pubver CLI.

CI pipelines branch on these values, so they must remain stable:
- 0: a decision was made (publish the local version, or publish a bump)
- 1: the run was aborted (manifest, registry, or version error)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    FAILURE = 1
