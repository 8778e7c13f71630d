"""Single-shot reconcile flow: manifest -> registry -> decision.

Each step either produces its value or stops the run with its error; no
step is retried and nothing is written to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pubver.core.result import Err, Ok, Result
from pubver.output.console import ConsoleProtocol
from pubver.release.decision import (
    PublishAsLocal,
    PublishBumped,
    ReconciliationOutcome,
    decide,
    local_ahead_of_bump,
)
from pubver.release.errors import ReconcileError
from pubver.release.manifest import read_manifest
from pubver.release.registry import RegistryClient


@dataclass(frozen=True, slots=True)
class ReconcileService:
    registry: RegistryClient
    console: ConsoleProtocol

    def run(self, project_dir: Path) -> Result[ReconciliationOutcome, ReconcileError]:
        manifest = read_manifest(project_dir)
        if isinstance(manifest, Err):
            return manifest
        name = manifest.value.name
        local_version = manifest.value.version

        self.console.info(f"Fetching current package information for [{name}]")
        latest = self.registry.fetch_latest(name)
        if isinstance(latest, Err):
            return latest
        self.console.info(f"Published package version for [{name}] is [{latest.value}]")

        outcome = decide(local_version, latest.value)
        if isinstance(outcome, Err):
            return outcome

        match outcome.value:
            case PublishAsLocal(version=version):
                self.console.success(f"Using local version [{version}]")
            case PublishBumped(version=version):
                self.console.success(f"Bumping version to [{version}]")
                if local_ahead_of_bump(local_version, outcome.value):
                    self.console.warning(
                        f"local version [{local_version}] is numerically ahead of "
                        f"[{version}] but does not encode higher than [{latest.value}]"
                    )
        return Ok(outcome.value)
