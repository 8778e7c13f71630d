from __future__ import annotations

import json
from pathlib import Path

from pubver.core.config import RegistryConfig
from pubver.core.result import Err, Ok
from pubver.output.console import MockConsole, Style
from pubver.registry.http import HttpError, MockHttpClient
from pubver.release.decision import PublishAsLocal, PublishBumped
from pubver.release.errors import DataError, FetchError, ManifestError
from pubver.release.registry import RegistryClient
from pubver.release.service import ReconcileService
from pubver.release.version import VersionParseError

REGISTRY = "https://npm.example.com"
PKG_URL = f"{REGISTRY}/core-ui"


def _project(tmp_path: Path, version: str, name: str = "core-ui") -> Path:
    (tmp_path / "package.json").write_text(
        json.dumps({"name": name, "version": version}), encoding="utf-8"
    )
    return tmp_path


def _service(http: MockHttpClient, console: MockConsole) -> ReconcileService:
    registry = RegistryClient(config=RegistryConfig(registry_url=REGISTRY), http=http)
    return ReconcileService(registry=registry, console=console)


def _published(http: MockHttpClient, latest: str) -> None:
    http.set_json(PKG_URL, {"name": "core-ui", "dist-tags": {"latest": latest}})


def test_local_ahead(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.0.2")

    result = _service(http, console).run(_project(tmp_path, "1.1.0"))

    assert result == Ok(PublishAsLocal("1.1.0"))
    assert console.messages == [
        "-> Fetching current package information for [core-ui]",
        "-> Published package version for [core-ui] is [1.0.2]",
        "-> Using local version [1.1.0]",
    ]


def test_equal_bumps(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.0.2")

    result = _service(http, console).run(_project(tmp_path, "1.0.2"))

    assert result == Ok(PublishBumped("1.0.3", published="1.0.2"))
    assert console.find("Bumping version to [1.0.3]")
    assert not console.has_warning()


def test_published_ahead_bumps(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.2.5")

    result = _service(http, console).run(_project(tmp_path, "1.0.0"))

    assert result == Ok(PublishBumped("1.2.6", published="1.2.5"))


def test_bump_below_local_warns(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.2.0")

    result = _service(http, console).run(_project(tmp_path, "1.10.0"))

    assert result == Ok(PublishBumped("1.2.1", published="1.2.0"))
    assert console.has_warning()


def test_manifest_does_not_change(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.0.2")
    project = _project(tmp_path, "1.0.2")
    before = (project / "package.json").read_text(encoding="utf-8")

    _service(http, console).run(project)

    assert (project / "package.json").read_text(encoding="utf-8") == before


def test_missing_manifest_skips_fetch(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()

    result = _service(http, console).run(tmp_path)

    assert isinstance(result, Err)
    assert isinstance(result.error, ManifestError)
    assert http.calls == []
    assert console.outputs == []


def test_missing_latest_is_data_error(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    http.set_json(PKG_URL, {"name": "core-ui", "dist-tags": {}})

    result = _service(http, console).run(_project(tmp_path, "1.0.0"))

    assert isinstance(result, Err)
    assert isinstance(result.error, DataError)
    assert not any(o.style == Style.SUCCESS for o in console.outputs)


def test_fetch_failure(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    http.set_json(PKG_URL, HttpError(url=PKG_URL, status=401, message="Unauthorized"))

    result = _service(http, console).run(_project(tmp_path, "1.0.0"))

    assert isinstance(result, Err)
    assert isinstance(result.error, FetchError)
    assert len(http.calls) == 1


def test_malformed_local_version(tmp_path: Path) -> None:
    http, console = MockHttpClient(), MockConsole()
    _published(http, "1.0.0")

    result = _service(http, console).run(_project(tmp_path, "1.0"))

    assert result == Err(VersionParseError(version="1.0", side="local"))
