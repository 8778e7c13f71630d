from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pubver.core.config import RegistryConfig
from pubver.core.result import Err, Ok, Result
from pubver.core.structured import get_str, get_table
from pubver.registry.http import HttpClient
from pubver.release.errors import DataError, FetchError

__all__ = ["RegistryClient", "latest_from_document"]


def latest_from_document(package: str, doc: dict[str, Any]) -> Result[str, FetchError | DataError]:
    """Pull dist-tags.latest out of a registry package document.

    A truthy top-level `error` field is a registry failure, not data.
    """
    error = doc.get("error")
    if error:
        return Err(FetchError(package=package, registry_error=str(error)))

    dist_tags = get_table(doc, "dist-tags")
    if dist_tags is None:
        return Err(DataError(package=package, reason="missing 'dist-tags'", payload=doc))
    latest = get_str(dist_tags, "latest")
    if latest is None:
        return Err(DataError(package=package, reason="missing 'dist-tags.latest'", payload=doc))
    return Ok(latest)


@dataclass(frozen=True, slots=True)
class RegistryClient:
    config: RegistryConfig
    http: HttpClient

    def auth_headers(self) -> dict[str, str]:
        if self.config.token:
            return {"Authorization": f"Bearer {self.config.token}"}
        return {}

    def fetch_latest(self, package: str) -> Result[str, FetchError | DataError]:
        """Fetch the package document once and return its latest version."""
        url = self.config.package_url(package)
        doc = self.http.get_json(url, headers=self.auth_headers())
        if isinstance(doc, Err):
            return Err(FetchError(package=package, http=doc.error))
        return latest_from_document(package, doc.value)
