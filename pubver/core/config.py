"""Registry configuration resolution.

The token and registry URL are resolved once, by the CLI, into an immutable
RegistryConfig that is handed to the registry client. Nothing below the CLI
reads the process environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

__all__ = [
    "DEFAULT_REGISTRY",
    "NPMRC_FILENAME",
    "REGISTRY_ENV",
    "TOKEN_ENV",
    "RegistryConfig",
    "normalize_registry_url",
    "read_npmrc_registry",
    "resolve_registry_config",
]

DEFAULT_REGISTRY = "https://registry.npmjs.org"
NPMRC_FILENAME = ".npmrc"

TOKEN_ENV = "NPM_TOKEN"
REGISTRY_ENV = "NPM_REGISTRY"


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Where to look up published versions, and how to authenticate.

    Attributes:
        registry_url: Registry root without a trailing slash
        token: Bearer token, or None for anonymous requests
    """

    registry_url: str = DEFAULT_REGISTRY
    token: str | None = None

    def package_url(self, name: str) -> str:
        return f"{self.registry_url}/{quote(name, safe='@/')}"


def normalize_registry_url(value: str) -> str:
    """Expand protocol-relative values and strip one trailing slash.

    "//npm.example.com/" becomes "https://npm.example.com".
    """
    url = value.strip()
    if url.startswith("/"):
        url = "https:" + url
    if url.endswith("/"):
        url = url[:-1]
    return url


def read_npmrc_registry(project_dir: Path) -> str | None:
    """Return the last `registry=` value from the project's .npmrc, if any.

    A missing or unreadable file is the same as no setting at all. The value
    is everything after the first "registry=", so a URL that itself contains
    "registry=" is kept whole rather than cut at the second occurrence.
    """
    path = project_dir / NPMRC_FILENAME
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    registry: str | None = None
    for raw in content.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith("registry="):
            registry = line.split("registry=", 1)[1]
    return registry or None


def resolve_registry_config(
    *,
    environ: Mapping[str, str],
    project_dir: Path,
    token: str | None = None,
    registry: str | None = None,
) -> RegistryConfig:
    """Build the RegistryConfig for one run.

    Args:
        environ: Environment snapshot (usually os.environ)
        project_dir: Directory holding package.json and .npmrc
        token: Value of --token; used only when NPM_TOKEN is unset
        registry: Value of --registry; wins over NPM_REGISTRY and .npmrc

    Returns:
        RegistryConfig with a normalized registry URL
    """
    resolved_token = environ.get(TOKEN_ENV) or token or None

    resolved_registry = (
        registry
        or environ.get(REGISTRY_ENV)
        or read_npmrc_registry(project_dir)
        or DEFAULT_REGISTRY
    )

    return RegistryConfig(
        registry_url=normalize_registry_url(resolved_registry),
        token=resolved_token,
    )
