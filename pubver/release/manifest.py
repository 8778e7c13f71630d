from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pubver.core.result import Err, Ok, Result
from pubver.core.structured import as_str_dict, get_str
from pubver.release.errors import ManifestError

__all__ = ["MANIFEST_FILENAME", "Manifest", "manifest_path", "read_manifest"]

MANIFEST_FILENAME = "package.json"


@dataclass(frozen=True, slots=True)
class Manifest:
    name: str
    version: str
    path: Path


def manifest_path(project_dir: Path) -> Path:
    return project_dir / MANIFEST_FILENAME


def read_manifest(project_dir: Path) -> Result[Manifest, ManifestError]:
    """Read the package name and declared version from package.json."""
    path = manifest_path(project_dir)
    try:
        data_obj: object = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ManifestError(path=path, reason="file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ManifestError(path=path, reason=str(e)))
    except json.JSONDecodeError as e:
        return Err(ManifestError(path=path, reason=f"invalid JSON: {e}"))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ManifestError(path=path, reason="root must be a JSON object"))

    name = get_str(data, "name")
    if name is None:
        return Err(ManifestError(path=path, reason="missing 'name'"))
    version = get_str(data, "version")
    if version is None:
        return Err(ManifestError(path=path, reason="missing 'version'"))

    return Ok(Manifest(name=name, version=version, path=path))
