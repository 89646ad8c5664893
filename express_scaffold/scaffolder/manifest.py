"""``package.json`` handling for generated projects."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import ManifestError
from ..utils import load_json, save_json

MANIFEST_FILENAME = "package.json"


def manifest_path(project_root: str | Path) -> Path:
    return Path(project_root) / MANIFEST_FILENAME


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Read and parse the manifest at *path*.

    Raises:
        ManifestError: If the file is missing, unreadable, not valid JSON, or
            not a JSON object.
    """
    path = Path(path)
    try:
        data = load_json(path)
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}", path=path) from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest is not valid JSON: {path} ({exc})", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest is not valid UTF-8: {path}", path=path) from exc
    except OSError as exc:
        raise ManifestError(f"Could not read manifest {path}: {exc}", path=path) from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object: {path}", path=path)
    return data


def inject_scripts(manifest: Mapping[str, Any], scripts: Mapping[str, str]) -> dict[str, Any]:
    """Return a copy of *manifest* with *scripts* merged into its ``scripts`` map.

    Existing scripts are kept; same-named ones are overwritten.
    """
    existing = manifest.get("scripts") or {}
    if not isinstance(existing, dict):
        raise ManifestError("Manifest 'scripts' must be a JSON object")
    updated = dict(manifest)
    updated["scripts"] = {**existing, **scripts}
    return updated


def save_manifest(manifest: Mapping[str, Any], path: str | Path) -> None:
    """Write *manifest* as two-space indented JSON."""
    try:
        save_json(dict(manifest), path)
    except OSError as exc:
        raise ManifestError(f"Could not write manifest {path}: {exc}", path=path) from exc


def update_scripts(project_root: str | Path, scripts: Mapping[str, str]) -> dict[str, Any]:
    """Load the project's manifest, merge *scripts* and persist it.

    Returns:
        The manifest as written.
    """
    path = manifest_path(project_root)
    manifest = inject_scripts(load_manifest(path), scripts)
    save_manifest(manifest, path)
    return manifest
