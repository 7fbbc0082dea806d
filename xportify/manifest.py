"""Serialization of the exports map and package.json rewriting."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from .errors import ManifestError
from .logging import get_logger
from .models import ExportMap

_INDENT = 2

logger = get_logger("manifest")


def serialize_exports(export_map: ExportMap) -> Dict[str, Dict[str, Optional[str]]]:
    """Return a JSON-ready mapping preserving subpath and field order."""
    return {subpath: entry.to_dict() for subpath, entry in export_map.items()}


def render_exports(export_map: ExportMap) -> str:
    """Render the ``{"exports": ...}`` preview shown before writing."""
    return json.dumps({"exports": serialize_exports(export_map)}, indent=_INDENT)


def update_package_json_exports(package_json_path: Path, export_map: ExportMap) -> None:
    """Replace the ``exports`` field of package.json, keeping every other key."""
    try:
        content = package_json_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to read {package_json_path}: {exc}") from exc

    try:
        package_json = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {package_json_path}: {exc}") from exc

    if not isinstance(package_json, dict):
        raise ManifestError(f"{package_json_path} must contain a JSON object")

    package_json["exports"] = serialize_exports(export_map)

    try:
        package_json_path.write_text(
            json.dumps(package_json, indent=_INDENT, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ManifestError(f"Unable to write {package_json_path}: {exc}") from exc

    logger.info("Updated exports in %s (%d entries)", package_json_path, len(export_map))


__all__ = ["render_exports", "serialize_exports", "update_package_json_exports"]
