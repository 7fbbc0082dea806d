"""Assemble the package exports map from source modules and stylesheets."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Iterable

from ..logging import get_logger
from ..models import ExportEntry, ExportMap
from .classifier import classify, is_module_path
from .resolver import public_path, resolve

logger = get_logger("exports")


def synthesize(
    module_paths: Iterable[str],
    style_paths: Iterable[str],
    output_root: Path | str,
) -> ExportMap:
    """Build the exports map for a compiled package.

    Modules are processed before stylesheets and each list keeps its input
    order. Index modules are published as soon as any artifact exists, while
    regular modules need a runtime artifact; a regular module that only
    produced declarations is treated as internal.
    """
    exports: ExportMap = {}

    for module_path in module_paths:
        entry = _module_entry(module_path, output_root)
        if entry is None:
            continue
        subpath, record = entry
        if subpath in exports:
            logger.warning("%s replaces an earlier entry for %s", module_path, subpath)
        exports[subpath] = record
        logger.debug("Published %s as %s", module_path, subpath)

    for style_path in style_paths:
        _add_style(exports, style_path, output_root)

    return exports


def _module_entry(module_path: str, output_root: Path | str) -> tuple[str, ExportEntry] | None:
    if not is_module_path(module_path):
        logger.debug("Skipping %s: not a source module", module_path)
        return None

    classification = classify(module_path)
    artifacts = resolve(module_path, output_root)

    if not artifacts.found:
        logger.debug("Skipping %s: no compiled output", module_path)
        return None
    if not classification.is_index and artifacts.runtime_artifact is None:
        logger.debug("Skipping %s: declarations only", module_path)
        return None

    return classification.public_subpath, ExportEntry(
        import_=artifacts.runtime_artifact,
        types=artifacts.type_artifact,
        from_module=True,
    )


def _add_style(exports: ExportMap, style_path: str, output_root: Path | str) -> None:
    subpath = f"./{style_path}"
    style = public_path(style_path, output_root)

    base_subpath, _ = posixpath.splitext(subpath)
    module_entry = exports.get(base_subpath)
    if module_entry is not None and module_entry.from_module:
        module_entry.style = style
        logger.debug("Merged %s into %s", style_path, base_subpath)
        return

    entry = exports.setdefault(subpath, ExportEntry())
    entry.style = style
    logger.debug("Published %s as %s", style_path, subpath)


__all__ = ["synthesize"]
