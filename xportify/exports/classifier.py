"""Map source module paths to their public export subpaths."""

from __future__ import annotations

import posixpath

from ..models import PathClassification

MODULE_EXTENSIONS = (".ts", ".tsx")

_INDEX_STEM = "index"


def is_module_path(module_path: str) -> bool:
    """Return True when the path carries a recognized source extension."""
    return _split_extension(module_path) is not None


def strip_module_extension(module_path: str) -> str:
    """Return the module path without its source extension."""
    stem = _split_extension(module_path)
    if stem is None:
        raise ValueError(f"Unrecognized module extension: {module_path}")
    return stem


def classify(module_path: str) -> PathClassification:
    """Classify a module as a root index, a directory index or a regular entry."""
    stem = strip_module_extension(module_path)
    directory, name = posixpath.split(stem)

    if name == _INDEX_STEM:
        if not directory:
            return PathClassification(is_index=True, public_subpath=".")
        return PathClassification(is_index=True, public_subpath=f"./{directory}")

    # "./" + "." + "/name" would yield "././name" for files at the root.
    subpath = posixpath.join(f"./{directory or '.'}", name)
    if subpath.startswith("././"):
        subpath = subpath[2:]
    return PathClassification(is_index=False, public_subpath=subpath)


def _split_extension(module_path: str) -> str | None:
    for extension in MODULE_EXTENSIONS:
        if module_path.endswith(extension) and len(module_path) > len(extension):
            return module_path[: -len(extension)]
    return None


__all__ = ["MODULE_EXTENSIONS", "classify", "is_module_path", "strip_module_extension"]
