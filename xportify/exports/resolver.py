"""Locate the compiled artifacts that correspond to a source module."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import ArtifactProbeFailure
from ..models import ResolvedArtifacts
from .classifier import strip_module_extension

RUNTIME_EXTENSION = ".js"
DECLARATION_EXTENSION = ".d.ts"


def resolve(module_path: str, output_root: Path | str) -> ResolvedArtifacts:
    """Return the runtime and declaration artifacts present for ``module_path``.

    Each artifact kind is probed independently. Paths are reported relative to
    the parent of ``output_root`` so they can be used from the package root.
    """
    root = Path(output_root)
    stem = strip_module_extension(module_path)

    runtime_relative = f"{stem}{RUNTIME_EXTENSION}"
    declaration_relative = f"{stem}{DECLARATION_EXTENSION}"

    runtime = (
        public_path(runtime_relative, root)
        if artifact_exists(root / runtime_relative)
        else None
    )
    types = (
        public_path(declaration_relative, root)
        if artifact_exists(root / declaration_relative)
        else None
    )
    return ResolvedArtifacts(runtime_artifact=runtime, type_artifact=types)


def public_path(relative_path: str, output_root: Path | str) -> str:
    """Express an output-tree path relative to the output root's parent."""
    root_name = Path(os.path.abspath(output_root)).name
    return f"./{root_name}/{relative_path}"


def artifact_exists(path: Path) -> bool:
    """Existence check that only treats a missing path as absence."""
    try:
        _stat_artifact(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise ArtifactProbeFailure(path, exc) from exc
    return True


def _stat_artifact(path: Path) -> os.stat_result:
    return os.stat(path)


__all__ = [
    "DECLARATION_EXTENSION",
    "RUNTIME_EXTENSION",
    "artifact_exists",
    "public_path",
    "resolve",
]
