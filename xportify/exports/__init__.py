"""Export-map synthesis: path classification, artifact resolution and merging."""

from __future__ import annotations

from .classifier import MODULE_EXTENSIONS, classify, is_module_path
from .resolver import artifact_exists, public_path, resolve
from .synthesizer import synthesize

__all__ = [
    "MODULE_EXTENSIONS",
    "artifact_exists",
    "classify",
    "is_module_path",
    "public_path",
    "resolve",
    "synthesize",
]
