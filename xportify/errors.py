"""Exception types raised by xportify components."""

from __future__ import annotations

from pathlib import Path


class XportifyError(RuntimeError):
    """Base class for errors surfaced to the command line."""


class ArtifactProbeFailure(XportifyError):
    """Raised when checking for a build artifact fails for a reason other than absence."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Unable to probe artifact {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ManifestError(XportifyError):
    """Raised when package.json cannot be read, parsed or written."""


__all__ = ["ArtifactProbeFailure", "ManifestError", "XportifyError"]
