"""Core data models shared across xportify components."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class PathClassification:
    """Public subpath derived from a module path."""

    is_index: bool
    public_subpath: str


@dataclass(frozen=True)
class ResolvedArtifacts:
    """Build artifacts found for a module, as package-relative public paths."""

    runtime_artifact: Optional[str] = None
    type_artifact: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.runtime_artifact is not None or self.type_artifact is not None


@dataclass
class ExportEntry:
    """One record of the exports map.

    Entries created from a source module always serialize their ``import`` and
    ``types`` keys, even when one of them is ``None``. Standalone stylesheet
    entries only carry ``style``.
    """

    import_: Optional[str] = None
    types: Optional[str] = None
    style: Optional[str] = None
    from_module: bool = False

    def to_dict(self) -> Dict[str, Optional[str]]:
        data: Dict[str, Optional[str]] = {}
        if self.from_module:
            data["import"] = self.import_
            data["types"] = self.types
        if self.style is not None:
            data["style"] = self.style
        return data


ExportMap = Dict[str, ExportEntry]
