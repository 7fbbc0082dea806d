"""Pipeline orchestration for the extract flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import XportifyConfig, load_config
from .exports import synthesize
from .logging import get_logger
from .manifest import update_package_json_exports
from .models import ExportMap
from .project import ProjectCheck, check_project
from .scanner import SourceScanner


@dataclass
class ExtractOutcome:
    """Result of an extract run."""

    check: ProjectCheck
    config: XportifyConfig
    exports: ExportMap = field(default_factory=dict)
    written: bool = False

    @property
    def ok(self) -> bool:
        return self.check.ok


class Orchestrator:
    """Coordinates validation, discovery, synthesis and manifest rewriting."""

    def __init__(self, scanner: SourceScanner | None = None) -> None:
        self.scanner = scanner or SourceScanner()
        self.logger = get_logger("orchestrator")

    def run_extract(
        self,
        project: str | Path,
        *,
        source: Optional[str] = None,
        dist: Optional[str] = None,
        write: Optional[bool] = None,
    ) -> ExtractOutcome:
        """Generate the exports map for ``project`` and optionally persist it.

        Validation failures are reported through ``ExtractOutcome.check``;
        filesystem probe failures and manifest errors propagate.
        """
        project_path = Path(project).expanduser().resolve()
        self.logger.info("Starting extract run for %s", project_path)

        config = self._load_config(project_path).with_overrides(
            source=source, dist=dist, write=write
        )
        check = check_project(project_path, source=config.source, dist=config.dist)
        outcome = ExtractOutcome(check=check, config=config)
        if not check.ok:
            for message in check.errors:
                self.logger.debug("Validation failed: %s", message)
            return outcome

        modules = self.scanner.scan_modules(check.source_path, config.exclude_paths)
        styles = self.scanner.scan_styles(check.dist_path)
        self.logger.debug("Found %d modules and %d stylesheets", len(modules), len(styles))

        outcome.exports = synthesize(modules, styles, check.dist_path)
        self.logger.info("Generated %d export entries", len(outcome.exports))

        if not outcome.exports:
            return outcome

        if config.write:
            update_package_json_exports(check.package_json_path, outcome.exports)
            outcome.written = True

        return outcome

    def _load_config(self, project_path: Path) -> XportifyConfig:
        if not project_path.is_dir():
            return XportifyConfig(root=project_path)
        return load_config(project_path)


__all__ = ["ExtractOutcome", "Orchestrator"]
