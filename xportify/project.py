"""Validation of the project layout before exports are generated."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

PACKAGE_JSON = "package.json"


@dataclass
class ProjectCheck:
    """Outcome of validating a project directory.

    Failures are collected rather than raised so the caller decides whether
    to stop the process.
    """

    project_path: Path
    package_json_path: Path
    source_path: Path
    dist_path: Path
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_project(project: Path | str, *, source: str = "src", dist: str = "dist") -> ProjectCheck:
    """Resolve and validate the project, source and destination directories."""
    project_path = Path(project).expanduser().resolve()
    check = ProjectCheck(
        project_path=project_path,
        package_json_path=project_path / PACKAGE_JSON,
        source_path=(project_path / source).resolve(),
        dist_path=(project_path / dist).resolve(),
    )

    if not project_path.is_dir():
        check.errors.append(f"Project directory does not exist: {project_path}")
        return check

    if not check.package_json_path.is_file():
        check.errors.append(f"{PACKAGE_JSON} file not found in {project_path}")

    if not check.source_path.is_dir():
        check.errors.append(f"Source directory does not exist: {check.source_path}")

    if not check.dist_path.is_dir():
        check.errors.append(f"Destination directory does not exist: {check.dist_path}")

    return check


__all__ = ["PACKAGE_JSON", "ProjectCheck", "check_project"]
