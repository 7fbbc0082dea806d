"""Enumerate candidate source modules and compiled stylesheets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .exports.classifier import MODULE_EXTENSIONS
from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    ".turbo",
    ".cache",
    "coverage",
}

_SOURCE_EXCLUDED_DIRS = {"dist", "__tests__", "__fixtures__", "__mocks__"}

# Tests, stories and ambient declarations never become entry points.
_DEFAULT_MODULE_EXCLUDES = (
    "*.test.ts",
    "*.test.tsx",
    "*.spec.ts",
    "*.spec.tsx",
    "*.stories.ts",
    "*.stories.tsx",
    "*.d.ts",
)

STYLE_EXTENSIONS = (".css",)

logger = get_logger("scanner")


@dataclass
class IgnoreRule:
    """Represents a gitignore-style exclusion pattern."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        target = rel_path
        if self.anchored or self.has_slash:
            if fnmatchcase(target, self.pattern):
                return True
            if self.directory_only and target.startswith(f"{self.pattern}/"):
                return True
            return False

        for part in target.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    negate = pattern.startswith("!")
    if negate:
        pattern = pattern[1:]

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    has_slash = "/" in pattern
    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash=has_slash,
    )


def build_ignore_rules(patterns: Sequence[str]) -> List[IgnoreRule]:
    rules: List[IgnoreRule] = []
    for pattern in patterns:
        rule = build_ignore_rule(pattern)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _iter_files(
    root: Path, rules: Sequence[IgnoreRule], excluded_dirs: set[str]
) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        filtered_dirs = []
        for name in dirnames:
            if name in excluded_dirs:
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_ignore(rel_path, True, rules):
                continue
            filtered_dirs.append(name)
        # A directory's own files come before its subdirectories, each in name order.
        dirnames[:] = sorted(filtered_dirs)

        for filename in sorted(filenames):
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield rel_path


def _require_directory(path: Path, label: str) -> Path:
    resolved = path.expanduser().resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"{label} not found: {path}")
    if not resolved.is_dir():
        raise NotADirectoryError(f"{label} is not a directory: {path}")
    return resolved


class SourceScanner:
    """Walks the source and output trees to list export candidates.

    Each directory lists its own files, in name order, before descending into
    its subdirectories, so the generated exports map is stable between runs.
    """

    def scan_modules(self, source_root: Path | str, exclude_paths: Sequence[str] = ()) -> List[str]:
        """Return source module paths relative to ``source_root``."""
        root = _require_directory(Path(source_root), "Source directory")
        rules = build_ignore_rules(_DEFAULT_MODULE_EXCLUDES)
        rules.extend(build_ignore_rules(exclude_paths))

        modules = [
            rel_path
            for rel_path in _iter_files(root, rules, _EXCLUDED_DIRS | _SOURCE_EXCLUDED_DIRS)
            if rel_path.endswith(MODULE_EXTENSIONS)
        ]
        logger.debug("Discovered %d source modules under %s", len(modules), root)
        return modules

    def scan_styles(self, output_root: Path | str, exclude_paths: Sequence[str] = ()) -> List[str]:
        """Return stylesheet paths relative to ``output_root``."""
        root = _require_directory(Path(output_root), "Destination directory")
        rules = build_ignore_rules(exclude_paths)

        styles = [
            rel_path
            for rel_path in _iter_files(root, rules, _EXCLUDED_DIRS)
            if rel_path.endswith(STYLE_EXTENSIONS)
        ]
        logger.debug("Discovered %d stylesheets under %s", len(styles), root)
        return styles


__all__ = ["IgnoreRule", "STYLE_EXTENSIONS", "SourceScanner", "build_ignore_rule", "build_ignore_rules"]
