"""Configuration loading for xportify (.xportify.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from .errors import XportifyError

CONFIG_FILENAME = ".xportify.yml"


class ConfigError(XportifyError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class XportifyConfig:
    """Represents the project settings defined in .xportify.yml."""

    root: Path
    source: str = "src"
    dist: str = "dist"
    write: bool = False
    exclude_paths: List[str] = field(default_factory=list)

    @property
    def source_path(self) -> Path:
        return (self.root / self.source).resolve()

    @property
    def dist_path(self) -> Path:
        return (self.root / self.dist).resolve()

    def with_overrides(
        self,
        *,
        source: Optional[str] = None,
        dist: Optional[str] = None,
        write: Optional[bool] = None,
    ) -> "XportifyConfig":
        """Return a copy where explicitly provided values win over the file."""
        return replace(
            self,
            source=source if source is not None else self.source,
            dist=dist if dist is not None else self.dist,
            write=write if write is not None else self.write,
            exclude_paths=list(self.exclude_paths),
        )


def load_config(config_path: Path) -> XportifyConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return XportifyConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = XportifyConfig(root=root)
    return XportifyConfig(
        root=root,
        source=_as_str(data.get("source")) or defaults.source,
        dist=_as_str(data.get("dist")) or defaults.dist,
        write=_as_bool(data.get("write"), key="write"),
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any, *, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "XportifyConfig", "load_config"]
