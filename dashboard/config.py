"""YAML-backed settings for the Chartify dashboard."""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from engine.errors import ChartifyError

CONFIG_ENV_VAR = "CHARTIFY_CONFIG"
DEFAULT_CONFIG_NAME = "chartify.yaml"


class ConfigError(ChartifyError):
    """Raised when the settings file cannot be parsed or has unknown keys."""


@dataclass(frozen=True)
class AppConfig:
    """Settings with the defaults used when no file is present."""

    title: str = "Chartify"
    preview_rows: int = 10
    max_upload_mb: int = 10
    preferences_path: str = "~/.chartify/preferences.json"
    export_width: int = 1000
    export_height: int = 500
    export_scale: int = 2
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "AppConfig":
        """Instantiate an :class:`AppConfig` from a configuration mapping."""

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(str(key) for key in cfg if key not in known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        values: Dict[str, Any] = {}
        for key, raw in cfg.items():
            caster = int if known[key].type in ("int", int) else str
            try:
                values[key] = caster(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for '{key}': {raw!r}") from exc
        if values.get("preview_rows", cls.preview_rows) < 1:
            raise ConfigError("'preview_rows' must be at least 1")
        return cls(**values)

    @property
    def preferences_file(self) -> Path:
        return Path(self.preferences_path).expanduser()

    def image_options(self) -> Dict[str, int]:
        return {"width": self.export_width, "height": self.export_height, "scale": self.export_scale}

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_config_path(default_dir: Optional[Path] = None) -> Path:
    """Return the settings path from ``CHARTIFY_CONFIG`` or the default location."""

    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()
    base = default_dir or Path(__file__).resolve().parent.parent
    return base / DEFAULT_CONFIG_NAME


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load settings from ``path``; a missing file yields the defaults."""

    path = path or resolve_config_path()
    if not path.exists():
        return AppConfig()
    try:
        with path.open("r", encoding="utf-8") as fp:
            raw = yaml.safe_load(fp)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if raw is None:
        return AppConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return AppConfig.from_mapping(raw)


__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "load_config",
    "resolve_config_path",
]
