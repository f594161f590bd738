from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from filereport_core.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReportConfig:
    """Settings for a report run.

    Attributes:
        follow_symlinks: Descend into symlinked directories while scanning
        progress_interval: Log a progress line every N files (0 disables it)
        log_level: Console/file logging level name
        log_file: Optional path of a log file written alongside stderr
    """

    follow_symlinks: bool = False
    progress_interval: int = 1000
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ReportConfig":
        """Build a config from a parsed YAML mapping; missing keys keep defaults."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        defaults = cls()
        config = cls(
            follow_symlinks=data.get("follow_symlinks", defaults.follow_symlinks),
            progress_interval=data.get("progress_interval", defaults.progress_interval),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            log_file=data.get("log_file", defaults.log_file),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not isinstance(self.follow_symlinks, bool):
            raise ConfigError("follow_symlinks must be true or false")
        if isinstance(self.progress_interval, bool) or not isinstance(self.progress_interval, int):
            raise ConfigError("progress_interval must be an integer")
        if self.progress_interval < 0:
            raise ConfigError("progress_interval must be >= 0")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigError("log_file must be a path string")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(config_path: str) -> ReportConfig:
    """Load a ReportConfig from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        ReportConfig instance
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc

    return ReportConfig.from_dict(data)
