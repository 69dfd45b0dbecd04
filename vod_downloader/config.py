"""Configuration management for the VOD downloader helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from .paths import DATA_DIRNAME, project_root


@dataclass
class AppConfig:
    project_root: Path = field(default_factory=project_root)
    data_dirname: str = DATA_DIRNAME
    temp_subdir: str = "temp"
    temp_prefix: str = "temp"
    read_chunk_size: int = 4096  # bytes per stream read in exec_command

    def __post_init__(self):
        # Ensure project_root is an absolute Path object
        if not isinstance(self.project_root, Path):
            self.project_root = Path(self.project_root)
        self.project_root = self.project_root.expanduser().resolve()

    def data_path(self, subdir: str) -> Path:
        return self.project_root / self.data_dirname / subdir

    @property
    def temp_dir(self) -> Path:
        return self.data_path(self.temp_subdir)

    def save(self, path: Path) -> None:
        """Saves the configuration to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2, cls=PathEncoder)

    @classmethod
    def from_file(cls, path: Path) -> "AppConfig":
        """Loads configuration from a JSON file."""
        if not path.exists():
            return cls()
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)


class PathEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


_CONFIG: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Process-wide default configuration, computed once."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = AppConfig()
    return _CONFIG


def set_config(config: AppConfig) -> None:
    global _CONFIG
    _CONFIG = config


__all__ = ["AppConfig", "PathEncoder", "get_config", "set_config"]
