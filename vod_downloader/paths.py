"""Project-relative path resolution."""

from __future__ import annotations

from pathlib import Path

DATA_DIRNAME = "data"


def project_root() -> Path:
    # <root>/vod_downloader/paths.py -> <root>
    return Path(__file__).resolve().parent.parent


def data_path(subdir: str, root: Path | None = None) -> Path:
    """Return ``<root>/data/<subdir>``; ``subdir`` is not validated."""
    return (root or project_root()) / DATA_DIRNAME / subdir


__all__ = ["project_root", "data_path", "DATA_DIRNAME"]
