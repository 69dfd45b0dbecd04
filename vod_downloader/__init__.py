"""VOD downloader helper package root.

Public surface kept intentionally small; internal modules may evolve.
"""

from .config import AppConfig, get_config
from .filtering import filter_video_ids
from .jsonio import read_json_file
from .paths import data_path, project_root
from .process import exec_command
from .tempfiles import ensure_dir_exists, temp_file_path

__all__ = [
    "AppConfig",
    "get_config",
    "filter_video_ids",
    "read_json_file",
    "data_path",
    "project_root",
    "exec_command",
    "ensure_dir_exists",
    "temp_file_path",
]


def main():
    """Run the command-line interface."""
    import sys

    from .cli import run_cli

    sys.exit(run_cli())
