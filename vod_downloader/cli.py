"""Command-line interface over the VOD helper functions."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from rich import print as rprint
from rich.markup import escape
from .config import AppConfig, get_config, set_config
from .filtering import KNOWN_CRITERIA, filter_video_ids
from .jsonio import read_json_file
from .logging_utils import set_log_level
from .process import exec_command
from .tempfiles import temp_file_path

EXIT_NOT_FOUND = 127
EXIT_CANNOT_EXECUTE = 126


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="VOD downloader helper utilities")
    p.add_argument("--config", default=None, help="Path to a JSON config file")
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging (spawns, JSON errors)"
    )
    sub = p.add_subparsers(dest="command", required=True)

    f = sub.add_parser("filter", help="Select video IDs by criteria or allow-list")
    f.add_argument("ids", nargs="+", help="Video IDs, newest first")
    f.add_argument(
        "--criteria",
        default=None,
        help=f"Named strategy ({', '.join(KNOWN_CRITERIA)}), case-insensitive",
    )
    f.add_argument(
        "--vods",
        dest="specific_vods",
        default=None,
        help="Comma-separated VOD IDs; overrides --criteria",
    )

    t = sub.add_parser("temp-path", help="Allocate a temp file path under data/temp")
    t.add_argument("--prefix", default=None, help="Filename prefix")
    t.add_argument("--suffix", default="", help="Filename suffix, e.g. .mp4")

    r = sub.add_parser("read-json", help="Load a JSON file ([] when unreadable)")
    r.add_argument("path", help="JSON file to read")

    e = sub.add_parser("exec", help="Run a command, streaming its output")
    e.add_argument("argv", nargs=argparse.REMAINDER, help="Executable and arguments")

    sub.add_parser("paths", help="Show resolved project directories")
    return p


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        set_config(AppConfig.from_file(Path(args.config)))
    config = get_config()
    log = set_log_level(args.verbose)
    log.debug("Project root: %s", config.project_root)

    if args.command == "filter":
        selected = filter_video_ids(args.ids, args.criteria, args.specific_vods)
        print(json.dumps(selected))
        return 0

    if args.command == "temp-path":
        path = asyncio.run(temp_file_path(args.prefix, args.suffix, config))
        print(path)
        return 0

    if args.command == "read-json":
        data = asyncio.run(read_json_file(Path(args.path)))
        print(json.dumps(data))
        return 0

    if args.command == "exec":
        cmd = args.argv[1:] if args.argv[:1] == ["--"] else args.argv
        if not cmd:
            parser.error("exec requires a command")
        try:
            return asyncio.run(exec_command(cmd))
        except FileNotFoundError as e:
            rprint(f"[bold red]Command not found:[/] {escape(cmd[0])} ({escape(str(e))})")
            return EXIT_NOT_FOUND
        except OSError as e:
            rprint(f"[bold red]Could not start[/] {escape(cmd[0])}: {escape(str(e))}")
            return EXIT_CANNOT_EXECUTE

    # paths
    rprint(f"[cyan]Project root:[/] {config.project_root}")
    rprint(f"[cyan]Data dir:[/] {config.project_root / config.data_dirname}")
    rprint(f"[cyan]Temp dir:[/] {config.temp_dir}")
    return 0
