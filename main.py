"""Entrypoint launching the command-line interface."""

import sys

from vod_downloader.cli import run_cli


def main():
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
