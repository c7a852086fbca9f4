"""CLI entrypoint for pathcache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pathcache import __version__
from pathcache.cli.handlers import handle_clear, handle_compact, handle_resolve, handle_show
from pathcache.config import load_config
from pathcache.constants.branding import CLI_DESCRIPTION
from pathcache.exceptions import ConfigError, PathCacheError

HANDLERS = {
    "resolve": handle_resolve,
    "show": handle_show,
    "clear": handle_clear,
    "compact": handle_compact,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="pathcache",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show cache stats and diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the directories that contain NAME")
    resolve.add_argument("name", help="File name to look up, without suffix")
    resolve.add_argument(
        "-d",
        "--dir",
        action="append",
        required=True,
        help="Candidate directory, most preferred first (repeat flag for multiple values)",
    )
    resolve.add_argument(
        "-s",
        "--suffix",
        action="append",
        default=None,
        help="Suffix to try, in order (repeat flag for multiple values; default from config)",
    )

    subparsers.add_parser("show", help="List every cached entry")
    subparsers.add_parser("clear", help="Erase the cache, in memory and on disk")
    subparsers.add_parser("compact", help="Preview the entries the next write would persist")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(args.config)
        return handler(args, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except PathCacheError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1
