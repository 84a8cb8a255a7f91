"""Command line interface: ``cssabbr expand p10-20``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__, expand
from .config import Config, load_config, make_config
from .errors import CssAbbrError


def _configure_logging(level_name: Optional[str]) -> None:
    """Attach a console handler to the ``cssabbr`` logger."""
    log_level = (level_name or os.getenv("CSSABBR_LOG_LEVEL", "warning")).lower()
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }
    logger = logging.getLogger("cssabbr")
    logger.setLevel(level_map.get(log_level, logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cssabbr", description="Expand stylesheet abbreviations.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="debug, info, warning or error (default: $CSSABBR_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    expand_parser = subparsers.add_parser("expand", help="Print the expansion of an abbreviation")
    expand_parser.add_argument("abbreviation")
    expand_parser.add_argument("--context", help="Resolve as a value of this property")
    expand_parser.add_argument("--config", help="JSON or TOML file with options and snippets")
    expand_parser.add_argument("--no-fields", action="store_true", help="Omit editor tab stops")
    expand_parser.set_defaults(func=cmd_expand)
    return parser


def _load(args: argparse.Namespace) -> Config:
    config = load_config(args.config, context=args.context) if args.config else make_config(context=args.context)
    if args.no_fields:
        config = config.with_options({"output.fields": False})
    return config


def cmd_expand(args: argparse.Namespace) -> int:
    print(expand(args.abbreviation, _load(args)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        return args.func(args)
    except CssAbbrError as exc:
        print(f"Error: {exc.format()}", file=sys.stderr)
        excerpt = exc.excerpt()
        if excerpt:
            print(excerpt, file=sys.stderr)
        return 1


__all__ = ["main", "build_parser", "cmd_expand"]
