"""Command-line interface for the file copier."""

from __future__ import annotations

import argparse
import logging

from .config import CopyConfig, load_config, validate_config
from .copier import copy
from .errors import UsageError

logger = logging.getLogger(__name__)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Copy the bytes of one file to another path.",
    )

    # Global logging verbosity flags
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging output",
    )
    verbosity.add_argument(
        "--quiet", "-q", action="store_true",
        help="Suppress all output except warnings and errors",
    )

    parser.add_argument(
        "--config", required=False, default=None,
        help="Path to an optional YAML config file",
    )

    # Exactly two expected; the count is checked in parse_paths
    parser.add_argument(
        "paths", nargs="*", metavar="PATH",
        help="Source file followed by destination file",
    )

    return parser


def parse_paths(parser: argparse.ArgumentParser, paths: list[str]) -> tuple[str, str]:
    """Return ``(source, destination)`` from the positional arguments.

    Raises:
        UsageError: Unless exactly two paths were given.
    """
    if len(paths) != 2:
        raise UsageError(
            f"usage: {parser.prog} <source file> <destination file>"
        )
    return paths[0], paths[1]


def _load_config(config_path: str | None) -> CopyConfig | None:
    """Load and validate the config file, or return defaults.

    Returns None when the file is invalid; the errors have been logged.
    """
    if config_path is None:
        return CopyConfig()

    config = load_config(config_path)
    errors = validate_config(config)
    if errors:
        for err in errors:
            logger.error("Config error: %s", err)
        return None
    logger.debug("Config loaded from %s", config_path)
    return config


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser(prog)

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # Return the exit code from argparse (0 for --help, 2 for errors)
        return e.code if isinstance(e.code, int) else 1

    # Configure root logger based on verbosity flags
    if getattr(args, "verbose", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        source, destination = parse_paths(parser, args.paths)
        config = _load_config(args.config)
        if config is None:
            return 1
        result = copy(source, destination, config)
    except Exception as e:
        logger.error("%s", e)
        return 1

    print(f"File copied from {result.source} to {result.destination} successfully.")
    return 0
