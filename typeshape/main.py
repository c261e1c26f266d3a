"""Command-line entry point for typeshape."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .codegen.cli_integration import create_codegen_subparser
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="typeshape",
        description="Render resolved type schemas into source code.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file", type=Path, help="Write a full debug log to this file"
    )

    subparsers = parser.add_subparsers(dest="command")
    create_codegen_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the typeshape CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_file=args.log_file)
    logger.debug("Parsed arguments: %s", args)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
