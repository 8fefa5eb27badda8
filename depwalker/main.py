"""Main CLI entry point for depwalker.

Provides commands: walk
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from depwalker.cli.walk import walk_command

logger = logging.getLogger("depwalker.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Depwalker - Installed Dependency Tree Walker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    walk_parser = subparsers.add_parser(
        "walk",
        help="Walk an installed package tree and classify its dependencies",
    )
    walk_parser.add_argument(
        "root",
        help="Root package directory (containing package.json)",
    )
    walk_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional walker configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )
    walk_parser.add_argument(
        "-f",
        "--format",
        choices=["table", "json", "graph"],
        default="table",
        help="Output format (default: table, graph emits node-link JSON)",
    )
    walk_parser.add_argument(
        "--production",
        action="store_true",
        help="Only list modules reachable outside dev dependencies",
    )
    walk_parser.add_argument(
        "-o",
        "--output",
        help="Output file for json/graph formats (default: stdout)",
    )

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "walk":
        return walk_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
