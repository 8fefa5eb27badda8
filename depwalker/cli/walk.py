"""Walk command implementation."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from depwalker.config import load_walker_config
from depwalker.errors import ConfigError, WalkerError
from depwalker.export.json import export_graph_json, export_json, modules_to_json
from depwalker.graph import graph_to_json
from depwalker.native import NativeModuleType
from depwalker.registry import Module, filter_modules
from depwalker.walker import Walker

logger = logging.getLogger("depwalker.cli.walk")

WALK_ERRORS = (
    WalkerError,
    json.JSONDecodeError,
    OSError,
    ValueError,
)


def walk_command(args, console: Optional[Console] = None) -> int:
    """Execute walk command.

    Args:
        args: Parsed command-line arguments containing:
            - root: Root package directory
            - config: Optional TOML/JSON config path or inline string
            - format: Output format (table, json, graph)
            - production: Drop dev-only modules from the output
            - output: Optional output file for json/graph formats
        console: Rich Console for table output (optional).

    Returns:
        int: Exit code (0 success, 1 walk failure, 2 bad configuration).
    """
    try:
        config = load_walker_config(getattr(args, "config", None))
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    root = Path(args.root).expanduser()
    output_format = getattr(args, "format", "table") or "table"
    output = getattr(args, "output", None)
    production = getattr(args, "production", False)

    walker = Walker(str(root), config=config)
    try:
        if output_format == "graph":
            graph = asyncio.run(walker.walk_graph())
            if production:
                graph = graph.subgraph(
                    [
                        node
                        for node, attrs in graph.nodes(data=True)
                        if attrs.get("dep_type") not in ("dev", "dev_optional")
                    ]
                ).copy()
            modules: List[Module] = []
        else:
            modules = filter_modules(asyncio.run(walker.walk_tree()), production)
    except WALK_ERRORS as e:
        logger.error("Dependency walk of %s failed: %s", root, e)
        return 1

    if output_format == "graph":
        if output:
            export_graph_json(graph, Path(output))
        else:
            sys.stdout.write(json.dumps(graph_to_json(graph), indent=2) + "\n")
        return 0

    if output_format == "json":
        if output:
            export_json(root, modules, Path(output))
        else:
            sys.stdout.write(json.dumps(modules_to_json(root, modules), indent=2) + "\n")
        return 0

    _print_table(modules, console or Console())
    return 0


def _print_table(modules: List[Module], console: Console) -> None:
    table = Table(title="Installed dependencies")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Type")
    table.add_column("Native")
    table.add_column("Path", overflow="fold")

    for module in modules:
        native = module.native_module_type
        table.add_row(
            module.name,
            module.version or "",
            module.dep_type.value,
            "" if native is NativeModuleType.NONE else native.value,
            module.path,
        )

    console.print(table)
    native_count = sum(
        1 for m in modules if m.native_module_type is not NativeModuleType.NONE
    )
    console.print(f"{len(modules)} module(s), {native_count} native")
