"""JSON export for walk results."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Union

import networkx as nx

from depwalker.graph import graph_to_json
from depwalker.registry import Module

logger = logging.getLogger("depwalker.export.json")


def modules_to_json(
    root: Union[str, os.PathLike], modules: Iterable[Module]
) -> Dict[str, Any]:
    """Build the JSON document describing a walk result."""
    return {
        "root": str(root),
        "modules": [module.to_dict() for module in modules],
    }


def write_json(data: Dict[str, Any], output_path: Path) -> None:
    """Write a JSON document, creating parent directories as needed."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_json(
    root: Union[str, os.PathLike], modules: Iterable[Module], output_path: Path
) -> None:
    """Export a walk result to a JSON file.

    Args:
        root: Root package path the walk started from.
        modules: Modules returned by the walk.
        output_path: Output file path.
    """
    logger.info("Exporting modules to JSON: %s", output_path)
    data = modules_to_json(root, modules)
    write_json(data, output_path)
    logger.info("JSON export completed: %d modules", len(data["modules"]))


def export_graph_json(graph: nx.DiGraph, output_path: Path) -> None:
    """Export a dependency graph as node-link JSON."""
    logger.info("Exporting dependency graph to JSON: %s", output_path)
    write_json(graph_to_json(graph), output_path)
    logger.info(
        "JSON export completed: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )


__all__ = ["modules_to_json", "write_json", "export_json", "export_graph_json"]
