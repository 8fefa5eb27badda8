"""Dependency graph of a completed walk, built on networkx."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable

import networkx as nx

from depwalker.dep_types import DepType
from depwalker.registry import Module

logger = logging.getLogger("depwalker.graph")


@dataclass(frozen=True)
class DependencyEdge:
    """A declaration followed from one installed package to another.

    Attributes:
        source: Real path of the declaring package.
        target: Real path of the package the declaration resolved to.
        declared: Declaration kind (PROD, OPTIONAL or DEV).
        dep_type: Type the target was reached with along this edge.
    """

    source: str
    target: str
    declared: DepType
    dep_type: DepType


def build_dependency_graph(
    modules: Iterable[Module], edges: Iterable[DependencyEdge]
) -> nx.DiGraph:
    """Build a directed graph of discovered modules.

    Nodes are keyed by real path. Parallel declarations between the same
    pair of packages collapse to a single edge keeping the strongest
    declaration.

    Args:
        modules: Modules returned by a walk.
        edges: Edges recorded during the same walk.

    Returns:
        nx.DiGraph: Dependency graph.
    """
    graph = nx.DiGraph()
    for module in modules:
        graph.add_node(
            module.path,
            name=module.name,
            version=module.version,
            dep_type=module.dep_type.value,
            native_module_type=module.native_module_type.value,
            is_root=module.dep_type is DepType.ROOT,
        )

    for edge in edges:
        if not (graph.has_node(edge.source) and graph.has_node(edge.target)):
            logger.debug("dropping edge %s -> %s with unknown endpoint", edge.source, edge.target)
            continue
        existing = graph.get_edge_data(edge.source, edge.target)
        if existing and DepType(existing["declared"]).rank >= edge.declared.rank:
            continue
        graph.add_edge(
            edge.source,
            edge.target,
            declared=edge.declared.value,
            dep_type=edge.dep_type.value,
        )

    logger.debug(
        "built dependency graph: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def graph_to_json(graph: nx.DiGraph) -> Dict[str, Any]:
    """Serialize a dependency graph to networkx node-link data."""
    return nx.readwrite.json_graph.node_link_data(graph, edges="edges")


__all__ = ["DependencyEdge", "build_dependency_graph", "graph_to_json"]
