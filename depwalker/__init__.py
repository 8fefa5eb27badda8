"""depwalker: classify the installed dependency tree of a Node.js package.

Walks ``node_modules`` from a root package and reports, for every physical
package reachable from it, whether it is needed in production, only for
development, optionally, or some combination, and which native build
system it declares.
"""

from depwalker.config import WalkerConfig, load_walker_config
from depwalker.dep_types import DepType, child_dep_type, dep_type_greater
from depwalker.errors import (
    ConfigError,
    DependencyNotFoundError,
    InvalidArgumentError,
    InvalidDepTypeError,
    ManifestError,
    WalkerError,
)
from depwalker.graph import DependencyEdge, build_dependency_graph, graph_to_json
from depwalker.manifest import PackageManifest, load_package_json
from depwalker.native import NativeModuleType, detect_native_module_type
from depwalker.registry import Module, ModuleRegistry, filter_modules
from depwalker.walker import Walker

__version__ = "0.1.0"

__all__ = [
    "Walker",
    "Module",
    "ModuleRegistry",
    "filter_modules",
    "DepType",
    "dep_type_greater",
    "child_dep_type",
    "NativeModuleType",
    "detect_native_module_type",
    "PackageManifest",
    "load_package_json",
    "DependencyEdge",
    "build_dependency_graph",
    "graph_to_json",
    "WalkerConfig",
    "load_walker_config",
    "WalkerError",
    "DependencyNotFoundError",
    "InvalidDepTypeError",
    "InvalidArgumentError",
    "ManifestError",
    "ConfigError",
]
