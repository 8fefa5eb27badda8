"""Installed dependency tree walker.

Walks a ``node_modules`` tree starting at a root package, recording every
physical package reachable through ``dependencies``, ``optionalDependencies``
and (for the root only) ``devDependencies``, together with the strongest
relationship it was reached with and its native build system.

Typical use::

    walker = Walker("/path/to/project")
    modules = await walker.walk_tree()

The walk runs once per ``Walker`` instance. Later and concurrent calls to
``walk_tree`` share the same underlying task, including its failure.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar, Union

import networkx as nx

from depwalker.config import WalkerConfig
from depwalker.dep_types import DepType, child_dep_type
from depwalker.errors import DependencyNotFoundError, InvalidArgumentError
from depwalker.graph import DependencyEdge, build_dependency_graph
from depwalker.manifest import load_package_json
from depwalker.native import detect_native_module_type
from depwalker.registry import Module, ModuleRegistry

logger = logging.getLogger("depwalker.walker")

T = TypeVar("T")


def _real_path(path: Path) -> Optional[Path]:
    """Resolve ``path`` to its symlink-free absolute form, or None if broken."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


class Walker:
    """Resolve the dependency tree of an installed package.

    Args:
        module_path: Root package directory.
        config: Optional walker configuration, defaults to
            ``WalkerConfig.default()``.

    Raises:
        InvalidArgumentError: If ``module_path`` is empty or not a string
            or path-like object.
    """

    def __init__(
        self,
        module_path: Union[str, os.PathLike],
        config: Optional[WalkerConfig] = None,
    ) -> None:
        if not module_path or not isinstance(module_path, (str, os.PathLike)):
            raise InvalidArgumentError("module_path must be provided as a string")
        logger.debug("creating walker with root_module=%s", module_path)
        self._root_module = module_path
        self.config = config or WalkerConfig.default()
        self._registry = ModuleRegistry()
        self._edges: List[DependencyEdge] = []
        self._walk_task: Optional[asyncio.Task] = None

    def get_root_module(self) -> Union[str, os.PathLike]:
        return self._root_module

    @property
    def edges(self) -> List[DependencyEdge]:
        """Edges followed by a successfully completed walk."""
        task = self._walk_task
        if task is None or not task.done() or task.cancelled() or task.exception():
            return []
        return list(self._edges)

    async def walk_tree(self) -> List[Module]:
        """Walk the tree once and return the discovered modules.

        The first call starts the walk; every other call, concurrent or
        later, awaits the same task and receives the same list or the same
        exception. Cancelling one caller does not cancel the shared walk.

        Returns:
            List[Module]: Discovered modules, root first, in depth-first
            discovery order.

        Raises:
            DependencyNotFoundError: If a required dependency is missing.
            json.JSONDecodeError: If a manifest is not valid JSON.
            OSError: If a manifest cannot be read.
        """
        if self._walk_task is None:
            logger.info("starting tree walk from %s", self._root_module)
            self._walk_task = asyncio.ensure_future(self._run_walk())
        else:
            logger.debug("tree walk in progress / completed already, waiting for it")
        return await asyncio.shield(self._walk_task)

    walk = walk_tree

    async def walk_graph(self) -> nx.DiGraph:
        """Return the dependency graph of this walker's (memoized) walk."""
        modules = await self.walk_tree()
        return build_dependency_graph(modules, self._edges)

    async def _run_walk(self) -> List[Module]:
        await self._walk_dependencies_for_module(
            Path(self._root_module), DepType.ROOT, None, None
        )
        modules = self._registry.modules()
        logger.info("tree walk finished with %d module(s)", len(modules))
        return modules

    async def _run_io(self, func: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    def _find_module_dir(self, module_name: str, from_path: Path) -> Optional[Path]:
        """Search ``node_modules`` directories upward from ``from_path``.

        Mirrors Node's lookup: try ``<dir>/node_modules/<name>``, then move to
        the parent directory, skipping directories that are themselves
        ``node_modules`` or an ``@scope`` folder inside one. A dangling
        symlink counts as found so the caller prunes it. Stops once the
        candidate no longer changes.
        """
        modules_dir = self.config.modules_dir
        test_path = from_path
        last_candidate: Optional[Path] = None
        while True:
            candidate = test_path / modules_dir / module_name
            if candidate == last_candidate:
                return None
            last_candidate = candidate
            if candidate.is_symlink() or candidate.exists():
                return candidate
            parent = test_path.parent
            if parent.name.startswith("@") and parent.parent.name == modules_dir:
                parent = parent.parent
            if parent.name == modules_dir:
                parent = parent.parent
            test_path = parent

    async def _walk_dependencies_for_module_in_module(
        self,
        module_name: str,
        module_path: Path,
        declared: DepType,
        dep_type: DepType,
    ) -> None:
        discovered = await self._run_io(self._find_module_dir, module_name, module_path)
        if discovered is None:
            if not dep_type.is_optional:
                raise DependencyNotFoundError(module_name, module_path)
            logger.debug(
                "optional dependency %s of %s is not installed, skipping",
                module_name,
                module_path,
            )
            return
        await self._walk_dependencies_for_module(
            discovered, dep_type, str(module_path), declared
        )

    async def _walk_dependencies_for_module(
        self,
        module_path: Path,
        dep_type: DepType,
        parent_path: Optional[str],
        declared: Optional[DepType],
    ) -> None:
        real_path = await self._run_io(_real_path, module_path)
        if real_path is None:
            logger.debug("%s does not resolve to a real path, skipping", module_path)
            return
        key = str(real_path)
        logger.debug("walk reached: %s Type is: %s", key, dep_type.value)

        if self._registry.has(key):
            logger.debug("already walked this route")
            self._registry.upgrade(key, dep_type)
            self._record_edge(parent_path, key, declared, dep_type)
            return

        manifest = await self._run_io(
            load_package_json, real_path, self.config.manifest_filename
        )
        # Package managers leave directories without a manifest behind
        if manifest is None:
            logger.debug("walk hit a dead end, %s is incomplete", key)
            return

        native_type = await self._run_io(
            detect_native_module_type,
            manifest,
            real_path,
            self.config.prebuild_helpers,
            self.config.native_build_descriptor,
        )
        self._registry.add(
            Module(
                path=key,
                name=manifest.name,
                dep_type=dep_type,
                native_module_type=native_type,
                version=manifest.version,
            )
        )
        self._record_edge(parent_path, key, declared, dep_type)

        for dep_name in manifest.required_dependencies():
            await self._walk_dependencies_for_module_in_module(
                dep_name,
                real_path,
                DepType.PROD,
                child_dep_type(dep_type, DepType.PROD),
            )

        for dep_name in manifest.optional_dependencies:
            await self._walk_dependencies_for_module_in_module(
                dep_name,
                real_path,
                DepType.OPTIONAL,
                child_dep_type(dep_type, DepType.OPTIONAL),
            )

        if dep_type is DepType.ROOT:
            logger.debug("still at the root, walking down the dev route")
            for dep_name in manifest.dev_dependencies:
                await self._walk_dependencies_for_module_in_module(
                    dep_name,
                    real_path,
                    DepType.DEV,
                    child_dep_type(dep_type, DepType.DEV),
                )

    def _record_edge(
        self,
        parent_path: Optional[str],
        child_path: str,
        declared: Optional[DepType],
        dep_type: DepType,
    ) -> None:
        if parent_path is None or declared is None:
            return
        self._edges.append(DependencyEdge(parent_path, child_path, declared, dep_type))


__all__ = ["Walker"]
