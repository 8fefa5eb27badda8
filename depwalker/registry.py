"""Discovered module records keyed by real path."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from depwalker.dep_types import DepType, dep_type_greater
from depwalker.native import NativeModuleType

logger = logging.getLogger("depwalker.registry")


@dataclass
class Module:
    """One physical installed package found during a walk.

    Attributes:
        path: Absolute, symlink-resolved package directory.
        name: Declared package name.
        dep_type: Strongest relationship the package was reached with.
        native_module_type: Native build system the package declares.
        version: Declared version, informational only.
    """

    path: str
    name: str
    dep_type: DepType
    native_module_type: NativeModuleType = NativeModuleType.NONE
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "version": self.version,
            "dep_type": self.dep_type.value,
            "native_module_type": self.native_module_type.value,
        }


class ModuleRegistry:
    """Ordered map from real path to the module recorded there.

    A path is recorded once. Later visits can only raise its dep type via
    :meth:`upgrade`.
    """

    def __init__(self) -> None:
        self._modules: Dict[str, Module] = {}

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, path: object) -> bool:
        return path in self._modules

    def has(self, path: str) -> bool:
        return path in self._modules

    def get(self, path: str) -> Optional[Module]:
        return self._modules.get(path)

    def add(self, module: Module) -> None:
        """Record a newly discovered module.

        Raises:
            ValueError: If a module is already recorded at the same path.
        """
        if module.path in self._modules:
            raise ValueError(f"Module already recorded at {module.path}")
        self._modules[module.path] = module

    def upgrade(self, path: str, dep_type: DepType) -> bool:
        """Raise the dep type recorded for ``path`` if ``dep_type`` is stronger.

        Returns:
            bool: True if the recorded dep type changed.

        Raises:
            KeyError: If nothing is recorded at ``path``.
        """
        existing = self._modules[path]
        if not dep_type_greater(dep_type, existing.dep_type):
            return False
        logger.debug(
            "existing module %s has a type of %s, new type would be %s, updating",
            existing.name,
            existing.dep_type.value,
            dep_type.value,
        )
        existing.dep_type = dep_type
        return True

    def modules(self) -> List[Module]:
        """Recorded modules in discovery order."""
        return list(self._modules.values())


def filter_modules(modules: Iterable[Module], production: bool = True) -> List[Module]:
    """Select the modules a production package ships.

    With ``production`` set, modules only reachable through dev
    dependencies (``DEV`` and ``DEV_OPTIONAL``) are dropped.
    """
    if not production:
        return list(modules)
    return [module for module in modules if not module.dep_type.is_dev]


__all__ = ["Module", "ModuleRegistry", "filter_modules"]
