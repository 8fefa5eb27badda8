"""Native module build system detection."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from depwalker.manifest import PackageManifest

logger = logging.getLogger("depwalker.native")


class NativeModuleType(str, Enum):
    """How a package provides its native (compiled) code, if any."""

    NONE = "none"
    PREBUILD = "prebuild"
    NODE_GYP = "node_gyp"


def detect_native_module_type(
    manifest: PackageManifest,
    module_path: Path,
    prebuild_helpers: Iterable[str] = ("prebuild-install",),
    build_descriptor: str = "binding.gyp",
) -> NativeModuleType:
    """Classify the native build system a package declares.

    A package depending on a prebuild helper fetches prebuilt binaries at
    install time. Otherwise a build descriptor at the package root means it
    is compiled locally with node-gyp. Nothing is executed.

    Args:
        manifest: Loaded manifest of the package.
        module_path: Package directory.
        prebuild_helpers: Names of prebuild-fetching helper packages.
        build_descriptor: Native build descriptor file name.

    Returns:
        NativeModuleType: Detected tag.
    """
    for helper in prebuild_helpers:
        if helper in manifest.dependencies:
            logger.debug("%s depends on %s, tagging as prebuild", manifest.name, helper)
            return NativeModuleType.PREBUILD

    if (module_path / build_descriptor).exists():
        logger.debug("%s ships %s, tagging as node-gyp", manifest.name, build_descriptor)
        return NativeModuleType.NODE_GYP

    return NativeModuleType.NONE


__all__ = ["NativeModuleType", "detect_native_module_type"]
