"""Shared fixtures for building installed package trees on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest


def _dep_map(names: Optional[Iterable[str]]) -> Optional[dict]:
    if names is None:
        return None
    return {name: "*" for name in names}


def write_package(
    directory: Path,
    name: Optional[str],
    dependencies: Optional[Iterable[str]] = None,
    dev_dependencies: Optional[Iterable[str]] = None,
    optional_dependencies: Optional[Iterable[str]] = None,
    **extra: object,
) -> Path:
    """Create ``directory`` with a package.json declaring the given deps."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest: dict = dict(extra)
    if name is not None:
        manifest["name"] = name
    for key, names in (
        ("dependencies", dependencies),
        ("devDependencies", dev_dependencies),
        ("optionalDependencies", optional_dependencies),
    ):
        deps = _dep_map(names)
        if deps is not None:
            manifest[key] = deps
    (directory / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return directory


@pytest.fixture
def make_package() -> Callable[..., Path]:
    """Return the ``write_package`` helper."""
    return write_package


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Root project directory with an empty node_modules folder."""
    root = tmp_path / "project"
    (root / "node_modules").mkdir(parents=True)
    return root
