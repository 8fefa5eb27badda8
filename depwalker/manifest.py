"""Package manifest (package.json) model and loader.

Only the fields the walker consults are modelled. Version range values are
kept as-is and never interpreted; only key presence matters.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from depwalker.errors import ManifestError

logger = logging.getLogger("depwalker.manifest")


class PackageManifest(BaseModel):
    """Subset of a package.json consulted during a walk.

    Missing, ``null`` or non-object dependency maps default to empty dicts,
    so lookups on them are always safe.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    version: Optional[str] = None
    dependencies: Dict[str, Any] = Field(default_factory=dict)
    dev_dependencies: Dict[str, Any] = Field(
        default_factory=dict, alias="devDependencies"
    )
    optional_dependencies: Dict[str, Any] = Field(
        default_factory=dict, alias="optionalDependencies"
    )

    @field_validator("name", "version", mode="before")
    @classmethod
    def _string_or_none(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) and v else None

    @field_validator(
        "dependencies", "dev_dependencies", "optional_dependencies", mode="before"
    )
    @classmethod
    def _mapping_or_empty(cls, v: Any) -> Dict[str, Any]:
        if not isinstance(v, dict):
            return {}
        return v

    def required_dependencies(self) -> Iterator[str]:
        """Yield ``dependencies`` names not also declared optional.

        Some installers copy optional dependencies into ``dependencies``;
        the optional declaration wins.
        """
        for dep_name in self.dependencies:
            if dep_name in self.optional_dependencies:
                logger.debug(
                    "%s lists %s in dependencies but it is also marked optional",
                    self.name,
                    dep_name,
                )
                continue
            yield dep_name


def load_package_json(module_path: Path, filename: str = "package.json") -> Optional[PackageManifest]:
    """Read the manifest of the package at ``module_path``.

    Args:
        module_path: Package directory.
        filename: Manifest file name.

    Returns:
        PackageManifest, or None if the directory has no manifest.

    Raises:
        json.JSONDecodeError: If the manifest is not valid JSON.
        OSError: If the manifest exists but cannot be read.
        ManifestError: If the manifest is not a JSON object.
    """
    manifest_path = module_path / filename
    if not manifest_path.is_file():
        return None

    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {manifest_path} must contain a JSON object")

    manifest = PackageManifest.model_validate(data)
    if manifest.name is None:
        manifest.name = module_path.name
    return manifest


__all__ = ["PackageManifest", "load_package_json"]
