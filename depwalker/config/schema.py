"""Configuration schema for the dependency walker using Pydantic.

The defaults describe a standard npm-style install: ``package.json``
manifests inside ``node_modules`` directories, ``prebuild-install`` as the
prebuilt-binary helper and ``binding.gyp`` as the node-gyp descriptor.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class WalkerConfig(BaseModel):
    """Top-level configuration for a dependency walk.

    Attributes:
        manifest_filename: Name of the package manifest file.
        modules_dir: Directory name packages are installed under.
        prebuild_helpers: Package names that fetch prebuilt native binaries.
            A module depending on any of them is tagged ``PREBUILD``.
        native_build_descriptor: File whose presence at a package root marks
            it as a ``NODE_GYP`` native module.
    """

    manifest_filename: str = Field(default="package.json", min_length=1)
    modules_dir: str = Field(default="node_modules", min_length=1)
    prebuild_helpers: List[str] = Field(
        default_factory=lambda: ["prebuild-install"]
    )
    native_build_descriptor: str = Field(default="binding.gyp", min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("manifest_filename", "modules_dir", "native_build_descriptor")
    @classmethod
    def validate_plain_name(cls, v: str) -> str:
        """File and directory names must not contain path separators."""
        if "/" in v or "\\" in v:
            raise ValueError(f"Expected a plain file name, got '{v}'")
        return v

    @field_validator("prebuild_helpers")
    @classmethod
    def validate_helpers(cls, v: List[str]) -> List[str]:
        for helper in v:
            if not helper or not isinstance(helper, str):
                raise ValueError(f"Invalid prebuild helper: {helper!r}")
        return v

    @classmethod
    def default(cls) -> "WalkerConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WalkerConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
