"""Helpers for loading walker configuration from TOML/JSON sources.

``load_walker_config`` accepts various configuration sources:

* None -> default WalkerConfig
* dict -> WalkerConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

Settings may sit at the top level or under a ``[walker]`` table.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from depwalker.config.schema import WalkerConfig
from depwalker.errors import ConfigError

logger = logging.getLogger("depwalker.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _guess_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _is_file(path: Path) -> bool:
    # Long inline config strings can exceed the OS name limit.
    try:
        return path.is_file()
    except OSError:
        return False


def _from_mapping(data: Dict[str, Any]) -> WalkerConfig:
    section = data.get("walker", data)
    if not isinstance(section, dict):
        raise ConfigError("[walker] section must be a mapping/dict")
    try:
        return WalkerConfig.from_dict(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid walker configuration: {e}") from e


def load_walker_config(source: ConfigSource) -> WalkerConfig:
    """Load WalkerConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns WalkerConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        WalkerConfig instance.

    Raises:
        ConfigError: If the source cannot be parsed or fails validation.
    """
    if source is None:
        logger.debug("No config source provided; using default WalkerConfig")
        return WalkerConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading WalkerConfig from provided dict")
        return _from_mapping(source)

    if not isinstance(source, (str, Path)):
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    path = Path(source)
    text: Optional[str] = None
    fmt: Optional[str] = None

    if _is_file(path):
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        suffix = path.suffix.lower()
        if suffix in {".toml", ".tml"}:
            fmt = "toml"
        elif suffix == ".json":
            fmt = "json"
        else:
            fmt = _guess_format(text)
        logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
    elif isinstance(source, Path):
        raise ConfigError(f"Configuration file not found: {path}")
    else:
        text = source
        fmt = _guess_format(text)
        logger.info("Loading configuration from inline %s string", fmt)

    try:
        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid {fmt.upper()} configuration: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Top-level configuration must be a mapping/dict")

    return _from_mapping(data)


__all__ = ["load_walker_config", "ConfigSource"]
