"""Exception hierarchy for depwalker.

Walk-fatal conditions derive from ``WalkerError``. Argument and data-shape
problems derive from ``ValueError`` so callers can treat them like any other
bad input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


# =============================================================================
# Walk-fatal errors
# =============================================================================

class WalkerError(Exception):
    """Base class for errors that abort a dependency walk.

    A walk that raises one of these is discarded as a whole; no partial
    module list is returned.
    """
    pass


class DependencyNotFoundError(WalkerError):
    """A required dependency could not be located on disk.

    Raised when a non-optional dependency has no directory anywhere up the
    ``node_modules`` search path. This normally means the install is broken
    or the package was removed after installation.
    """

    def __init__(self, module_name: str, from_path: Union[str, Path]) -> None:
        self.module_name = module_name
        self.from_path = str(from_path)
        super().__init__(
            f'Failed to locate module "{module_name}" from "{self.from_path}"\n\n'
            "This normally means that either the package has been deleted "
            "already, or the module installation failed."
        )


class InvalidDepTypeError(WalkerError):
    """Internal invariant violation in dependency type derivation."""
    pass


# =============================================================================
# Input errors
# =============================================================================

class InvalidArgumentError(ValueError):
    """Raised when the walker is constructed with an unusable root path."""
    pass


class ManifestError(ValueError):
    """Raised when a package manifest is valid JSON but not an object."""
    pass


class ConfigError(ValueError):
    """Raised when a walker configuration source cannot be loaded."""
    pass


__all__ = [
    "WalkerError",
    "DependencyNotFoundError",
    "InvalidDepTypeError",
    "InvalidArgumentError",
    "ManifestError",
    "ConfigError",
]
