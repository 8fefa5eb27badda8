"""Dependency relationship types and their ordering.

``DepType`` describes why a package is installed relative to the root
project. The members form a total order, weakest first::

    DEV < DEV_OPTIONAL < OPTIONAL < PROD < ROOT

When the same package is reached through several routes the strongest type
wins, see :func:`dep_type_greater`.
"""

from __future__ import annotations

from enum import Enum

from depwalker.errors import InvalidDepTypeError


class DepType(str, Enum):
    """Relationship of an installed package to the root project."""

    PROD = "prod"
    DEV = "dev"
    OPTIONAL = "optional"
    DEV_OPTIONAL = "dev_optional"
    ROOT = "root"

    @property
    def rank(self) -> int:
        """Position in the total order (higher is stronger)."""
        return _RANKS[self]

    @property
    def is_optional(self) -> bool:
        return self in (DepType.OPTIONAL, DepType.DEV_OPTIONAL)

    @property
    def is_dev(self) -> bool:
        return self in (DepType.DEV, DepType.DEV_OPTIONAL)


_RANKS = {
    DepType.DEV: 0,
    DepType.DEV_OPTIONAL: 1,
    DepType.OPTIONAL: 2,
    DepType.PROD: 3,
    DepType.ROOT: 4,
}


def dep_type_greater(new_type: DepType, existing: DepType) -> bool:
    """Return True if ``new_type`` is strictly stronger than ``existing``."""
    return new_type.rank - existing.rank > 0


def child_dep_type(parent_type: DepType, child_type: DepType) -> DepType:
    """Derive the type of a dependency reached from a parent package.

    Args:
        parent_type: Resolved type of the package declaring the dependency.
        child_type: Kind of declaration being followed (``PROD`` for
            ``dependencies``, ``OPTIONAL`` for ``optionalDependencies``,
            ``DEV`` for ``devDependencies``).

    Returns:
        DepType: The type the child package is reached with.

    Raises:
        InvalidDepTypeError: If ``child_type`` is ``ROOT``.
    """
    if child_type is DepType.ROOT:
        raise InvalidDepTypeError(
            "Something went wrong, a child dependency can't be marked as the ROOT"
        )

    if parent_type is DepType.ROOT:
        return child_type
    if parent_type is DepType.PROD:
        if child_type is DepType.OPTIONAL:
            return DepType.OPTIONAL
        return DepType.PROD
    if parent_type.is_optional:
        # Everything below an optional package stays optional.
        return parent_type
    # DEV parent: optional children become DEV_OPTIONAL, never plain OPTIONAL.
    if child_type is DepType.OPTIONAL:
        return DepType.DEV_OPTIONAL
    return DepType.DEV


__all__ = ["DepType", "dep_type_greater", "child_dep_type"]
