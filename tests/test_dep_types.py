"""Tests for dependency type ordering and child type derivation."""

from itertools import product

import pytest

from depwalker.dep_types import DepType, child_dep_type, dep_type_greater
from depwalker.errors import InvalidDepTypeError

ORDER = [
    DepType.DEV,
    DepType.DEV_OPTIONAL,
    DepType.OPTIONAL,
    DepType.PROD,
    DepType.ROOT,
]
EDGE_TYPES = [DepType.PROD, DepType.OPTIONAL, DepType.DEV]


def test_enum_contains_five_unique_values() -> None:
    assert len(DepType) == 5
    assert len({member.value for member in DepType}) == 5


@pytest.mark.parametrize("dep_type", list(DepType))
def test_greater_is_irreflexive(dep_type: DepType) -> None:
    assert dep_type_greater(dep_type, dep_type) is False


def test_greater_matches_total_order() -> None:
    for (i, a), (j, b) in product(enumerate(ORDER), repeat=2):
        assert dep_type_greater(a, b) is (i > j), f"{a} vs {b}"


@pytest.mark.parametrize(
    "stronger, weaker",
    [
        (DepType.OPTIONAL, DepType.DEV),
        (DepType.PROD, DepType.DEV),
        (DepType.ROOT, DepType.DEV),
        (DepType.PROD, DepType.OPTIONAL),
        (DepType.ROOT, DepType.OPTIONAL),
        (DepType.ROOT, DepType.PROD),
        (DepType.DEV_OPTIONAL, DepType.DEV),
        (DepType.OPTIONAL, DepType.DEV_OPTIONAL),
    ],
)
def test_greater_pairs(stronger: DepType, weaker: DepType) -> None:
    assert dep_type_greater(stronger, weaker)
    assert not dep_type_greater(weaker, stronger)


def test_child_of_root_child_raises() -> None:
    with pytest.raises(InvalidDepTypeError):
        child_dep_type(DepType.PROD, DepType.ROOT)
    with pytest.raises(InvalidDepTypeError):
        child_dep_type(DepType.ROOT, DepType.ROOT)


def test_children_of_root_keep_declared_type() -> None:
    assert child_dep_type(DepType.ROOT, DepType.DEV) is DepType.DEV
    assert child_dep_type(DepType.ROOT, DepType.OPTIONAL) is DepType.OPTIONAL
    assert child_dep_type(DepType.ROOT, DepType.PROD) is DepType.PROD


def test_children_of_optional_deps_are_optional() -> None:
    for edge in EDGE_TYPES:
        assert child_dep_type(DepType.OPTIONAL, edge) is DepType.OPTIONAL
        assert child_dep_type(DepType.DEV_OPTIONAL, edge) is DepType.DEV_OPTIONAL


def test_children_of_prod_deps() -> None:
    assert child_dep_type(DepType.PROD, DepType.PROD) is DepType.PROD
    assert child_dep_type(DepType.PROD, DepType.DEV) is DepType.PROD
    assert child_dep_type(DepType.PROD, DepType.OPTIONAL) is DepType.OPTIONAL


def test_children_of_dev_deps() -> None:
    assert child_dep_type(DepType.DEV, DepType.PROD) is DepType.DEV
    assert child_dep_type(DepType.DEV, DepType.DEV) is DepType.DEV
    # Must stay distinct from plain OPTIONAL.
    assert child_dep_type(DepType.DEV, DepType.OPTIONAL) is DepType.DEV_OPTIONAL


@pytest.mark.parametrize("parent, edge", list(product(ORDER, EDGE_TYPES)))
def test_child_derivation_is_idempotent(parent: DepType, edge: DepType) -> None:
    once = child_dep_type(parent, edge)
    assert child_dep_type(once, edge) is once


def test_optionality_is_absorbing_through_deep_chains() -> None:
    for start in (DepType.OPTIONAL, DepType.DEV_OPTIONAL):
        for chain in product(EDGE_TYPES, repeat=3):
            current = start
            for edge in chain:
                current = child_dep_type(current, edge)
                assert current.is_optional
            assert current is start


def test_rank_helpers() -> None:
    assert [member.rank for member in ORDER] == sorted(m.rank for m in ORDER)
    assert DepType.DEV.is_dev and DepType.DEV_OPTIONAL.is_dev
    assert not DepType.OPTIONAL.is_dev
    assert not DepType.PROD.is_optional
