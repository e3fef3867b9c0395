"""Shared pytest fixtures for all tests."""

import random
from itertools import combinations

import pytest

from relprofile.core.logging import configure_logging
from relprofile.sources.relation import Relation


def make_relation(name: str, attributes: list[str], rows: list[tuple]) -> Relation:
    """Helper to build a relation from literal rows."""
    return Relation.from_rows(name, attributes, rows)


def random_relation(seed: int, num_rows: int = 12, num_attributes: int = 4, domain: int = 3):
    """Small random relation with a narrow value domain, so duplicates are common."""
    rng = random.Random(seed)
    attributes = [f"a{i}" for i in range(num_attributes)]
    rows = [
        tuple(str(rng.randrange(domain)) for _ in range(num_attributes)) for _ in range(num_rows)
    ]
    return make_relation(f"random_{seed}", attributes, rows)


def is_unique_brute_force(relation: Relation, indices: tuple[int, ...]) -> bool:
    """Whether no two rows agree on all of ``indices`` (pairwise comparison)."""
    projected = [tuple(record[i] for i in indices) for record in relation.records]
    return len(set(projected)) == len(projected)


def minimal_uccs_brute_force(relation: Relation) -> list[tuple[int, ...]]:
    """All minimal UCCs by exhaustive enumeration, sorted by size then indices."""
    found: list[tuple[int, ...]] = []
    for size in range(1, relation.num_attributes + 1):
        for indices in combinations(range(relation.num_attributes), size):
            if any(set(f).issubset(indices) for f in found):
                continue
            if is_unique_brute_force(relation, indices):
                found.append(indices)
    return found


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default logging setup after each test (CLI tests reconfigure it)."""
    yield
    configure_logging()


@pytest.fixture
def id_category_relation() -> Relation:
    """{id, category} with id unique and category repeating."""
    return make_relation("items", ["id", "category"], [("1", "A"), ("2", "A"), ("3", "B")])


@pytest.fixture
def composite_key_relation() -> Relation:
    """Only the combination of both attributes is unique."""
    return make_relation(
        "enrollment",
        ["student", "course"],
        [("s1", "c1"), ("s1", "c2"), ("s2", "c1"), ("s2", "c2")],
    )


@pytest.fixture
def constant_relation() -> Relation:
    """Every attribute constant except a row-number column."""
    return make_relation(
        "constant",
        ["color", "row_number", "size", "shape"],
        [("red", str(i), "L", "circle") for i in range(6)],
    )


@pytest.fixture
def people_relation() -> Relation:
    """Relation with a composite key of size 3 and a few unary keys."""
    return make_relation(
        "people",
        ["first", "last", "city", "email", "zip"],
        [
            ("Ann", "Lee", "Oslo", "ann@x.org", "0150"),
            ("Ann", "Lee", "Bergen", "ann.lee@x.org", "5003"),
            ("Ann", "Kim", "Oslo", "ann.kim@x.org", "0150"),
            ("Bob", "Lee", "Oslo", "bob@x.org", "0150"),
            ("Bob", "Kim", "Bergen", "bob.kim@x.org", "5003"),
            ("Ann", "Kim", "Bergen", "akim@x.org", "5003"),
        ],
    )
