"""Tests for minimal unique column combination discovery."""

import pytest
from conftest import (
    is_unique_brute_force,
    make_relation,
    minimal_uccs_brute_force,
    random_relation,
)

from relprofile.core.errors import DiscoveryCancelledError
from relprofile.profiling.structures import UCC, AttributeList
from relprofile.profiling.ucc import EventKind, UCCProfiler, discover_uccs


def _indices(uccs: list[UCC]) -> list[tuple[int, ...]]:
    return [ucc.attributes.indices for ucc in uccs]


class TestExamples:
    """Worked examples."""

    def test_id_is_the_only_ucc(self, id_category_relation):
        """Test {id} is reported and {category} / {id, category} are not."""
        uccs = discover_uccs(id_category_relation)
        assert _indices(uccs) == [(0,)]
        assert uccs[0].attribute_names == ["id"]
        assert uccs[0].relation is id_category_relation
        assert str(uccs[0]) == "items[id]"

    def test_row_number_only(self, constant_relation):
        """Test that only the row-number attribute is unique."""
        uccs = discover_uccs(constant_relation)
        assert [ucc.attribute_names for ucc in uccs] == [["row_number"]]

    def test_composite_key(self, composite_key_relation):
        """Test a single size-2 UCC with both attributes carried to level 2."""
        events = []
        uccs = discover_uccs(composite_key_relation, event_hook=events.append)

        assert _indices(uccs) == [(0, 1)]
        unary_non_uccs = [e.attributes for e in events if e.kind == EventKind.UNARY_NON_UCC]
        assert unary_non_uccs == [AttributeList(0), AttributeList(1)]
        assert [e.attributes for e in events if e.kind == EventKind.UCC] == [AttributeList(0, 1)]

    def test_size_three_key(self):
        """Test a key that needs three attributes."""
        rows = [(str(a), str(b), str(c)) for a in range(2) for b in range(2) for c in range(2)]
        relation = make_relation("cube", ["a", "b", "c"], rows)
        assert _indices(discover_uccs(relation)) == [(0, 1, 2)]

    def test_no_ucc_with_duplicate_rows(self):
        """Test that fully duplicated rows leave nothing unique."""
        relation = make_relation("dups", ["a", "b"], [("1", "x"), ("1", "x"), ("2", "y")])
        assert discover_uccs(relation) == []


class TestDegenerateInputs:
    """Tests for empty and trivial relations."""

    def test_zero_attributes(self):
        relation = make_relation("empty", [], [(), ()])
        assert discover_uccs(relation) == []

    def test_zero_rows(self):
        relation = make_relation("empty", ["a", "b"], [])
        assert discover_uccs(relation) == []

    def test_single_row_makes_every_attribute_unique(self):
        relation = make_relation("one", ["a", "b", "c"], [("x", "x", "x")])
        assert _indices(discover_uccs(relation)) == [(0,), (1,), (2,)]

    def test_none_values_equal_empty_string(self):
        relation = make_relation("nulls", ["a", "b"], [(None, "1"), ("", "2")])
        assert _indices(discover_uccs(relation)) == [(1,)]


class TestProperties:
    """Correctness properties checked against exhaustive enumeration."""

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_brute_force(self, seed):
        """Test soundness, completeness and minimality on random relations."""
        relation = random_relation(seed, num_rows=10, num_attributes=5, domain=3)
        assert _indices(discover_uccs(relation)) == minimal_uccs_brute_force(relation)

    @pytest.mark.parametrize("seed", range(10))
    def test_every_ucc_is_unique(self, seed):
        relation = random_relation(seed, num_rows=15, num_attributes=4, domain=4)
        for ucc in discover_uccs(relation):
            assert is_unique_brute_force(relation, ucc.attributes.indices)

    @pytest.mark.parametrize("seed", range(10))
    def test_result_is_an_antichain(self, seed):
        relation = random_relation(seed, num_rows=12, num_attributes=5, domain=3)
        uccs = discover_uccs(relation)
        for first in uccs:
            for second in uccs:
                if first is not second:
                    assert not first.attributes.is_subset_of(second.attributes)

    def test_people_relation(self, people_relation):
        uccs = discover_uccs(people_relation)
        assert _indices(uccs) == minimal_uccs_brute_force(people_relation)
        assert ["email"] in [ucc.attribute_names for ucc in uccs]

    def test_result_sorted_by_size_then_indices(self, people_relation):
        uccs = discover_uccs(people_relation)
        keys = [(ucc.size, ucc.attributes.indices) for ucc in uccs]
        assert keys == sorted(keys)

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, seed):
        relation = random_relation(seed, num_rows=12, num_attributes=5, domain=3)
        assert discover_uccs(relation) == discover_uccs(relation)

    @pytest.mark.parametrize("seed", range(10))
    def test_duplicate_row_only_removes_uccs(self, seed):
        """Test that appending an existing row can only remove UCCs."""
        relation = random_relation(seed, num_rows=8, num_attributes=4, domain=4)
        before = set(_indices(discover_uccs(relation)))
        appended = make_relation(
            relation.name,
            list(relation.attributes),
            list(relation.records) + [relation.records[0]],
        )
        after = set(_indices(discover_uccs(appended)))
        assert after <= before

    @pytest.mark.parametrize("seed", range(10))
    def test_removing_rows_keeps_uniqueness(self, seed):
        """Test that every UCC stays unique (or gets a unique subset) on fewer rows."""
        relation = random_relation(seed, num_rows=12, num_attributes=4, domain=3)
        before = _indices(discover_uccs(relation))
        reduced = make_relation(
            relation.name, list(relation.attributes), list(relation.records[:-3])
        )
        after = _indices(discover_uccs(reduced))
        for indices in before:
            assert any(set(smaller).issubset(indices) for smaller in after)


class TestSearch:
    """Tests for pruning, statistics, parallelism and cancellation."""

    def test_stats_recorded_per_level(self, composite_key_relation):
        profiler = UCCProfiler()
        profiler.profile(composite_key_relation)

        stats = profiler.last_stats
        assert stats is not None
        assert [lvl.level for lvl in stats.levels] == [1, 2]
        assert stats.levels[1].candidates_tested == 1
        assert stats.levels[1].uccs_found == 1

    def test_candidates_with_unique_subset_are_pruned(self):
        """Test that a candidate with a unique (k-1)-subset is never tested.

        (b, c) is unique, so (a, b, c) must be pruned even though it is
        generated from the non-unique frontier members (a, b) and (a, c).
        """
        relation = make_relation(
            "r",
            ["a", "b", "c"],
            [
                ("1", "1", "1"),
                ("1", "1", "2"),
                ("2", "2", "1"),
                ("2", "3", "1"),
            ],
        )
        events = []
        uccs = discover_uccs(relation, event_hook=events.append)

        assert _indices(uccs) == [(1, 2)]
        pruned = [e.attributes for e in events if e.kind == EventKind.CANDIDATE_PRUNED]
        assert pruned == [AttributeList(0, 1, 2)]
        tested = {
            e.attributes
            for e in events
            if e.kind in (EventKind.UCC, EventKind.NON_UCC, EventKind.NON_MINIMAL_UCC)
        }
        assert AttributeList(0, 1, 2) not in tested
        assert not any(e.kind == EventKind.NON_MINIMAL_UCC for e in events)

    @pytest.mark.parametrize("seed", range(5))
    def test_parallel_matches_sequential(self, seed):
        relation = random_relation(seed, num_rows=20, num_attributes=6, domain=3)
        assert discover_uccs(relation, max_workers=4) == discover_uccs(relation)

    def test_cancellation_between_levels(self, composite_key_relation):
        """Test that cancellation aborts the run instead of truncating it."""
        with pytest.raises(DiscoveryCancelledError) as exc_info:
            discover_uccs(composite_key_relation, should_cancel=lambda: True)
        assert exc_info.value.level == 2

    def test_cancellation_polled_once_per_level(self, id_category_relation):
        calls = []

        def should_cancel():
            calls.append(True)
            return False

        discover_uccs(id_category_relation, should_cancel=should_cancel)
        assert len(calls) == 1
