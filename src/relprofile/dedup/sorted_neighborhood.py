"""Sorted neighborhood duplicate detection."""

from __future__ import annotations

from collections.abc import Sequence

from relprofile.core.logging import get_logger
from relprofile.dedup.comparator import RecordComparator
from relprofile.dedup.models import Duplicate
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


class SortedNeighborhood:
    """Blocks records by sorting and compares only records inside a sliding window.

    One pass is made per sorting key; each record is compared with the next
    ``window_size - 1`` records in that key's order. Pairs found in several
    passes are reported once.
    """

    def detect_duplicates(
        self,
        relation: Relation,
        sorting_keys: Sequence[int],
        window_size: int,
        comparator: RecordComparator,
    ) -> set[Duplicate]:
        if window_size < 2:
            raise ValueError(f"Window size must be at least 2, got {window_size}")
        for key in sorting_keys:
            relation.check_attribute(key)

        records = relation.records
        duplicates: set[Duplicate] = set()
        comparisons = 0

        for key in sorting_keys:
            order = sorted(range(len(records)), key=lambda row: records[row][key])
            for position, row in enumerate(order):
                for other in order[position + 1 : position + window_size]:
                    comparisons += 1
                    similarity = comparator.compare(records[row], records[other])
                    if comparator.is_duplicate(similarity):
                        duplicates.add(Duplicate(row, other, similarity, relation))

        logger.debug(
            "sorted_neighborhood_completed",
            relation=relation.name,
            passes=len(sorting_keys),
            comparisons=comparisons,
            duplicates=len(duplicates),
        )
        return duplicates
