"""Sorted attribute index sets with value semantics."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from functools import total_ordering
from typing import TYPE_CHECKING

from relprofile.core.errors import AttributeIndexError

if TYPE_CHECKING:
    from relprofile.sources.relation import Relation


@total_ordering
class AttributeList:
    """Immutable, sorted, duplicate-free list of attribute indices.

    Order is the sort order, never insertion order, so equal content means
    equal lists with equal hashes. Lists are ordered by size first and then
    lexicographically by index sequence, which is the order in which
    discovered combinations are reported.
    """

    __slots__ = ("_indices", "_hash")

    def __init__(self, *indices: int):
        normalized = tuple(sorted(set(indices)))
        if normalized and normalized[0] < 0:
            raise AttributeIndexError(normalized[0])
        self._indices: tuple[int, ...] = normalized
        self._hash = hash(normalized)

    @classmethod
    def of(cls, indices: Iterable[int]) -> AttributeList:
        return cls(*indices)

    @classmethod
    def _from_sorted(cls, indices: tuple[int, ...]) -> AttributeList:
        attribute_list = cls.__new__(cls)
        attribute_list._indices = indices
        attribute_list._hash = hash(indices)
        return attribute_list

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @property
    def size(self) -> int:
        return len(self._indices)

    def union(self, other: AttributeList) -> AttributeList:
        """Sorted merge of both lists without duplicates."""
        merged: list[int] = []
        for index in heapq.merge(self._indices, other._indices):
            if not merged or merged[-1] != index:
                merged.append(index)
        return AttributeList._from_sorted(tuple(merged))

    def without(self, index: int) -> AttributeList:
        """This list with ``index`` removed (unchanged if absent)."""
        return AttributeList._from_sorted(tuple(i for i in self._indices if i != index))

    def is_subset_of(self, other: AttributeList) -> bool:
        return set(self._indices).issubset(other._indices)

    def is_superset_of(self, other: AttributeList) -> bool:
        return other.is_subset_of(self)

    def shares_prefix_with(self, other: AttributeList) -> bool:
        """Whether both lists have the same size and differ only in the last index.

        This is the apriori join condition: two size-k lists sharing their
        first k-1 indices can be merged into one size-(k+1) candidate.
        """
        if self.size != other.size or self.size == 0:
            return False
        return self._indices[:-1] == other._indices[:-1]

    def validate_for(self, relation: Relation) -> None:
        """Raise AttributeIndexError if any index is not a column of ``relation``."""
        for index in self._indices:
            relation.check_attribute(index)

    def names(self, relation: Relation) -> list[str]:
        return [relation.attribute_name(i) for i in self._indices]

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __getitem__(self, position: int) -> int:
        return self._indices[position]

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeList):
            return NotImplemented
        return self._indices == other._indices

    def __lt__(self, other: AttributeList) -> bool:
        if not isinstance(other, AttributeList):
            return NotImplemented
        return (len(self._indices), self._indices) < (len(other._indices), other._indices)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"AttributeList{list(self._indices)}"

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self._indices) + "]"
