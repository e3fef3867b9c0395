"""Duplicate detection result types."""

from __future__ import annotations

from dataclasses import dataclass, field

from relprofile.sources.relation import Relation


@dataclass(frozen=True)
class Duplicate:
    """Two records of a relation that describe the same entity.

    The pair is unordered: indices are normalized so ``index1 < index2``.
    Equality and hashing consider only the relation and the two indices.
    """

    index1: int
    index2: int
    similarity: float = field(compare=False)
    relation: Relation = field(repr=False)
    inferred: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.index1 == self.index2:
            raise ValueError(f"A record cannot be a duplicate of itself ({self.index1})")
        if self.index1 > self.index2:
            first, second = self.index2, self.index1
            object.__setattr__(self, "index1", first)
            object.__setattr__(self, "index2", second)

    @property
    def pair(self) -> tuple[int, int]:
        return (self.index1, self.index2)
