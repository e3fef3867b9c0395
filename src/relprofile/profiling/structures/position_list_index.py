"""Position list indexes (stripped partitions).

A position list index (PLI) is the partition of a relation's row indices into
equivalence classes of rows that agree on every attribute of an attribute
combination. Only classes with at least two rows ("clusters") are stored:
rows with a unique value are implicit singletons. The inverted index maps
every row to its cluster id, or to ``SINGLETON`` for implicit singletons.

Intersecting PLI(A) with PLI(B) yields PLI(A ∪ B) without touching the raw
values: two rows agree on A ∪ B iff they share a cluster in PLI(A) and a
cluster in PLI(B).
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING

from relprofile.core.errors import RelationMismatchError
from relprofile.profiling.structures.attribute_list import AttributeList

if TYPE_CHECKING:
    from relprofile.sources.relation import Relation

SINGLETON = -1

Cluster = tuple[int, ...]


class PositionListIndex:
    """Stripped partition of row indices induced by an attribute combination."""

    __slots__ = ("attributes", "clusters", "inverted", "relation")

    def __init__(
        self,
        attributes: AttributeList,
        clusters: Sequence[Sequence[int]],
        relation_length: int,
        relation: Relation | None = None,
    ):
        self.attributes = attributes
        self.relation = relation
        self.clusters: tuple[Cluster, ...] = tuple(
            tuple(cluster) for cluster in clusters if len(cluster) > 1
        )
        inverted = [SINGLETON] * relation_length
        for cluster_id, cluster in enumerate(self.clusters):
            for row in cluster:
                inverted[row] = cluster_id
        self.inverted: tuple[int, ...] = tuple(inverted)

    @classmethod
    def from_values(
        cls,
        attributes: AttributeList,
        values: Sequence[Hashable],
        relation: Relation | None = None,
    ) -> PositionListIndex:
        """Group row indices by value equality. O(n) with hashing.

        ``relation`` records where the values come from, so that PLIs of
        different relations refuse to intersect.
        """
        groups: dict[Hashable, list[int]] = {}
        for row, value in enumerate(values):
            groups.setdefault(value, []).append(row)
        return cls(attributes, list(groups.values()), len(values), relation)

    @classmethod
    def from_relation(cls, relation: Relation, attributes: AttributeList) -> PositionListIndex:
        """Build the PLI of ``attributes`` directly from the relation's raw values."""
        attributes.validate_for(relation)
        if attributes.size == 1:
            return cls.from_values(attributes, relation.column(attributes[0]), relation)
        projected = [tuple(record[i] for i in attributes) for record in relation.records]
        return cls.from_values(attributes, projected, relation)

    def is_unique(self) -> bool:
        """Whether no two rows agree on every attribute of the combination."""
        return not self.clusters

    def relation_length(self) -> int:
        return len(self.inverted)

    @property
    def cluster_count(self) -> int:
        return len(self.clusters)

    @property
    def key_error(self) -> int:
        """Number of rows to remove before the combination becomes unique."""
        return sum(len(cluster) - 1 for cluster in self.clusters)

    def intersect(self, other: PositionListIndex) -> PositionListIndex:
        """Refine this partition by ``other``.

        Each cluster of ``self`` is split by the cluster ids its rows have in
        ``other``; rows that are singletons in ``other`` are singletons in the
        result. Runs in O(rows covered by self's clusters).

        Raises:
            RelationMismatchError: the PLIs belong to different relations or
                cover a different number of rows
        """
        if (
            self.relation is not None
            and other.relation is not None
            and self.relation is not other.relation
        ):
            raise RelationMismatchError(
                "Cannot intersect position list indexes of relations "
                f"'{self.relation.name}' and '{other.relation.name}'"
            )
        if self.relation_length() != other.relation_length():
            raise RelationMismatchError(
                f"Cannot intersect position list indexes over {self.relation_length()} "
                f"and {other.relation_length()} rows"
            )

        other_inverted = other.inverted
        refined: list[list[int]] = []
        for cluster in self.clusters:
            sub_groups: dict[int, list[int]] = {}
            for row in cluster:
                other_id = other_inverted[row]
                if other_id != SINGLETON:
                    sub_groups.setdefault(other_id, []).append(row)
            refined.extend(group for group in sub_groups.values() if len(group) > 1)

        return PositionListIndex(
            self.attributes.union(other.attributes),
            refined,
            self.relation_length(),
            self.relation if self.relation is not None else other.relation,
        )

    def partition(self) -> frozenset[frozenset[int]]:
        """Order-independent view of the clusters, for comparing partitions."""
        return frozenset(frozenset(cluster) for cluster in self.clusters)

    def __repr__(self) -> str:
        return (
            f"PositionListIndex(attributes={self.attributes}, "
            f"clusters={self.cluster_count}, rows={self.relation_length()})"
        )
