"""Discovered dependency types."""

from __future__ import annotations

from dataclasses import dataclass

from relprofile.profiling.structures.attribute_list import AttributeList
from relprofile.sources.relation import Relation


@dataclass(frozen=True)
class UCC:
    """A minimal unique column combination of a relation."""

    relation: Relation
    attributes: AttributeList

    @property
    def size(self) -> int:
        return self.attributes.size

    @property
    def attribute_names(self) -> list[str]:
        return self.attributes.names(self.relation)

    def __str__(self) -> str:
        return f"{self.relation.name}[{', '.join(self.attribute_names)}]"


@dataclass(frozen=True)
class IND:
    """Unary inclusion dependency: dependent values ⊆ referenced values."""

    dependent_relation: Relation
    dependent_attribute: int
    referenced_relation: Relation
    referenced_attribute: int

    @property
    def dependent_name(self) -> str:
        return self.dependent_relation.attribute_name(self.dependent_attribute)

    @property
    def referenced_name(self) -> str:
        return self.referenced_relation.attribute_name(self.referenced_attribute)

    def __str__(self) -> str:
        return (
            f"{self.dependent_relation.name}[{self.dependent_name}] ⊆ "
            f"{self.referenced_relation.name}[{self.referenced_name}]"
        )
