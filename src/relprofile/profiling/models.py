"""Profiling report models.

Serializable views of discovery results for CLI and JSON output. The
discovery engines themselves work with the structures in
``relprofile.profiling.structures``.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from relprofile.profiling.structures import IND, UCC


class UCCReport(BaseModel):
    """A discovered unique column combination."""

    relation: str
    attribute_indices: list[int]
    attribute_names: list[str]

    @property
    def size(self) -> int:
        return len(self.attribute_indices)

    @classmethod
    def from_ucc(cls, ucc: UCC) -> UCCReport:
        return cls(
            relation=ucc.relation.name,
            attribute_indices=list(ucc.attributes),
            attribute_names=ucc.attribute_names,
        )


class INDReport(BaseModel):
    """A discovered unary inclusion dependency."""

    dependent_relation: str
    dependent_attribute: str
    referenced_relation: str
    referenced_attribute: str

    @classmethod
    def from_ind(cls, ind: IND) -> INDReport:
        return cls(
            dependent_relation=ind.dependent_relation.name,
            dependent_attribute=ind.dependent_name,
            referenced_relation=ind.referenced_relation.name,
            referenced_attribute=ind.referenced_name,
        )


class LevelReport(BaseModel):
    """Search statistics for one level."""

    level: int
    frontier_size: int
    candidates_generated: int
    candidates_pruned: int
    candidates_tested: int
    uccs_found: int


class UCCProfileResult(BaseModel):
    """Result of UCC discovery on one relation."""

    relation: str
    num_rows: int
    num_attributes: int
    uccs: list[UCCReport] = Field(default_factory=list)
    levels: list[LevelReport] = Field(default_factory=list)
    duration_seconds: float = 0.0


class INDProfileResult(BaseModel):
    """Result of IND discovery across relations."""

    relations: list[str]
    inds: list[INDReport] = Field(default_factory=list)

    @classmethod
    def from_inds(cls, relation_names: Sequence[str], inds: Sequence[IND]) -> INDProfileResult:
        return cls(relations=list(relation_names), inds=[INDReport.from_ind(i) for i in inds])
