"""Schema matching result structures."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from relprofile.sources.relation import Relation


@dataclass(frozen=True, eq=False)
class SimilarityMatrix:
    """Attribute-to-attribute similarities; rows = source, columns = target."""

    matrix: np.ndarray
    source: Relation
    target: Relation

    def __post_init__(self) -> None:
        expected = (self.source.num_attributes, self.target.num_attributes)
        if self.matrix.shape != expected:
            raise ValueError(
                f"Similarity matrix has shape {self.matrix.shape}, expected {expected}"
            )

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape  # type: ignore[return-value]

    def similarity(self, source_attribute: int, target_attribute: int) -> float:
        return float(self.matrix[source_attribute, target_attribute])


@dataclass(frozen=True)
class Correspondence:
    """One matched attribute pair."""

    source_attribute: int
    target_attribute: int
    source_name: str
    target_name: str
    similarity: float


@dataclass(frozen=True, eq=False)
class CorrespondenceMatrix:
    """Binary one-to-one assignment between source and target attributes."""

    matrix: np.ndarray
    similarities: SimilarityMatrix

    @property
    def source(self) -> Relation:
        return self.similarities.source

    @property
    def target(self) -> Relation:
        return self.similarities.target

    def correspondences(self) -> list[Correspondence]:
        """Matched pairs in source attribute order."""
        rows, cols = np.nonzero(self.matrix)
        return [
            Correspondence(
                source_attribute=int(i),
                target_attribute=int(j),
                source_name=self.source.attributes[i],
                target_name=self.target.attributes[j],
                similarity=self.similarities.similarity(int(i), int(j)),
            )
            for i, j in sorted(zip(rows.tolist(), cols.tolist(), strict=True))
        ]
