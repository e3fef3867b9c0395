"""First-line schema matching: instance-based attribute similarities."""

from __future__ import annotations

import numpy as np

from relprofile.core.logging import get_logger
from relprofile.matching.models import SimilarityMatrix
from relprofile.similarity import Jaccard, SimilarityMeasure
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


class FirstLineSchemaMatcher:
    """Scores every source/target attribute pair by the similarity of their values.

    Each column is treated as a token sequence of its values, so the default
    set-semantics Jaccard measure gives the overlap of the two value sets.
    """

    def __init__(self, measure: SimilarityMeasure | None = None):
        self.measure = measure or Jaccard()

    def match(self, source: Relation, target: Relation) -> SimilarityMatrix:
        matrix = np.zeros((source.num_attributes, target.num_attributes), dtype=float)
        for i, source_column in enumerate(source.columns):
            for j, target_column in enumerate(target.columns):
                matrix[i, j] = self.measure.compare(source_column, target_column)

        logger.debug(
            "similarity_matrix_computed",
            source=source.name,
            target=target.name,
            shape=list(matrix.shape),
        )
        return SimilarityMatrix(matrix=matrix, source=source, target=target)
