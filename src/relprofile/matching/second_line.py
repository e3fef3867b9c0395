"""Second-line schema matching: one-to-one attribute assignment."""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment

from relprofile.core.logging import get_logger
from relprofile.matching.models import CorrespondenceMatrix, SimilarityMatrix

logger = get_logger(__name__)


class SecondLineSchemaMatcher:
    """Turns a similarity matrix into a binary correspondence matrix.

    Solves the assignment problem (Hungarian method) on cost = 1 - similarity,
    which maximizes the total similarity of a one-to-one matching. For
    non-square matrices the surplus attributes stay unmatched.

    Args:
        min_similarity: Assigned pairs below this similarity are dropped.
    """

    def __init__(self, min_similarity: float = 0.0):
        self.min_similarity = min_similarity

    def match(self, similarities: SimilarityMatrix) -> CorrespondenceMatrix:
        sim = similarities.matrix
        correspondence = np.zeros(sim.shape, dtype=int)
        if sim.size == 0:
            return CorrespondenceMatrix(matrix=correspondence, similarities=similarities)

        rows, cols = linear_sum_assignment(1.0 - sim)
        for i, j in zip(rows, cols, strict=True):
            if sim[i, j] >= self.min_similarity:
                correspondence[i, j] = 1

        logger.debug(
            "correspondences_assigned",
            source=similarities.source.name,
            target=similarities.target.name,
            matches=int(correspondence.sum()),
        )
        return CorrespondenceMatrix(matrix=correspondence, similarities=similarities)
