"""Schema matching between two relations.

Two stages:
1. First line: attribute-to-attribute similarity matrix from column values
2. Second line: one-to-one correspondences via optimal assignment
"""

from relprofile.matching.first_line import FirstLineSchemaMatcher
from relprofile.matching.models import Correspondence, CorrespondenceMatrix, SimilarityMatrix
from relprofile.matching.second_line import SecondLineSchemaMatcher

__all__ = [
    "FirstLineSchemaMatcher",
    "SecondLineSchemaMatcher",
    "SimilarityMatrix",
    "CorrespondenceMatrix",
    "Correspondence",
]
