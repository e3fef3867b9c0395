"""String similarity measures.

Every measure implements ``SimilarityMeasure.compare(a, b) -> [0, 1]`` on
strings or token sequences:
- Jaccard (set or bag semantics over n-gram tokens)
- Levenshtein and Damerau-Levenshtein (normalized edit distance)
"""

from relprofile.similarity.base import SimilarityMeasure
from relprofile.similarity.jaccard import Jaccard
from relprofile.similarity.levenshtein import Levenshtein, edit_distance
from relprofile.similarity.tokenizer import Tokenizer

__all__ = [
    "SimilarityMeasure",
    "Jaccard",
    "Levenshtein",
    "Tokenizer",
    "edit_distance",
]
