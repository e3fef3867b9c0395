"""Levenshtein and Damerau-Levenshtein similarity."""

from __future__ import annotations

from collections.abc import Sequence

from relprofile.similarity.base import Comparable, SimilarityMeasure


def edit_distance(first: Sequence[str], second: Sequence[str], damerau: bool = False) -> int:
    """Edit distance between two sequences of characters or tokens.

    Counts insertions, deletions and substitutions; with ``damerau`` also
    transpositions of adjacent elements (optimal string alignment: no
    substring is edited more than once).
    """
    len1, len2 = len(first), len(second)
    if len1 == 0:
        return len2
    if len2 == 0:
        return len1

    before_previous: list[int] = []
    previous = list(range(len2 + 1))
    for i in range(1, len1 + 1):
        current = [i] + [0] * len2
        for j in range(1, len2 + 1):
            cost = 0 if first[i - 1] == second[j - 1] else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
            if (
                damerau
                and i > 1
                and j > 1
                and first[i - 1] == second[j - 2]
                and first[i - 2] == second[j - 1]
            ):
                current[j] = min(current[j], before_previous[j - 2] + 1)
        before_previous, previous = previous, current

    return previous[len2]


class Levenshtein(SimilarityMeasure):
    """Similarity = 1 - edit distance / length of the longer input.

    Strings are compared character by character, sequences token by token.
    """

    def __init__(self, damerau: bool = False):
        self.damerau = damerau

    def compare(self, first: Comparable, second: Comparable) -> float:
        if first is None or second is None:
            return 0.0
        longest = max(len(first), len(second))
        if longest == 0:
            return 1.0
        return 1.0 - edit_distance(first, second, self.damerau) / longest

    def __repr__(self) -> str:
        return f"Levenshtein(damerau={self.damerau})"
