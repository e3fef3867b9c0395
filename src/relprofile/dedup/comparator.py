"""Weighted record comparison."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from relprofile.similarity import Jaccard, Levenshtein, SimilarityMeasure, Tokenizer
from relprofile.sources.relation import Relation


@dataclass(frozen=True)
class AttrSimWeight:
    """Similarity measure and weight used for one attribute."""

    attribute: int
    measure: SimilarityMeasure
    weight: float


class RecordComparator:
    """Weighted average of per-attribute similarities with a duplicate threshold."""

    def __init__(self, weights: Sequence[AttrSimWeight], threshold: float):
        if not weights:
            raise ValueError("RecordComparator needs at least one attribute weight")
        total = sum(w.weight for w in weights)
        if total <= 0:
            raise ValueError("Attribute weights must sum to a positive value")
        self.weights = list(weights)
        self.threshold = threshold
        self._total_weight = total

    def compare(self, record1: Sequence[str], record2: Sequence[str]) -> float:
        score = sum(
            w.weight * w.measure.compare(record1[w.attribute], record2[w.attribute])
            for w in self.weights
        )
        return score / self._total_weight

    def is_duplicate(self, similarity: float) -> bool:
        return similarity >= self.threshold


def suggest_record_comparator(relation: Relation, threshold: float = 0.5) -> RecordComparator:
    """Default comparator for a relation based on its attribute names.

    Names and titles are compared with Damerau-Levenshtein, descriptions with
    bigram Jaccard, everything else with plain Levenshtein.
    """
    weights: list[AttrSimWeight] = []
    for index, name in enumerate(relation.attributes):
        lowered = name.lower()
        if lowered in ("name", "title"):
            weights.append(AttrSimWeight(index, Levenshtein(damerau=True), 0.3))
        elif lowered == "description":
            weights.append(AttrSimWeight(index, Jaccard(Tokenizer(size=2)), 0.2))
        else:
            weights.append(AttrSimWeight(index, Levenshtein(), 0.1))
    return RecordComparator(weights, threshold)
