"""Jaccard similarity with set or bag semantics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from relprofile.similarity.base import Comparable, SimilarityMeasure
from relprofile.similarity.tokenizer import Tokenizer


class Jaccard(SimilarityMeasure):
    """Token overlap similarity.

    Set semantics: |A ∩ B| / |A ∪ B|, at most 1.
    Bag semantics: Σ min(count_A, count_B) / (|A| + |B|), at most 1/2, because
    the multiset union keeps every occurrence from both sides.

    Strings are tokenized with ``tokenizer``; sequences are used as given.
    """

    def __init__(self, tokenizer: Tokenizer | None = None, bag_semantics: bool = False):
        self.tokenizer = tokenizer or Tokenizer()
        self.bag_semantics = bag_semantics

    def compare(self, first: Comparable, second: Comparable) -> float:
        tokens1 = self._tokens(first)
        tokens2 = self._tokens(second)
        if self.bag_semantics:
            return self._bag_similarity(tokens1, tokens2)
        return self._set_similarity(tokens1, tokens2)

    def _tokens(self, value: Comparable) -> Sequence[str]:
        if value is None or isinstance(value, str):
            return self.tokenizer.tokenize(value)
        return value

    @staticmethod
    def _set_similarity(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        set1, set2 = set(tokens1), set(tokens2)
        union = set1 | set2
        if not union:
            return 1.0
        return len(set1 & set2) / len(union)

    @staticmethod
    def _bag_similarity(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        total = len(tokens1) + len(tokens2)
        if total == 0:
            return 0.5
        overlap = sum((Counter(tokens1) & Counter(tokens2)).values())
        return overlap / total

    def __repr__(self) -> str:
        return f"Jaccard(tokenizer={self.tokenizer!r}, bag_semantics={self.bag_semantics})"
