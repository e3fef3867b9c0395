"""Common interface for similarity measures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

Comparable = str | Sequence[str] | None


class SimilarityMeasure(ABC):
    """A normalized similarity between two strings or two token sequences.

    ``compare`` returns a score in [0, 1]; 1 means identical. Implementations
    accept either plain strings or pre-tokenized sequences, so one instance
    serves both attribute values and whole columns.
    """

    @abstractmethod
    def compare(self, first: Comparable, second: Comparable) -> float:
        """Similarity of ``first`` and ``second`` in [0, 1]."""
