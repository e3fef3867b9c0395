"""Duplicate detection.

- Sorted neighborhood blocking with a weighted record comparator
- Transitive closure of the detected pairs
"""

from relprofile.dedup.comparator import AttrSimWeight, RecordComparator, suggest_record_comparator
from relprofile.dedup.models import Duplicate
from relprofile.dedup.sorted_neighborhood import SortedNeighborhood
from relprofile.dedup.transitive_closure import transitive_closure

__all__ = [
    "AttrSimWeight",
    "RecordComparator",
    "suggest_record_comparator",
    "Duplicate",
    "SortedNeighborhood",
    "transitive_closure",
]
