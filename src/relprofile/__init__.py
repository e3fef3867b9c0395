"""relprofile - relational data profiling.

Discovers minimal unique column combinations (UCCs) and unary inclusion
dependencies (INDs) of tabular relations, with schema matching and duplicate
detection on top of a shared set of similarity measures.

Example:
    from relprofile import Relation, discover_uccs

    relation = Relation.from_rows("r", ["id", "category"], [(1, "A"), (2, "A"), (3, "B")])
    [str(ucc) for ucc in discover_uccs(relation)]  # ["r[id]"]
"""

__version__ = "0.1.0"

from relprofile.core.models.base import Result
from relprofile.profiling import (
    IND,
    UCC,
    AttributeList,
    PositionListIndex,
    discover_inds,
    discover_uccs,
)
from relprofile.sources.relation import Relation

__all__ = [
    "AttributeList",
    "IND",
    "PositionListIndex",
    "Relation",
    "Result",
    "UCC",
    "discover_inds",
    "discover_uccs",
    "__version__",
]
