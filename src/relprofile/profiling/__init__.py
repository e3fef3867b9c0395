"""Dependency profiling for relations.

This module discovers structural properties of relations:

1. Unique column combinations (UCCs):
   - Level-wise apriori search over position list indexes
   - Only minimal combinations are reported

2. Unary inclusion dependencies (INDs):
   - Hash-based value-set containment across columns and relations
"""

from relprofile.profiling.ind import INDProfiler, discover_inds
from relprofile.profiling.models import (
    INDProfileResult,
    INDReport,
    LevelReport,
    UCCProfileResult,
    UCCReport,
)
from relprofile.profiling.profiler import profile_inds, profile_uccs
from relprofile.profiling.structures import IND, UCC, AttributeList, PositionListIndex
from relprofile.profiling.ucc import (
    EventKind,
    ProfilingEvent,
    UCCProfiler,
    UCCProfilingStats,
    discover_uccs,
)

__all__ = [
    # Entry points
    "discover_uccs",
    "discover_inds",
    "profile_uccs",
    "profile_inds",
    # Profilers
    "UCCProfiler",
    "INDProfiler",
    "UCCProfilingStats",
    "EventKind",
    "ProfilingEvent",
    # Structures
    "AttributeList",
    "PositionListIndex",
    "UCC",
    "IND",
    # Report models
    "UCCReport",
    "INDReport",
    "LevelReport",
    "UCCProfileResult",
    "INDProfileResult",
]
