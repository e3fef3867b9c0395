"""Profiling entry points that produce serializable reports."""

from __future__ import annotations

from collections.abc import Sequence

from relprofile.core.logging import end_profiling_metrics, get_logger, start_profiling_metrics
from relprofile.profiling.ind import INDProfiler
from relprofile.profiling.models import (
    INDProfileResult,
    LevelReport,
    UCCProfileResult,
    UCCReport,
)
from relprofile.profiling.ucc import EventHook, UCCProfiler
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


def profile_uccs(
    relation: Relation,
    max_workers: int | None = None,
    event_hook: EventHook | None = None,
) -> UCCProfileResult:
    """Discover the minimal UCCs of a relation and summarize the search.

    Args:
        relation: Relation to profile
        max_workers: Threads per level (None/1 = sequential)
        event_hook: Optional observer for classification events

    Returns:
        UCCProfileResult with the sorted UCCs and per-level statistics
    """
    profiler = UCCProfiler(max_workers=max_workers, event_hook=event_hook)
    start_profiling_metrics(run_name="ucc", relation=relation.name)
    try:
        uccs = profiler.profile(relation)
    finally:
        metrics = end_profiling_metrics()
        if metrics:
            logger.info(
                "ucc_profiling_metrics",
                slowest_levels=metrics.get_slowest_levels(),
                **metrics.to_dict(),
            )

    stats = profiler.last_stats
    levels = (
        [
            LevelReport(
                level=lvl.level,
                frontier_size=lvl.frontier_size,
                candidates_generated=lvl.candidates_generated,
                candidates_pruned=lvl.candidates_pruned,
                candidates_tested=lvl.candidates_tested,
                uccs_found=lvl.uccs_found,
            )
            for lvl in stats.levels
        ]
        if stats
        else []
    )

    return UCCProfileResult(
        relation=relation.name,
        num_rows=relation.num_rows,
        num_attributes=relation.num_attributes,
        uccs=[UCCReport.from_ucc(ucc) for ucc in uccs],
        levels=levels,
        duration_seconds=stats.duration_seconds if stats else 0.0,
    )


def profile_inds(
    relations: Sequence[Relation],
    discover_nary: bool = False,
    strip_quotes: bool = True,
) -> INDProfileResult:
    """Discover unary INDs across relations and wrap them in a report."""
    inds = INDProfiler(strip_quotes=strip_quotes).profile(relations, discover_nary=discover_nary)
    return INDProfileResult.from_inds([r.name for r in relations], inds)
