"""Minimal unique column combination discovery.

Level-wise (apriori) search over position list indexes:

1. Level 1 builds one PLI per attribute from the raw column. Unique PLIs are
   UCCs, the others form the non-unique frontier.
2. Level k joins every pair of frontier PLIs that share their first k-2
   attributes into a size-k candidate, prunes candidates that have a
   (k-1)-subset outside the frontier, and refines the surviving candidates by
   intersecting the two parent PLIs.
3. Unique candidates without a known UCC subset are new UCCs, non-unique ones
   form the next frontier. The search stops when the frontier is empty.

Levels are strictly sequential. Within a level the candidate refinements are
independent and may run on a thread pool; their results are merged in
candidate order before the next level is generated.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum

from relprofile.core.errors import DiscoveryCancelledError
from relprofile.core.logging import LevelMetrics, get_logger, log_context, record_level_metrics
from relprofile.profiling.structures import UCC, AttributeList, PositionListIndex
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


class EventKind(str, Enum):
    """Classification events emitted while searching."""

    UNARY_UCC = "unary_ucc"
    UNARY_NON_UCC = "unary_non_ucc"
    CANDIDATE_GENERATED = "candidate_generated"
    CANDIDATE_PRUNED = "candidate_pruned"
    UCC = "ucc"
    NON_MINIMAL_UCC = "non_minimal_ucc"
    NON_UCC = "non_ucc"
    LEVEL_COMPLETED = "level_completed"


@dataclass(frozen=True)
class ProfilingEvent:
    """A single observation from a discovery run."""

    kind: EventKind
    level: int
    attributes: AttributeList | None = None


EventHook = Callable[[ProfilingEvent], None]


@dataclass
class UCCProfilingStats:
    """Per-run counters, available as ``UCCProfiler.last_stats``."""

    relation: str
    levels: list[LevelMetrics] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def candidates_generated(self) -> int:
        return sum(lvl.candidates_generated for lvl in self.levels)

    @property
    def candidates_pruned(self) -> int:
        return sum(lvl.candidates_pruned for lvl in self.levels)

    @property
    def candidates_tested(self) -> int:
        return sum(lvl.candidates_tested for lvl in self.levels)


@dataclass(frozen=True)
class _Candidate:
    attributes: AttributeList
    left: PositionListIndex
    right: PositionListIndex

    def refine(self) -> PositionListIndex:
        return self.left.intersect(self.right)


class UCCProfiler:
    """Discovers all minimal unique column combinations of a relation.

    Args:
        max_workers: Threads used to refine the candidates of one level.
            ``None`` or ``1`` runs sequentially.
        event_hook: Called with a ProfilingEvent for every classification.
        should_cancel: Polled between levels; returning True aborts the run
            with DiscoveryCancelledError.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        event_hook: EventHook | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ):
        self.max_workers = max_workers
        self.event_hook = event_hook
        self.should_cancel = should_cancel
        self.last_stats: UCCProfilingStats | None = None

    def profile(self, relation: Relation) -> list[UCC]:
        """Return the minimal UCCs of ``relation``, sorted by size then indices."""
        start_time = time.time()
        stats = UCCProfilingStats(relation=relation.name)
        self.last_stats = stats

        with log_context(relation=relation.name):
            if relation.num_attributes == 0 or relation.num_rows == 0:
                logger.warning(
                    "ucc_degenerate_relation",
                    rows=relation.num_rows,
                    attributes=relation.num_attributes,
                )
                return []

            uniques, frontier = self._profile_unary(relation, stats)

            level = 2
            while frontier:
                if self.should_cancel is not None and self.should_cancel():
                    logger.info("ucc_discovery_cancelled", level=level)
                    raise DiscoveryCancelledError(level)
                frontier = self._profile_level(level, frontier, uniques, stats)
                level += 1

            stats.duration_seconds = time.time() - start_time
            logger.debug(
                "ucc_discovery_completed",
                uccs=len(uniques),
                levels=len(stats.levels),
                candidates_tested=stats.candidates_tested,
                seconds=round(stats.duration_seconds, 4),
            )

        return [UCC(relation, attributes) for attributes in sorted(uniques)]

    def _profile_unary(
        self,
        relation: Relation,
        stats: UCCProfilingStats,
    ) -> tuple[list[AttributeList], list[PositionListIndex]]:
        level_start = time.time()
        metrics = LevelMetrics(level=1, frontier_size=relation.num_attributes)
        uniques: list[AttributeList] = []
        frontier: list[PositionListIndex] = []

        for attribute in range(relation.num_attributes):
            attributes = AttributeList(attribute)
            pli = PositionListIndex.from_values(attributes, relation.column(attribute), relation)
            metrics.candidates_tested += 1
            if pli.is_unique():
                uniques.append(attributes)
                metrics.uccs_found += 1
                self._emit(EventKind.UNARY_UCC, 1, attributes)
            else:
                frontier.append(pli)
                self._emit(EventKind.UNARY_NON_UCC, 1, attributes)

        self._finish_level(metrics, level_start, stats)
        return uniques, frontier

    def _profile_level(
        self,
        level: int,
        frontier: list[PositionListIndex],
        uniques: list[AttributeList],
        stats: UCCProfilingStats,
    ) -> list[PositionListIndex]:
        level_start = time.time()
        metrics = LevelMetrics(level=level, frontier_size=len(frontier))

        candidates = self._generate_candidates(level, frontier, metrics)
        refined = self._refine(candidates)

        next_frontier: list[PositionListIndex] = []
        for candidate, pli in zip(candidates, refined, strict=True):
            metrics.candidates_tested += 1
            if not pli.is_unique():
                next_frontier.append(pli)
                self._emit(EventKind.NON_UCC, level, candidate.attributes)
            elif self._is_minimal(candidate.attributes, uniques):
                uniques.append(candidate.attributes)
                metrics.uccs_found += 1
                self._emit(EventKind.UCC, level, candidate.attributes)
            else:
                metrics.non_minimal += 1
                self._emit(EventKind.NON_MINIMAL_UCC, level, candidate.attributes)

        self._finish_level(metrics, level_start, stats)
        return next_frontier

    def _generate_candidates(
        self,
        level: int,
        frontier: list[PositionListIndex],
        metrics: LevelMetrics,
    ) -> list[_Candidate]:
        """Apriori join of frontier PLIs sharing a prefix, then subset pruning.

        Candidates are returned sorted by attribute list so enumeration order
        does not depend on hashing.
        """
        ordered = sorted(frontier, key=lambda pli: pli.attributes)
        known_non_unique = {pli.attributes for pli in ordered}

        by_prefix: dict[tuple[int, ...], list[PositionListIndex]] = {}
        for pli in ordered:
            by_prefix.setdefault(pli.attributes.indices[:-1], []).append(pli)

        candidates: dict[AttributeList, _Candidate] = {}
        for block in by_prefix.values():
            for i, left in enumerate(block):
                for right in block[i + 1 :]:
                    attributes = left.attributes.union(right.attributes)
                    if attributes in candidates:
                        continue
                    metrics.candidates_generated += 1
                    if self._has_unknown_subset(attributes, known_non_unique):
                        metrics.candidates_pruned += 1
                        self._emit(EventKind.CANDIDATE_PRUNED, level, attributes)
                        continue
                    candidates[attributes] = _Candidate(attributes, left, right)
                    self._emit(EventKind.CANDIDATE_GENERATED, level, attributes)

        return [candidates[attributes] for attributes in sorted(candidates)]

    @staticmethod
    def _has_unknown_subset(
        candidate: AttributeList,
        known_non_unique: set[AttributeList],
    ) -> bool:
        # A (k-1)-subset missing from the frontier is unique or contains a UCC,
        # so the candidate cannot be minimal.
        return any(candidate.without(index) not in known_non_unique for index in candidate)

    @staticmethod
    def _is_minimal(candidate: AttributeList, uniques: Iterable[AttributeList]) -> bool:
        return not any(unique.is_subset_of(candidate) for unique in uniques)

    def _refine(self, candidates: list[_Candidate]) -> list[PositionListIndex]:
        if not self.max_workers or self.max_workers <= 1 or len(candidates) < 2:
            return [candidate.refine() for candidate in candidates]
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(_Candidate.refine, candidates))

    def _finish_level(
        self,
        metrics: LevelMetrics,
        level_start: float,
        stats: UCCProfilingStats,
    ) -> None:
        metrics.seconds = time.time() - level_start
        stats.levels.append(metrics)
        record_level_metrics(metrics)
        self._emit(EventKind.LEVEL_COMPLETED, metrics.level)
        logger.debug("ucc_level_completed", **metrics.to_dict())

    def _emit(
        self,
        kind: EventKind,
        level: int,
        attributes: AttributeList | None = None,
    ) -> None:
        if self.event_hook is not None:
            self.event_hook(ProfilingEvent(kind=kind, level=level, attributes=attributes))


def discover_uccs(
    relation: Relation,
    max_workers: int | None = None,
    event_hook: EventHook | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> list[UCC]:
    """Discover all minimal UCCs of ``relation``.

    Convenience wrapper around :class:`UCCProfiler`.
    """
    profiler = UCCProfiler(
        max_workers=max_workers,
        event_hook=event_hook,
        should_cancel=should_cancel,
    )
    return profiler.profile(relation)
