"""Structured logging infrastructure.

This module provides structlog-based logging that works for:
- Local CLI development (rich console output)
- Scripted/batch usage (JSON structured logs)

Usage:
    from relprofile.core.logging import get_logger, configure_logging

    # Configure at startup
    configure_logging(log_level="INFO", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("ucc_level_completed", level=2, candidates=12)

    # Use context managers for automatic context propagation
    with log_context(relation="customers"):
        logger.info("profiling_started", rows=1000)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

# Context variables for correlation
_run_context: ContextVar[dict[str, Any] | None] = ContextVar("run_context", default=None)


@dataclass
class LevelMetrics:
    """Counters for a single level of a level-wise search."""

    level: int
    frontier_size: int = 0
    candidates_generated: int = 0
    candidates_pruned: int = 0
    candidates_tested: int = 0
    uccs_found: int = 0
    non_minimal: int = 0
    seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "level": self.level,
            "frontier_size": self.frontier_size,
            "candidates_generated": self.candidates_generated,
            "candidates_pruned": self.candidates_pruned,
            "candidates_tested": self.candidates_tested,
            "uccs_found": self.uccs_found,
            "non_minimal": self.non_minimal,
            "seconds": self.seconds,
        }


@dataclass
class ProfilingMetrics:
    """Metrics collected during one profiling run."""

    run_name: str
    relation: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    levels: list[LevelMetrics] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return (datetime.now(UTC) - self.start_time).total_seconds()

    def add_level(self, metrics: LevelMetrics) -> None:
        """Add level metrics."""
        self.levels.append(metrics)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "run_name": self.run_name,
            "relation": self.relation,
            "duration_seconds": self.duration_seconds,
            "level_count": len(self.levels),
            "total_candidates_tested": sum(lvl.candidates_tested for lvl in self.levels),
            "total_uccs_found": sum(lvl.uccs_found for lvl in self.levels),
            "levels": [lvl.to_dict() for lvl in self.levels],
        }

    def get_slowest_levels(self, n: int = 3) -> list[tuple[int, float]]:
        """Get the N slowest levels."""
        sorted_levels = sorted(self.levels, key=lambda lvl: lvl.seconds, reverse=True)
        return [(lvl.level, lvl.seconds) for lvl in sorted_levels[:n]]


# Metrics storage (per-run)
_current_metrics: ContextVar[ProfilingMetrics | None] = ContextVar(
    "current_metrics", default=None
)


def start_profiling_metrics(run_name: str, relation: str) -> ProfilingMetrics:
    """Start collecting metrics for a profiling run."""
    metrics = ProfilingMetrics(run_name=run_name, relation=relation)
    _current_metrics.set(metrics)
    return metrics


def get_profiling_metrics() -> ProfilingMetrics | None:
    """Get current profiling metrics."""
    return _current_metrics.get()


def end_profiling_metrics() -> ProfilingMetrics | None:
    """End profiling metrics collection."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.end_time = datetime.now(UTC)
        _current_metrics.set(None)
    return metrics


def _add_run_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add run context to log events."""
    context = _run_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def _add_metrics_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add current metrics context."""
    metrics = _current_metrics.get()
    if metrics:
        event_dict["_run"] = metrics.run_name
    return event_dict


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    """Logger factory writing to whatever ``sys.stderr`` is when the logger is created."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    log_level: str = "WARNING",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" for development, "json" for scripting)
        show_timestamps: Whether to show timestamps in console mode
        color: Whether to use colors in console mode
    """
    # Shared processors for all formats
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_run_context,
        _add_metrics_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )

    # Also configure stdlib logging for libraries
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


class LogContext:
    """Context manager for adding context to logs within a scope."""

    def __init__(self, **context: Any):
        self.context = context
        self.token: Any = None

    def __enter__(self) -> LogContext:
        current = _run_context.get() or {}
        new_context = {**current, **self.context}
        self.token = _run_context.set(new_context)
        return self

    def __exit__(self, *args: Any) -> None:
        if self.token:
            _run_context.reset(self.token)


def log_context(**context: Any) -> LogContext:
    """Create a context manager for scoped logging context.

    Usage:
        with log_context(relation="orders"):
            logger.info("processing")  # Will include relation
    """
    return LogContext(**context)


def record_level_metrics(metrics: LevelMetrics) -> None:
    """Record a finished level in the current profiling metrics."""
    current = _current_metrics.get()
    if current:
        current.add_level(metrics)


# Initialize with default configuration
configure_logging()
