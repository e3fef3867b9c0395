"""Unary inclusion dependency discovery.

Hash-based containment check: every column is reduced to its set of
normalized values, and A ⊆ B is reported for every ordered pair of distinct
columns (within or across relations) whose value sets are contained.
"""

from __future__ import annotations

from collections.abc import Sequence

from relprofile.core.errors import UnsupportedOperationError
from relprofile.core.logging import get_logger
from relprofile.profiling.structures import IND
from relprofile.sources.relation import Relation

logger = get_logger(__name__)


def normalize_value(value: str | None, strip_quotes: bool = True) -> str:
    """Trim whitespace and strip one leading and one trailing double quote."""
    if value is None:
        return ""
    value = value.strip()
    if strip_quotes:
        if value.startswith('"'):
            value = value[1:]
        if value.endswith('"'):
            value = value[:-1]
    return value


class INDProfiler:
    """Discovers unary inclusion dependencies between relation columns."""

    def __init__(self, strip_quotes: bool = True):
        self.strip_quotes = strip_quotes

    def profile(self, relations: Sequence[Relation], discover_nary: bool = False) -> list[IND]:
        """Discover all non-trivial unary INDs among ``relations``.

        Args:
            relations: Relations to profile
            discover_nary: Request n-ary INDs (not supported)

        Returns:
            INDs ordered by dependent column, then referenced column, following
            the order of ``relations`` and their attributes

        Raises:
            UnsupportedOperationError: if ``discover_nary`` is set
        """
        if discover_nary:
            raise UnsupportedOperationError("N-ary IND discovery is not supported")

        columns = [
            (relation, index, self._value_set(column))
            for relation in relations
            for index, column in enumerate(relation.columns)
        ]

        inds: list[IND] = []
        for dep_relation, dep_index, dep_values in columns:
            for ref_relation, ref_index, ref_values in columns:
                if dep_relation is ref_relation and dep_index == ref_index:
                    continue
                if dep_values <= ref_values:
                    inds.append(IND(dep_relation, dep_index, ref_relation, ref_index))

        logger.debug(
            "ind_discovery_completed",
            relations=len(relations),
            columns=len(columns),
            inds=len(inds),
        )
        return inds

    def _value_set(self, column: Sequence[str]) -> frozenset[str]:
        return frozenset(normalize_value(value, self.strip_quotes) for value in column)


def discover_inds(
    relations: Sequence[Relation],
    discover_nary: bool = False,
    strip_quotes: bool = True,
) -> list[IND]:
    """Discover unary INDs. Convenience wrapper around :class:`INDProfiler`."""
    return INDProfiler(strip_quotes=strip_quotes).profile(relations, discover_nary=discover_nary)
