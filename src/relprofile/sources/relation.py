"""In-memory relation snapshot consumed by the profilers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cached_property

from relprofile.core.errors import AttributeIndexError, InvalidRelationError


def _normalize(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, eq=False)
class Relation:
    """Immutable, named table of string values.

    Records are stored row-major; ``columns`` is the derived column-major view.
    Missing values (``None``) are normalized to the empty string so that value
    equality is plain string equality. Relations compare by identity: two
    relations with equal content are still different profiling targets.
    """

    name: str
    attributes: tuple[str, ...]
    records: tuple[tuple[str, ...], ...] = field(repr=False)

    def __post_init__(self) -> None:
        attributes = tuple(self.attributes)
        if len(set(attributes)) != len(attributes):
            raise InvalidRelationError(f"Relation '{self.name}' has duplicate attribute names")

        width = len(attributes)
        records: list[tuple[str, ...]] = []
        for row_index, record in enumerate(self.records):
            row = tuple(_normalize(value) for value in record)
            if len(row) != width:
                raise InvalidRelationError(
                    f"Record {row_index} of relation '{self.name}' has {len(row)} values, "
                    f"expected {width}"
                )
            records.append(row)

        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "records", tuple(records))

    @classmethod
    def from_rows(
        cls,
        name: str,
        attributes: Sequence[str],
        rows: Iterable[Sequence[object]],
    ) -> Relation:
        """Build a relation from any iterable of row sequences."""
        return cls(name=name, attributes=tuple(attributes), records=tuple(tuple(r) for r in rows))

    @cached_property
    def columns(self) -> tuple[tuple[str, ...], ...]:
        """Column-major view of the records."""
        if not self.records:
            return tuple(() for _ in self.attributes)
        return tuple(zip(*self.records, strict=True))

    @property
    def num_rows(self) -> int:
        return len(self.records)

    @property
    def num_attributes(self) -> int:
        return len(self.attributes)

    def check_attribute(self, index: int) -> None:
        """Raise AttributeIndexError unless ``index`` names a column."""
        if index < 0:
            raise AttributeIndexError(index)
        if index >= self.num_attributes:
            raise AttributeIndexError(index, self.num_attributes)

    def column(self, index: int) -> tuple[str, ...]:
        """Values of one column, in row order."""
        self.check_attribute(index)
        return self.columns[index]

    def attribute_name(self, index: int) -> str:
        self.check_attribute(index)
        return self.attributes[index]

    def __repr__(self) -> str:
        return (
            f"Relation(name={self.name!r}, attributes={list(self.attributes)!r}, "
            f"rows={self.num_rows})"
        )
