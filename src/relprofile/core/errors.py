"""Exceptions raised by the profiling engines.

Input validity errors are programming errors on the caller's side and are
never recovered internally. Expected failures at the I/O boundary (missing
files, unreadable CSV) are reported through ``Result`` instead.
"""

from __future__ import annotations


class ProfilingError(Exception):
    """Base class for all profiling errors."""


class InputValidationError(ProfilingError, ValueError):
    """Input handed to a profiler violates its contract."""


class AttributeIndexError(InputValidationError, IndexError):
    """Attribute index is negative or outside the relation's columns."""

    def __init__(self, index: int, num_attributes: int | None = None):
        self.index = index
        self.num_attributes = num_attributes
        if num_attributes is None:
            message = f"Attribute index {index} is negative"
        else:
            message = (
                f"Attribute index {index} out of range for relation "
                f"with {num_attributes} attributes"
            )
        super().__init__(message)


class InvalidRelationError(InputValidationError):
    """Relation is malformed (ragged records, duplicate attribute names, ...)."""


class RelationMismatchError(InputValidationError):
    """Two position list indexes do not partition the same relation."""


class UnsupportedOperationError(ProfilingError, NotImplementedError):
    """Requested feature is not available (e.g. n-ary IND discovery)."""


class DiscoveryCancelledError(ProfilingError):
    """A level-wise discovery run was cancelled between two levels."""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"Discovery cancelled before level {level}")
