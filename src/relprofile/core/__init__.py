"""Core module - configuration, logging, errors, and shared models."""

from relprofile.core.config import Settings, get_settings
from relprofile.core.errors import (
    AttributeIndexError,
    DiscoveryCancelledError,
    InputValidationError,
    InvalidRelationError,
    ProfilingError,
    RelationMismatchError,
    UnsupportedOperationError,
)
from relprofile.core.models.base import Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ProfilingError",
    "InputValidationError",
    "AttributeIndexError",
    "InvalidRelationError",
    "RelationMismatchError",
    "UnsupportedOperationError",
    "DiscoveryCancelledError",
    # Models
    "Result",
]
