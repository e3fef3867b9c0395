"""Shared models."""

from relprofile.core.models.base import Result

__all__ = ["Result"]
