"""Data sources - relation snapshots and loaders."""

from relprofile.sources.csv import CSVLoader
from relprofile.sources.relation import Relation

__all__ = ["CSVLoader", "Relation"]
