"""CSV source."""

from relprofile.sources.csv.loader import CSVLoader

__all__ = ["CSVLoader"]
