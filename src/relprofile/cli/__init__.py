"""Command line interface for relprofile."""

from relprofile.cli.main import app, main

__all__ = ["app", "main"]
