"""Highlight calendar dates in notes and file names by how old they are."""

__version__ = "1.0.0"
