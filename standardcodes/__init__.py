"""Sorting and searching algorithms (lists and graphs) with a timestamped step trace."""

__version__ = "0.1.0"