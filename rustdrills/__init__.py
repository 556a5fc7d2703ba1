"""Worked programming drills and coloured terminal status messages."""

__version__ = "4.6.0"