"""Acronym lookups for wiki parser functions."""

__version__ = "0.1.0"
