"""Palabra - Spanish Bible reading aid with word-level English alignment."""

__version__ = "0.1.0"
