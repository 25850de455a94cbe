"""Freight and cargo matching with plain-text data files and an interactive menu."""

__version__ = "0.1.0"