"""Iteration status reports built from GitHub Projects boards."""

__version__ = "0.1.0"
