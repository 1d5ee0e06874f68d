"""Recursion, backtracking and dynamic-programming solutions to classic problems."""

__version__ = "0.1.0"