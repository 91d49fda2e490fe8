"""Puzzle workspace: grid helpers, day numbers, daily solutions, a runner and benchmark tooling."""

__version__ = "0.12.0"