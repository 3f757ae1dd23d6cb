"""Compile, test and watch a series of small programming exercises, with worked solutions."""

__version__ = "0.1.0"

__all__ = ["__version__"]