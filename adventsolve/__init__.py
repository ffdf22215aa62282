"""Solvers for daily grid, graph and simulation puzzles, with a grid toolkit."""

__version__ = "0.1.0"
__all__ = ["__version__"]