"""Repeated Forward, Backward and Adaptive A*."""

from .result import SolveResult
from .solver import Algorithm, MazeSolver

__all__ = ["Algorithm", "MazeSolver", "SolveResult"]
