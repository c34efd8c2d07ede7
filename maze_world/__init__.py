"""Repeated A* maze solving under partial observability."""

__version__ = "0.1.0"
