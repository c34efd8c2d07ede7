"""Random maze generation."""

from .maze_generator import generate_maze, generate_mazes

__all__ = ["generate_maze", "generate_mazes"]
