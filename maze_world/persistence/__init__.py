"""Maze files, result persistence and replay."""
