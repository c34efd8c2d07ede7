"""Conversions between flat cell indices and ``(row, col)`` pairs."""

from __future__ import annotations

from typing import Tuple


RowCol = Tuple[int, int]


def to_index(row: int, col: int, size: int) -> int:
    """Return the flat index of ``(row, col)`` in a ``size`` x ``size`` grid."""

    return size * row + col


def to_row_col(index: int, size: int) -> RowCol:
    """Return the ``(row, col)`` pair encoded by ``index``."""

    return index // size, index % size


__all__ = ["RowCol", "to_index", "to_row_col"]
