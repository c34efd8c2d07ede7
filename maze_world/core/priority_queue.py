"""Open list for A* with decrease-key by removal.

Entries follow the ``heapq`` recipe for removable priority queues: each entry
is a mutable list ``[f, secondary, coordinate, seq, node]`` and removing a
coordinate blanks the node slot in place. Blank entries are discarded lazily
whenever they reach the top of the heap.
"""

from __future__ import annotations

import itertools
from heapq import heappop, heappush
from typing import Dict, List

from .state import SearchNode


TIEBREAKERS = ("g", "h")

# Placeholder stored in the node slot of a removed entry.
_REMOVED = None


class PriorityQueue:
    """Min-heap of :class:`SearchNode` ordered by ``f`` then a tiebreak key.

    Among equal ``f`` values the ``"g"`` rule prefers the larger ``g`` and
    the ``"h"`` rule prefers the smaller ``h``. Any remaining tie goes to the
    smaller coordinate so expansion order is fully reproducible.
    """

    def __init__(self, tiebreaker: str = "g") -> None:
        if tiebreaker not in TIEBREAKERS:
            raise ValueError(
                f"Unknown tiebreaker {tiebreaker!r}; expected one of {TIEBREAKERS}"
            )
        self.tiebreaker = tiebreaker
        self._heap: List[list] = []
        self._entries: Dict[int, list] = {}
        self._seq = itertools.count()
        self._size = 0

    def _secondary(self, node: SearchNode) -> float:
        if self.tiebreaker == "g":
            return -node.g
        return node.h

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, node: SearchNode) -> None:
        """Add ``node``. Callers remove any stale entry for its cell first."""

        entry = [node.f, self._secondary(node), node.coordinate, next(self._seq), node]
        self._entries[node.coordinate] = entry
        heappush(self._heap, entry)
        self._size += 1

    def remove(self, coordinate: int) -> None:
        """Drop the queued entry for ``coordinate`` if there is one."""

        entry = self._entries.pop(coordinate, None)
        if entry is None:
            return
        entry[-1] = _REMOVED
        self._size -= 1

    def pop(self) -> SearchNode:
        """Remove and return the node with the smallest key."""

        self._discard_removed()
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        entry = heappop(self._heap)
        node = entry[-1]
        if self._entries.get(node.coordinate) is entry:
            del self._entries[node.coordinate]
        self._size -= 1
        return node

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def peek(self) -> SearchNode:
        """Return the node with the smallest key without removing it."""

        self._discard_removed()
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][-1]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._entries

    def _discard_removed(self) -> None:
        heap = self._heap
        while heap and heap[0][-1] is _REMOVED:
            heappop(heap)


__all__ = ["PriorityQueue", "TIEBREAKERS"]
