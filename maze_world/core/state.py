"""Search nodes forming the per-iteration parent tree."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional


# Cost of a cell that has not been reached during the current iteration.
INFINITY = math.inf


@dataclass(eq=False)
class SearchNode:
    """A cell reached by A* together with its costs and parent."""

    coordinate: int
    g: float = INFINITY
    h: int = 0
    parent: Optional["SearchNode"] = field(default=None, repr=False)

    @property
    def f(self) -> float:
        return self.g + self.h

    def lineage(self) -> Iterator["SearchNode"]:
        """Yield this node followed by each ancestor up to the search root."""

        node: Optional[SearchNode] = self
        while node is not None:
            yield node
            node = node.parent


__all__ = ["INFINITY", "SearchNode"]
