"""
Node Adjacency Index

Membership test over the arc-id universe of a topology, used to restrict
node queries to the arc ids of the path currently being examined. The two
traversal directions of an arc are tracked as separate marks.

An index is scoped to one decomposition at a time: ``marked(path)`` marks
the path on entry and clears it again on exit.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator

from topology.arc_ids import ArcId


class NodeAdjacencyIndex:
    """
    Mark set over ``size`` arcs, each with a forward and a reverse mark.

    Example:
        >>> index = NodeAdjacencyIndex(4)
        >>> index.mark_path([ArcId(0), ArcId(2, True)])
        >>> index.is_marked(ArcId(2, True)), index.is_marked(ArcId(2))
        (True, False)
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Index size must be non-negative, got {size}")
        self.size = size
        self._forward = bytearray(size)
        self._reverse = bytearray(size)

    def _marks(self, arc_id: ArcId) -> bytearray:
        return self._reverse if arc_id.reverse else self._forward

    def mark(self, arc_id: ArcId):
        self._marks(arc_id)[arc_id.arc] = 1

    def unmark(self, arc_id: ArcId):
        self._marks(arc_id)[arc_id.arc] = 0

    def is_marked(self, arc_id: ArcId) -> bool:
        return self._marks(arc_id)[arc_id.arc] == 1

    def mark_path(self, path: Iterable[ArcId]):
        for arc_id in path:
            self.mark(arc_id)

    def unmark_path(self, path: Iterable[ArcId]):
        for arc_id in path:
            self.unmark(arc_id)

    def reset(self):
        """Clear every mark."""
        self._forward = bytearray(self.size)
        self._reverse = bytearray(self.size)

    def is_empty(self) -> bool:
        return not any(self._forward) and not any(self._reverse)

    @contextmanager
    def marked(self, path: Iterable[ArcId]) -> Iterator['NodeAdjacencyIndex']:
        """Mark ``path`` for the duration of the block, then clear it."""
        path = list(path)
        self.mark_path(path)
        try:
            yield self
        finally:
            self.unmark_path(path)
