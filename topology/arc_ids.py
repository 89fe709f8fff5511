"""
Arc Id Module

An arc id names one traversal direction of an arc in a topology. Paths
(polygon rings) are sequences of arc ids. Topology files conventionally
pack the direction into the sign of an integer (``i`` forward, ``~i``
reverse); here the direction is kept explicit in the value.
"""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True, order=True)
class ArcId:
    """
    Directed traversal of an arc.

    Attributes:
        arc: Index of the underlying arc
        reverse: True when the arc is traversed from its last vertex to its first
    """
    arc: int
    reverse: bool = False

    def __post_init__(self):
        if self.arc < 0:
            raise ValueError(f"Arc index must be non-negative, got {self.arc}")

    @property
    def complement(self) -> 'ArcId':
        """The opposite traversal of the same arc."""
        return ArcId(self.arc, not self.reverse)

    def __invert__(self) -> 'ArcId':
        return self.complement

    @classmethod
    def from_int(cls, packed: int) -> 'ArcId':
        """Decode the packed-integer form (``~i`` for the reverse of arc ``i``)."""
        if packed < 0:
            return cls(~packed, True)
        return cls(packed, False)

    def to_int(self) -> int:
        return ~self.arc if self.reverse else self.arc

    def __repr__(self):
        return f"~{self.arc}" if self.reverse else f"{self.arc}"


def to_arc_ids(packed_ids: Iterable[int]) -> List[ArcId]:
    """Convert a path of packed integers into a list of ArcId values."""
    return [ArcId.from_int(i) for i in packed_ids]


def to_packed_ids(path: Iterable[ArcId]) -> List[int]:
    return [arc_id.to_int() for arc_id in path]
