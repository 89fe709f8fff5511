"""
Node Collection Module

A node is a location where two or more arc endpoints coincide. For each
node the collection keeps the arc ids that arrive there: arc ``i`` arrives
at the node holding its last vertex, ``~i`` at the node holding its first.
The complement of an arriving id is the traversal leaving the node along
the same arc.
"""

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple

from topology.arc_ids import ArcId
from topology.arcs import ArcCollection
from utils.logger import get_logger

logger = get_logger(__name__)

ArcFilter = Callable[[ArcId], bool]


class NodeCollection:
    """
    Topology graph over an ArcCollection.

    Arriving ids at each node are ordered by arc index, with the reverse
    traversal (arc start) before the forward traversal (arc end).
    """

    def __init__(self, arcs: ArcCollection):
        self.arcs = arcs
        nodes: Dict[Tuple[float, float], List[ArcId]] = defaultdict(list)
        for i in range(arcs.size()):
            start, end = arcs.endpoints(ArcId(i))
            nodes[start].append(ArcId(i, True))
            nodes[end].append(ArcId(i))

        self._node_ids: Dict[ArcId, List[ArcId]] = {}
        for arriving in nodes.values():
            for arc_id in arriving:
                self._node_ids[arc_id] = arriving
        self.node_count = len(nodes)
        logger.debug(f"Built {self.node_count} node(s) from {arcs.size()} arc(s)")

    def connected_arcs(self, arc_id: ArcId, arc_filter: Optional[ArcFilter] = None) -> List[ArcId]:
        """
        Other arc ids arriving at the node where ``arc_id`` terminates.

        The ids are listed in the node's cyclic order, starting after
        ``arc_id``; ``arc_id`` itself is never included.

        Args:
            arc_id: Arc id arriving at the node of interest
            arc_filter: Optional predicate; only ids it accepts are returned

        Returns:
            List of arriving arc ids
        """
        arriving = self._node_ids[arc_id]
        pos = arriving.index(arc_id)
        ordered = arriving[pos + 1:] + arriving[:pos]
        if arc_filter is None:
            return ordered
        return [other for other in ordered if arc_filter(other)]

    def node_degree(self, arc_id: ArcId) -> int:
        """Number of arc endpoints at the node where ``arc_id`` terminates."""
        return len(self._node_ids[arc_id])
