"""
Self-Intersection Splitting Module

Decomposes a self-intersecting polygon ring into rings that do not
intersect themselves. A figure-eight, for example, becomes two rings that
touch where the original ring crossed itself. The output rings may overlap
each other.

Crossings are assumed to occur at vertices, not along segments: wherever
the ring crosses itself, the arcs must already have been cut so that the
crossing is a node shared by the arcs involved.

Usage:
    from topology.self_intersection import get_self_intersection_splitter

    splitter = get_self_intersection_splitter(nodes)
    rings = splitter(path)
"""

import threading
from typing import Callable, Iterable, List, Optional, Sequence

from topology.arc_ids import ArcId
from topology.id_index import NodeAdjacencyIndex
from topology.path_splitter import split_path_by_ids
from topology.spikes import remove_spikes_in_path
from utils.logger import get_logger

logger = get_logger(__name__)

Splitter = Callable[[Sequence[ArcId]], List[List[ArcId]]]


def get_self_intersection_splitter(nodes) -> Splitter:
    """
    Return a function for splitting self-intersecting polygon rings.

    Parameters:
    -----------
    nodes : NodeCollection
        Topology graph exposing ``arcs.size()`` and
        ``connected_arcs(arc_id, arc_filter)``

    Returns:
    --------
    Splitter
        Function taking one ring (sequence of ArcId) and returning a list
        of zero or more simple rings. The input sequence is not modified.

    Note:
        The returned function owns one NodeAdjacencyIndex. Calls are
        serialized with a lock so the marks of one ring never leak into
        the decomposition of another.
    """
    path_index = NodeAdjacencyIndex(nodes.arcs.size())
    lock = threading.Lock()

    def arc_filter(arc_id: ArcId) -> bool:
        # Arriving id counts only if its departing traversal is in the path
        return path_index.is_marked(~arc_id)

    def divide_path_at_node(path: List[ArcId], enter_id: ArcId) -> Optional[List[List[ArcId]]]:
        """
        Sub-paths of ``path`` if ``enter_id`` enters a node with more than
        one open route leading out, else None.
        """
        node_ids = nodes.connected_arcs(enter_id, arc_filter)
        if len(node_ids) < 2:
            return None

        exit_indexes = []
        for node_id in node_ids:
            exit_id = ~node_id
            try:
                # Linear scan; tuning point for very large rings
                idx = path.index(exit_id)
            except ValueError:
                logger.debug(f"Exit arc {exit_id!r} not found in path of {len(path)} arcs, skipping")
                continue
            # Unmark so later nodes cannot route through this exit again
            path_index.unmark(exit_id)
            exit_indexes.append(idx)

        if len(exit_indexes) < 2:
            return None

        logger.debug(f"Path of {len(path)} arcs forks after {enter_id!r} at positions {sorted(exit_indexes)}")
        return split_path_by_ids(path, exit_indexes)

    def divide_path(path: List[ArcId]) -> List[List[ArcId]]:
        rings = []
        # Work-list of sub-paths still to be examined, last in first out
        pending = [path]
        while pending:
            current = pending.pop()
            sub_paths = None
            # Last arc ends at the path's start node, which the first arc covers
            for i in range(len(current) - 1):
                sub_paths = divide_path_at_node(current, current[i])
                if sub_paths is not None:
                    break

            if sub_paths is None:
                # Indivisible path: clean it by removing any spikes
                remove_spikes_in_path(current)
                if current:
                    rings.append(current)
            else:
                pending.extend(reversed(sub_paths))
        return rings

    def split_ring(path: Sequence[ArcId]) -> List[List[ArcId]]:
        path = list(path)
        if not path:
            return []
        with lock, path_index.marked(path):
            rings = divide_path(list(path))
        if len(rings) != 1:
            logger.debug(f"Split ring of {len(path)} arcs into {len(rings)} ring(s)")
        return rings

    return split_ring


def split_self_intersecting_rings(paths: Iterable[Sequence[ArcId]], nodes) -> List[List[ArcId]]:
    """
    Split each ring in ``paths`` and return all resulting simple rings.

    Args:
        paths: Rings of arc ids sharing the topology of ``nodes``
        nodes: NodeCollection for the arcs the rings reference

    Returns:
        Flat list of simple rings, in input order
    """
    splitter = get_self_intersection_splitter(nodes)
    rings = []
    count = 0
    for path in paths:
        rings.extend(splitter(path))
        count += 1
    logger.info(f"Split {count} ring(s) into {len(rings)} simple ring(s)")
    return rings
