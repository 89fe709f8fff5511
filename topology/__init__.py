"""
Topology Repair Package

Splits self-intersecting polygon rings, expressed as sequences of directed
arc ids over a shared arc topology, into simple rings.

Modules:
    arc_ids: Directed arc id value type
    arcs: Arc vertex storage and path-to-geometry conversion
    nodes: Topology graph of arc endpoints
    id_index: Per-path membership marks over the arc id universe
    path_splitter: Cut a closed path into sub-paths
    spikes: Remove back-and-forth arc pairs from a path
    self_intersection: Recursive ring decomposition

Usage:
    from topology import ArcCollection, NodeCollection, get_self_intersection_splitter

    arcs = ArcCollection(arc_coordinates)
    splitter = get_self_intersection_splitter(NodeCollection(arcs))
    rings = splitter(path)
"""

from topology.arc_ids import ArcId, to_arc_ids, to_packed_ids
from topology.arcs import ArcCollection
from topology.nodes import NodeCollection
from topology.id_index import NodeAdjacencyIndex
from topology.path_splitter import split_path_by_ids
from topology.spikes import remove_spikes_in_path
from topology.self_intersection import (
    get_self_intersection_splitter,
    split_self_intersecting_rings
)

__all__ = [
    'ArcId',
    'to_arc_ids',
    'to_packed_ids',
    'ArcCollection',
    'NodeCollection',
    'NodeAdjacencyIndex',
    'split_path_by_ids',
    'remove_spikes_in_path',
    'get_self_intersection_splitter',
    'split_self_intersecting_rings'
]
