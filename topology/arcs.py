"""
Arc Collection Module

Holds the vertex lists of the arcs in a topology and turns arc-id paths
back into coordinates and shapely geometries.
"""

from typing import List, Sequence, Tuple

from shapely.geometry import LinearRing, Polygon

from topology.arc_ids import ArcId

Point = Tuple[float, float]


class ArcCollection:
    """
    Indexed set of arcs, each a polyline of two or more vertices.

    Arcs meet only at their endpoints; ring crossings are expected to have
    been cut into the arcs as shared vertices already.
    """

    def __init__(self, arcs: Sequence[Sequence[Sequence[float]]]):
        self._arcs: List[List[Point]] = []
        for i, coords in enumerate(arcs):
            points = [(float(p[0]), float(p[1])) for p in coords]
            if len(points) < 2:
                raise ValueError(f"Arc {i} has {len(points)} vertex; at least 2 are required")
            self._arcs.append(points)

    def size(self) -> int:
        return len(self._arcs)

    def vertices(self, arc_id: ArcId) -> List[Point]:
        """Vertices of an arc in traversal order."""
        points = self._arcs[arc_id.arc]
        return points[::-1] if arc_id.reverse else list(points)

    def endpoints(self, arc_id: ArcId) -> Tuple[Point, Point]:
        """First and last vertex of an arc in traversal order."""
        points = self._arcs[arc_id.arc]
        if arc_id.reverse:
            return points[-1], points[0]
        return points[0], points[-1]

    def is_closed_path(self, path: Sequence[ArcId]) -> bool:
        """True if every arc starts where the previous one ends, cyclically."""
        if not path:
            return False
        for prev, curr in zip(path, list(path[1:]) + [path[0]]):
            if self.endpoints(prev)[1] != self.endpoints(curr)[0]:
                return False
        return True

    def path_coordinates(self, path: Sequence[ArcId]) -> List[Point]:
        """
        Vertices of a path, with the vertex shared by consecutive arcs
        listed once. A closed path ends on its first vertex.
        """
        coords: List[Point] = []
        for arc_id in path:
            points = self.vertices(arc_id)
            coords.extend(points[1:] if coords else points)
        return coords

    def path_to_ring(self, path: Sequence[ArcId]) -> LinearRing:
        return LinearRing(self.path_coordinates(path))

    def path_to_polygon(self, path: Sequence[ArcId]) -> Polygon:
        return Polygon(self.path_coordinates(path))

    def path_area(self, path: Sequence[ArcId]) -> float:
        """Signed planar area of a ring; clockwise rings are positive."""
        ring = self.path_to_ring(path)
        area = Polygon(ring).area
        return -area if ring.is_ccw else area
