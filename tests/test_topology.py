import pytest

from topology.arc_ids import ArcId, to_arc_ids, to_packed_ids
from topology.arcs import ArcCollection
from topology.id_index import NodeAdjacencyIndex


def test_arc_id_complement():
    arc_id = ArcId(3)
    assert ~arc_id == ArcId(3, True)
    assert arc_id.complement.complement == arc_id
    assert ~arc_id != arc_id


def test_arc_id_packed_integers():
    assert ArcId.from_int(0) == ArcId(0)
    assert ArcId.from_int(-1) == ArcId(0, True)
    assert ArcId.from_int(~5).to_int() == ~5
    assert to_packed_ids(to_arc_ids([0, ~1, 2])) == [0, ~1, 2]


def test_arc_id_rejects_negative_index():
    with pytest.raises(ValueError):
        ArcId(-2)


def test_index_distinguishes_directions():
    index = NodeAdjacencyIndex(3)
    index.mark_path([ArcId(0), ArcId(2, True)])

    assert index.is_marked(ArcId(0))
    assert not index.is_marked(ArcId(0, True))
    assert index.is_marked(ArcId(2, True))
    assert not index.is_marked(ArcId(2))
    assert not index.is_marked(ArcId(1))


def test_index_unmark():
    index = NodeAdjacencyIndex(3)
    path = [ArcId(0), ArcId(1)]
    index.mark_path(path)
    index.unmark(ArcId(1))

    assert not index.is_marked(ArcId(1))
    index.unmark_path(path)
    assert index.is_empty()


def test_index_marked_context_clears_on_exit():
    index = NodeAdjacencyIndex(2)
    with pytest.raises(RuntimeError):
        with index.marked([ArcId(1, True)]):
            assert index.is_marked(ArcId(1, True))
            raise RuntimeError("boom")
    assert index.is_empty()


def test_index_reset():
    index = NodeAdjacencyIndex(2)
    index.mark_path([ArcId(0), ArcId(1, True)])
    index.reset()
    assert index.is_empty()


def test_arc_vertices_follow_direction():
    arcs = ArcCollection([[(0, 0), (1, 0), (1, 1)]])
    assert arcs.vertices(ArcId(0, True)) == [(1, 1), (1, 0), (0, 0)]
    assert arcs.endpoints(ArcId(0, True)) == ((1, 1), (0, 0))


def test_arc_needs_two_vertices():
    with pytest.raises(ValueError):
        ArcCollection([[(0, 0)]])


def test_path_geometry(square):
    arcs, nodes, path = square
    assert arcs.path_coordinates(path) == [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
    assert arcs.is_closed_path(path)
    assert not arcs.is_closed_path(path[:3])
    assert arcs.path_to_polygon(path).area == pytest.approx(1.0)
    # clockwise ring has positive area
    assert arcs.path_area(path) == pytest.approx(1.0)
    assert arcs.path_area([~arc_id for arc_id in reversed(path)]) == pytest.approx(-1.0)


def test_connected_arcs(figure_eight):
    arcs, nodes, path = figure_eight
    assert nodes.node_count == 7
    assert nodes.node_degree(ArcId(3)) == 4
    assert nodes.connected_arcs(ArcId(3)) == [ArcId(4, True), ArcId(7), ArcId(0, True)]
    assert nodes.connected_arcs(ArcId(0)) == [ArcId(1, True)]


def test_connected_arcs_filter(figure_eight):
    arcs, nodes, path = figure_eight
    reverse_only = nodes.connected_arcs(ArcId(3), lambda arc_id: arc_id.reverse)
    assert reverse_only == [ArcId(4, True), ArcId(0, True)]


def test_arc_collection_size(figure_eight):
    arcs, nodes, path = figure_eight
    assert arcs.size() == 8
    assert not hasattr(arcs, 'arc_count')
