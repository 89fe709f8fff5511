from topology.arc_ids import ArcId, to_arc_ids
from topology.self_intersection import (
    get_self_intersection_splitter,
    split_self_intersecting_rings
)


def _check_simple_rings(arcs, rings):
    for ring in rings:
        assert arcs.is_closed_path(ring)
        assert arcs.path_to_ring(ring).is_simple


def test_simple_ring_is_returned_unchanged(square):
    arcs, nodes, path = square
    splitter = get_self_intersection_splitter(nodes)
    assert splitter(path) == [path]


def test_input_path_is_not_modified(figure_eight):
    arcs, nodes, path = figure_eight
    original = list(path)
    get_self_intersection_splitter(nodes)(path)
    assert path == original


def test_empty_ring_gives_no_rings(square):
    arcs, nodes, path = square
    assert get_self_intersection_splitter(nodes)([]) == []


def test_figure_eight_splits_into_two_rings(figure_eight):
    arcs, nodes, path = figure_eight
    rings = get_self_intersection_splitter(nodes)(path)

    assert rings == [path[0:4], path[4:8]]
    _check_simple_rings(arcs, rings)
    # shared vertex appears once in each ring
    for ring in rings:
        assert arcs.path_coordinates(ring)[:-1].count((0.0, 0.0)) == 1


def test_figure_eight_from_packed_ids(figure_eight):
    arcs, nodes, _ = figure_eight
    rings = get_self_intersection_splitter(nodes)(to_arc_ids(range(8)))
    assert len(rings) == 2


def test_cloverleaf_splits_into_three_rings(cloverleaf):
    arcs, nodes, path = cloverleaf
    rings = get_self_intersection_splitter(nodes)(path)

    assert rings == [path[0:3], path[3:6], path[6:9]]
    _check_simple_rings(arcs, rings)


def test_split_rings_are_split_again(chained_loops):
    arcs, nodes, path = chained_loops
    rings = get_self_intersection_splitter(nodes)(path)

    assert rings == [
        [ArcId(0), ArcId(1)],
        [ArcId(3), ArcId(4)],
        [ArcId(5), ArcId(2)],
    ]
    _check_simple_rings(arcs, rings)


def test_output_rings_are_fixed_points(chained_loops):
    arcs, nodes, path = chained_loops
    splitter = get_self_intersection_splitter(nodes)
    for ring in splitter(path):
        assert splitter(ring) == [ring]


def test_repeated_calls_do_not_leak_marks(figure_eight):
    arcs, nodes, path = figure_eight
    splitter = get_self_intersection_splitter(nodes)
    first = splitter(path)
    assert splitter(path) == first
    assert splitter(path[0:4]) == [path[0:4]]


def test_branches_of_other_rings_are_ignored(figure_eight):
    # (0, 0) has four arc endpoints, but only one loop uses them here
    arcs, nodes, path = figure_eight
    loop = path[4:8]
    assert get_self_intersection_splitter(nodes)(loop) == [loop]


def test_spike_is_removed(square_with_spike):
    arcs, nodes, path = square_with_spike
    rings = get_self_intersection_splitter(nodes)(path)

    assert rings == [[ArcId(1), ArcId(2), ArcId(3), ArcId(0)]]
    _check_simple_rings(arcs, rings)


def test_ring_of_only_spikes_vanishes(square_with_spike):
    arcs, nodes, _ = square_with_spike
    spike = [ArcId(4), ArcId(4, True)]
    assert get_self_intersection_splitter(nodes)(spike) == []


def test_split_many_rings(figure_eight):
    arcs, nodes, path = figure_eight
    rings = split_self_intersecting_rings([path, path[0:4]], nodes)
    assert rings == [path[0:4], path[4:8], path[0:4]]
