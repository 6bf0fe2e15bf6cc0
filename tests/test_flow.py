import pytest

from algolab.flow import FlowNetwork, max_flow

CLRS = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]

CHAIN_EDGES = [
    (0, 1, 10), (0, 2, 15), (1, 3, 12), (2, 3, 10), (3, 4, 25), (4, 5, 20),
    (5, 6, 18), (6, 7, 16), (7, 8, 22), (8, 9, 14), (9, 10, 30), (10, 11, 8),
    (11, 12, 15), (12, 13, 20), (13, 14, 17), (14, 15, 19), (15, 16, 13),
    (16, 17, 24), (17, 18, 11), (18, 19, 27), (19, 0, 21),
]


def _chain_network():
    network = FlowNetwork(20)
    for u, v, c in CHAIN_EDGES:
        network.add_edge(u, v, c)
    return network


@pytest.mark.parametrize("search", ["bfs", "dfs"])
def test_classic_network(search):
    assert max_flow(CLRS, 0, 5, search) == 23


@pytest.mark.parametrize("search", ["bfs", "dfs"])
def test_chain_bottleneck(search):
    assert _chain_network().max_flow(0, 19, search) == 8


def test_network_reusable():
    network = _chain_network()
    first = network.max_flow(0, 19)
    assert network.max_flow(0, 19) == first


def test_input_matrix_unchanged():
    matrix = [list(row) for row in CLRS]
    max_flow(matrix, 0, 5)
    assert matrix == CLRS


def test_flow_bounded_by_source_capacity():
    assert max_flow(CLRS, 0, 5) <= sum(CLRS[0])
    assert max_flow(CLRS, 0, 5) <= sum(row[5] for row in CLRS)


def test_no_path_gives_zero():
    network = FlowNetwork(3)
    network.add_edge(0, 1, 5)
    assert network.max_flow(0, 2) == 0


def test_add_edge_replaces_capacity():
    network = FlowNetwork(2)
    network.add_edge(0, 1, 5)
    network.add_edge(0, 1, 2)
    assert network.max_flow(0, 1) == 2


def test_source_equals_sink():
    with pytest.raises(ValueError):
        max_flow(CLRS, 2, 2)


def test_unknown_search():
    with pytest.raises(ValueError):
        max_flow(CLRS, 0, 5, "astar")


def test_bad_inputs():
    with pytest.raises(ValueError):
        max_flow([[0, 1]], 0, 1)
    with pytest.raises(ValueError):
        max_flow([[0, -1], [0, 0]], 0, 1)
    with pytest.raises(ValueError):
        FlowNetwork(2).add_edge(0, 3, 1)
    with pytest.raises(ValueError):
        FlowNetwork(2).add_edge(0, 1, -4)
    with pytest.raises(ValueError):
        FlowNetwork(2).max_flow(0, 9)