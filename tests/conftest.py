import pytest

from pathkit.domain.entities.network import Edge, Graph


@pytest.fixture
def undirected_graph() -> Graph:
    # every link stored in both directions
    return Graph.from_tuples(
        [
            (0, 1, 2, 0.0),
            (1, 2, 1, 0.0),
            (2, 2, 3, 1 / 7),
            (3, 3, 2, 1 / 7),
            (4, 1, 0, 2 / 7),
            (5, 0, 1, 2 / 7),
            (6, 3, 4, 2 / 7),
            (7, 4, 3, 2 / 7),
            (8, 1, 3, 3 / 7),
            (9, 3, 1, 3 / 7),
            (10, 0, 3, 6 / 7),
            (11, 3, 0, 6 / 7),
            (12, 0, 4, 1.0),
            (13, 4, 0, 1.0),
        ]
    )


@pytest.fixture
def directed_graph() -> Graph:
    return Graph.from_tuples(
        [
            (0, 4, 0, 7.0),
            (1, 0, 2, 12.0),
            (2, 0, 3, 60.0),
            (3, 2, 1, 20.0),
            (4, 2, 3, 32.0),
            (5, 1, 0, 10.0),
        ]
    )


@pytest.fixture
def single_edge_graph() -> Graph:
    return Graph([Edge(0, 0, 1, 1.0)])


@pytest.fixture
def weighted_graph() -> Graph:
    return Graph.from_tuples(
        [
            (0, 0, 1, 4.0),
            (1, 0, 2, 2.0),
            (2, 1, 2, 3.0),
            (3, 1, 3, 2.0),
            (4, 1, 4, 3.0),
            (5, 2, 1, 1.0),
            (6, 2, 3, 4.0),
            (7, 2, 4, 5.0),
            (8, 4, 3, 1.0),
        ]
    )


@pytest.fixture
def disjoint_graph() -> Graph:
    return Graph.from_tuples([(0, 0, 1, 4.0), (1, 2, 3, 2.0)])


@pytest.fixture
def joined_trees_graph() -> Graph:
    """Two trees (0..7 and 8..14) joined by the single link 7 <-> 8, both directions."""
    one_way = [
        (0, 4, 1.0),
        (1, 4, 2.0),
        (4, 6, 3.0),
        (3, 5, 4.0),
        (2, 5, 5.0),
        (5, 6, 6.0),
        (6, 7, 7.0),
        (11, 9, 8.0),
        (12, 9, 9.0),
        (9, 8, 10.0),
        (14, 10, 11.0),
        (13, 10, 12.0),
        (10, 8, 13.0),
        (8, 7, 14.0),
    ]
    edges = [Edge(i, s, d, w) for i, (s, d, w) in enumerate(one_way)]
    edges += [Edge(i + len(one_way), d, s, w) for i, (s, d, w) in enumerate(one_way)]
    return Graph(edges)


@pytest.fixture
def classic_matrix() -> list[list[int]]:
    return [
        [0, 4, 0, 0, 0, 0, 0, 8, 0],
        [4, 0, 8, 0, 0, 0, 0, 11, 0],
        [0, 8, 0, 7, 0, 4, 0, 0, 2],
        [0, 0, 7, 0, 9, 14, 0, 0, 0],
        [0, 0, 0, 9, 0, 10, 0, 0, 0],
        [0, 0, 4, 14, 10, 0, 2, 0, 0],
        [0, 0, 0, 0, 0, 2, 0, 1, 6],
        [8, 11, 0, 0, 0, 0, 1, 0, 7],
        [0, 0, 2, 0, 0, 0, 6, 7, 0],
    ]
