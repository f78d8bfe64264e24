from pathkit.domain.entities.network import Edge, Graph
from pathkit.domain.spanning.union_find import UnionFind


def minimum_spanning(graph: Graph) -> Graph:
    """Kruskal's algorithm.

    Scans edges by ascending weight (stable) and keeps each edge that joins two
    components. A disconnected graph yields a spanning forest, not an error.
    """
    components = UnionFind(graph.node_count)
    kept: list[Edge] = []

    for edge in graph.sorted_by_weight_asc():
        if components.unify(edge.source, edge.destination):
            kept.append(edge)

    return Graph(kept)
