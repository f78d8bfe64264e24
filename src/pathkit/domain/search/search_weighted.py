# pathkit/domain/search/search_weighted.py
"""
Priority-frontier search: Dijkstra with a zero heuristic, A* otherwise.

The per-node path table is overwritten on every push without comparing to the
previously recorded path, so the returned path is only guaranteed minimal when
the heuristic is consistent.
"""

import heapq
import math
from collections.abc import Callable, Iterable, Sequence

from pathkit.domain.entities.grid import Coord, Direction, Grid
from pathkit.domain.entities.network import Edge, Graph
from pathkit.engine.hooks import NoopHooks, SearchHooks

Steps = Callable[[int], Iterable[Edge]]
Estimate = Callable[[int], float]


class PriorityFrontier:
    """
    Addressable min-priority queue over node ids.

    A node is held at most once: pushing it again replaces its priority, up or
    down. Equal priorities pop the most recently pushed node first.
    """

    def __init__(self):
        self._heap: list[list] = []
        self._entries: dict[int, list] = {}
        self._seq = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._entries

    def push(self, node_id: int, priority: float) -> None:
        if math.isnan(priority):
            raise ValueError(f"NaN priority pushed for node {node_id}")
        stale = self._entries.pop(node_id, None)
        if stale is not None:
            stale[-1] = False
        self._seq += 1
        entry = [priority, -self._seq, node_id, True]
        self._entries[node_id] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> tuple[int, float]:
        while self._heap:
            priority, _, node_id, alive = heapq.heappop(self._heap)
            if alive:
                del self._entries[node_id]
                return node_id, priority
        raise IndexError("pop from an empty frontier")


def _weighted(
    source: int,
    target: int,
    steps: Steps,
    estimate: Estimate,
    hooks: SearchHooks,
    algorithm: str,
) -> Graph:
    visited: set[int] = set()
    edges_for_node: dict[int, list[Edge]] = {source: []}
    frontier = PriorityFrontier()
    frontier.push(source, 0.0)

    while target not in visited and frontier:
        node_id, priority = frontier.pop()
        visited.add(node_id)
        hooks.expand(node_id, algorithm=algorithm, frontier=len(frontier), visited=len(visited))

        for edge in steps(node_id):
            dest = edge.destination
            if dest in visited:
                continue
            frontier.push(dest, priority + edge.weight + estimate(dest))
            edges_for_node[dest] = [*edges_for_node[node_id], edge]

    return Graph(edges_for_node.get(target, ()))


def dijkstra_graph(
    source: int,
    target: int,
    graph: Graph,
    heuristic,
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "dijkstra",
) -> Graph:
    return _weighted(
        source,
        target,
        lambda n: graph.nodes_lookup[n].edges,
        lambda n: heuristic(n, target, graph),
        hooks or NoopHooks(),
        algorithm,
    )


def dijkstra_grid(
    source: Coord,
    target: Coord,
    grid: Grid,
    directions: Sequence[Direction],
    heuristic,
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "dijkstra",
) -> Graph:
    return _weighted(
        grid.node_id(source),
        grid.node_id(target),
        lambda n: grid.steps(n, directions),
        lambda n: heuristic(grid.coords(n), target, grid),
        hooks or NoopHooks(),
        algorithm,
    )
