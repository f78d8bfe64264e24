from dataclasses import dataclass

from pathkit.app.protocols import GridHeuristic, Heuristic, PathFinding
from pathkit.domain.search.search_heuristics import grid_zero, zero
from pathkit.domain.search.search_probing import (
    bi_probe_graph,
    bi_probe_grid,
    pop_head,
    pop_tail,
    probe_graph,
    probe_grid,
)
from pathkit.domain.search.search_weighted import dijkstra_graph, dijkstra_grid


class DepthFirstSearch(PathFinding):
    """Some path, no cost or hop-count guarantee. Ordered edge sequence."""

    name = "dfs"

    def graph(self, source, target, graph, hooks):
        return probe_graph(source.id, target.id, graph, pop_tail, hooks=hooks, algorithm=self.name)

    def grid(self, source, target, grid, directions, hooks):
        return probe_grid(
            source, target, grid, directions, pop_tail, hooks=hooks, algorithm=self.name
        )


class BreadthFirstSearch(PathFinding):
    """Minimum hop-count path. Ordered edge sequence."""

    name = "bfs"

    def graph(self, source, target, graph, hooks):
        return probe_graph(source.id, target.id, graph, pop_head, hooks=hooks, algorithm=self.name)

    def grid(self, source, target, grid, directions, hooks):
        return probe_grid(
            source, target, grid, directions, pop_head, hooks=hooks, algorithm=self.name
        )


class BiBreadthFirstSearch(PathFinding):
    """Two alternating BFS frontiers. Edge-set union of both halves, sorted by index."""

    name = "bibfs"

    def graph(self, source, target, graph, hooks):
        return bi_probe_graph(source.id, target.id, graph, hooks=hooks, algorithm=self.name)

    def grid(self, source, target, grid, directions, hooks):
        return bi_probe_grid(source, target, grid, directions, hooks=hooks, algorithm=self.name)


@dataclass
class AStar(PathFinding):
    """Priority search with injected heuristics. Ordered edge sequence.

    Minimal only for consistent heuristics.
    """

    heuristic: Heuristic = zero
    grid_heuristic: GridHeuristic = grid_zero
    name: str = "astar"

    def graph(self, source, target, graph, hooks):
        return dijkstra_graph(
            source.id, target.id, graph, self.heuristic, hooks=hooks, algorithm=self.name
        )

    def grid(self, source, target, grid, directions, hooks):
        return dijkstra_grid(
            source, target, grid, directions, self.grid_heuristic, hooks=hooks, algorithm=self.name
        )


class Dijkstra(AStar):
    def __init__(self):
        super().__init__(heuristic=zero, grid_heuristic=grid_zero, name="dijkstra")
