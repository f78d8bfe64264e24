from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pathkit.domain.entities.grid import Coord, Direction, Grid
from pathkit.domain.entities.network import Graph, Node
from pathkit.engine.hooks import SearchHooks


@runtime_checkable
class Heuristic(Protocol):
    """
    Estimated remaining cost from ``candidate`` to ``target`` (node ids).
    Zero everywhere turns A* into Dijkstra.
    """

    def __call__(self, candidate: int, target: int, graph: Graph) -> float: ...


@runtime_checkable
class GridHeuristic(Protocol):
    """Same contract as Heuristic, over (row, col) coordinates."""

    def __call__(self, candidate: Coord, target: Coord, grid: Grid) -> float: ...


@runtime_checkable
class PathFinding(Protocol):
    """
    Responsibilities:
      • Find a path between two known nodes of a graph.
      • Find a path between two in-bounds cells of a grid.
    Both return a Graph holding only the path's edges (empty if none exists).
    Endpoint validation happens in the entry points, not here.
    """

    name: str

    def graph(
        self, source: Node, target: Node, graph: Graph, hooks: SearchHooks
    ) -> Graph: ...

    def grid(
        self,
        source: Coord,
        target: Coord,
        grid: Grid,
        directions: Sequence[Direction],
        hooks: SearchHooks,
    ) -> Graph: ...
