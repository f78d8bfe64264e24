import math

from pathkit.domain.entities.grid import Coord, Grid
from pathkit.domain.entities.network import Graph, Position


def get_position(node_id: int, graph: Graph) -> Position:
    # raises ConfigurationError / MissingPosition; never defaults to zero
    return graph.get_position(node_id)


# ------------- Graph heuristics (node ids) -------------


def zero(candidate: int, target: int, graph: Graph) -> float:
    return 0.0


def euclidean_distance(candidate: int, target: int, graph: Graph) -> float:
    src, dest = get_position(candidate, graph), get_position(target, graph)
    return math.sqrt((dest.x - src.x) ** 2 + (dest.y - src.y) ** 2 + (dest.z - src.z) ** 2)


def manhattan_distance(candidate: int, target: int, graph: Graph) -> float:
    src, dest = get_position(candidate, graph), get_position(target, graph)
    return abs(dest.x - src.x) + abs(dest.y - src.y) + abs(dest.z - src.z)


# ------------- Grid heuristics (row, col) --------------


def grid_zero(candidate: Coord, target: Coord, grid: Grid) -> float:
    return 0.0


def grid_manhattan(candidate: Coord, target: Coord, grid: Grid) -> float:
    return float(abs(target[0] - candidate[0]) + abs(target[1] - candidate[1]))


def grid_chebyshev(candidate: Coord, target: Coord, grid: Grid) -> float:
    """Admissible for 8-way moves when every cell costs at least 1."""
    return float(max(abs(target[0] - candidate[0]), abs(target[1] - candidate[1])))


def grid_euclidean(candidate: Coord, target: Coord, grid: Grid) -> float:
    return math.hypot(target[0] - candidate[0], target[1] - candidate[1])
