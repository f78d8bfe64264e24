import math
from enum import Enum

from collections.abc import Iterator, Sequence

import numpy as np

from pathkit.domain.entities.network import Edge
from pathkit.domain.errors import OutOfBounds

Coord = tuple[int, int]  # (row, col), never negative

# Cost of an impassable cell. Compare against this, never a literal.
INFINITE = math.inf


class Direction(Enum):
    # (row offset, col offset); north is row - 1
    N = (-1, 0)
    NE = (-1, 1)
    E = (0, 1)
    SE = (1, 1)
    S = (1, 0)
    SW = (1, -1)
    W = (0, -1)
    NW = (-1, -1)

    def attempt_move(self, coord: Coord) -> Coord:
        """Apply the offset, saturating at 0 per axis.

        An axis that would go negative keeps its original value; moving past the
        upper bound yields an outside coordinate for the caller to skip.
        """
        dr, dc = self.value
        row, col = coord
        nr, nc = row + dr, col + dc
        return (nr if nr >= 0 else row, nc if nc >= 0 else col)


CARDINAL: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)
COMPASS: tuple[Direction, ...] = tuple(Direction)


class Grid:
    """Rectangular cost grid addressed by (row, col) or row-major node id.

    ``width`` counts rows and ``height`` counts columns, so
    ``node_id = row * height + col``.
    """

    def __init__(self, costs):
        arr = np.asarray(costs, dtype=float)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError(f"grid costs must be a non-empty rectangle, got shape {arr.shape}")
        if np.isnan(arr).any():
            raise ValueError("grid costs must not contain NaN")
        self.costs = arr
        self.width, self.height = arr.shape
        self.size = self.width * self.height

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        rows = [list(r) for r in rows]
        if rows and any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("grid rows must all have the same length")
        return cls(rows)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def within(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.width and 0 <= col < self.height

    def outside(self, coord: Coord) -> bool:
        return not self.within(coord)

    def node_id(self, coord: Coord) -> int:
        if self.outside(coord):
            raise OutOfBounds(f"Coordinate is outside of matrix: {coord}")
        return coord[0] * self.height + coord[1]

    def coords(self, node_id: int) -> Coord:
        self._check_id(node_id)
        return divmod(node_id, self.height)

    def cost(self, node_id: int) -> float:
        self._check_id(node_id)
        row, col = divmod(node_id, self.height)
        return float(self.costs[row, col])

    def passable(self, node_id: int) -> bool:
        return self.cost(node_id) < INFINITE

    def steps(self, node_id: int, directions: Sequence[Direction]) -> Iterator[Edge]:
        """Synthetic edges from ``node_id`` into each passable neighbour.

        Weight is the cost of entering the neighbour; the index
        ``source * size + destination`` is unique per ordered pair.
        """
        coord = self.coords(node_id)
        for direction in directions:
            dest = direction.attempt_move(coord)
            if dest == coord or self.outside(dest):
                continue
            dest_id = self.node_id(dest)
            cost = self.cost(dest_id)
            if cost < INFINITE:
                yield Edge(node_id * self.size + dest_id, node_id, dest_id, cost)

    def _check_id(self, node_id: int) -> None:
        if not 0 <= node_id < self.size:
            raise OutOfBounds(f"Node id exceeds grid size: {node_id}")
