import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

import numpy as np

from pathkit.domain.errors import ConfigurationError, MissingPosition


@dataclass(frozen=True)
class Edge:
    index: int  # identity; equality and hashing use this only
    source: int = field(compare=False)
    destination: int = field(compare=False)
    weight: float = field(default=1.0, compare=False)


@dataclass(frozen=True)
class Node:
    id: int
    edges: tuple[Edge, ...] = ()


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    z: float = 0.0

    def isclose(self, other: "Position", eps: float = 1e-6) -> bool:
        return (
            abs(self.x - other.x) <= eps
            and abs(self.y - other.y) <= eps
            and abs(self.z - other.z) <= eps
        )


class Graph:
    """Directed, weighted network with O(1) node and edge lookup.

    Immutable once built. The only late mutation is ``offer_positions``, a setup
    step that attaches 3D node positions for position-based heuristics.
    """

    def __init__(self, edges: Iterable[Edge] = ()):
        self.edges: list[Edge] = list(edges)
        self.edges_lookup: dict[int, Edge] = {}
        outgoing: dict[int, list[Edge]] = {}

        for e in self.edges:
            if math.isnan(e.weight):
                raise ValueError(f"edge {e.index} has a NaN weight")
            self.edges_lookup[e.index] = e
            outgoing.setdefault(e.source, []).append(e)
            outgoing.setdefault(e.destination, [])

        self.nodes_lookup: dict[int, Node] = {
            nid: Node(nid, tuple(out)) for nid, out in outgoing.items()
        }
        self.node_count = max(self.nodes_lookup) + 1 if self.nodes_lookup else 0
        self.node_position_lookup: dict[int, Position] | None = None

    # ------------- Construction ---------------------------------

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        return cls(edges)

    @classmethod
    def from_tuples(cls, rows: Iterable[Sequence]) -> "Graph":
        """Build from ``(index, source, destination, weight)`` rows."""
        return cls(Edge(int(i), int(s), int(d), float(w)) for i, s, d, w in rows)

    @classmethod
    def from_adjacency_matrix(cls, matrix) -> "Graph":
        """One directed edge row -> col per non-zero cell, indexed ``row * ncols + col``."""
        m = np.asarray(matrix, dtype=float)
        if m.ndim != 2:
            raise ValueError(f"adjacency matrix must be 2D, got shape {m.shape}")
        ncols = m.shape[1]
        rows, cols = np.nonzero(m)
        return cls(
            Edge(int(r) * ncols + int(c), int(r), int(c), float(m[r, c]))
            for r, c in zip(rows, cols)
        )

    @classmethod
    def empty(cls) -> "Graph":
        return cls()

    # ------------- Queries --------------------------------------

    def __contains__(self, node_id: int) -> bool:
        return node_id in self.nodes_lookup

    def __len__(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes_lookup)}, edges={len(self.edges)})"

    def node(self, node_id: int) -> Node:
        return self.nodes_lookup[node_id]

    def total_weight(self) -> float:
        return float(sum(e.weight for e in self.edges))

    def sorted_by_weight_asc(self) -> list[Edge]:
        # sorted() is stable, so equal weights keep construction order
        return sorted(self.edges, key=lambda e: e.weight)

    # ------------- Positions ------------------------------------

    def offer_positions(self, positions: Mapping[int, Position]) -> None:
        self.node_position_lookup = dict(positions)

    def get_position(self, node_id: int) -> Position:
        if self.node_position_lookup is None:
            raise ConfigurationError(
                "You must offer node positions to the graph before using this heuristic."
            )
        try:
            return self.node_position_lookup[node_id]
        except KeyError:
            raise MissingPosition(node_id) from None
