# pathkit/domain/search/search_probing.py
"""
Unweighted search over a frontier of waypoints.

DFS and BFS share one probe body; the only difference is which end of the
deque is popped. The target is checked at discovery time (while scanning a
node's neighbours), so BFS returns a minimum hop-count path and DFS returns
whichever path it stumbles on first.
"""

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from operator import attrgetter

from pathkit.domain.entities.grid import Coord, Direction, Grid
from pathkit.domain.entities.network import Edge, Graph
from pathkit.domain.entities.waypoint import Trail
from pathkit.engine.hooks import NoopHooks, SearchHooks

Pop = Callable[[deque], int]
Steps = Callable[[int], Iterable[Edge]]


def pop_tail(frontier: deque) -> int:
    return frontier.pop()


def pop_head(frontier: deque) -> int:
    return frontier.popleft()


# ------------------ Unidirectional ------------------------------


def _probe(
    source: int, target: int, steps: Steps, pop: Pop, hooks: SearchHooks, algorithm: str
) -> Graph:
    trail = Trail()
    frontier = deque([trail.origin(source)])
    visited: set[int] = set()

    while frontier:
        current = pop(frontier)
        node_id = trail[current].node_id
        visited.add(node_id)
        hooks.expand(node_id, algorithm=algorithm, frontier=len(frontier), visited=len(visited))

        for edge in steps(node_id):
            # a visited node is never re-found, even if it is the target
            if edge.destination in visited:
                continue
            frontier.append(trail.extend(current, edge))
            if edge.destination == target:
                return Graph(trail.walk_back(frontier.pop()))

    return Graph()


def probe_graph(
    source: int,
    target: int,
    graph: Graph,
    pop: Pop,
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "probe",
) -> Graph:
    return _probe(
        source,
        target,
        lambda n: graph.nodes_lookup[n].edges,
        pop,
        hooks or NoopHooks(),
        algorithm,
    )


def probe_grid(
    source: Coord,
    target: Coord,
    grid: Grid,
    directions: Sequence[Direction],
    pop: Pop,
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "probe",
) -> Graph:
    return _probe(
        grid.node_id(source),
        grid.node_id(target),
        lambda n: grid.steps(n, directions),
        pop,
        hooks or NoopHooks(),
        algorithm,
    )


# ------------------ Bidirectional --------------------------------


@dataclass
class _Side:
    root: int
    frontier: deque
    visited: dict[int, int] = field(default_factory=dict)  # node id -> trail index


def _advance(
    trail: Trail, side: _Side, other: _Side, steps: Steps, hooks: SearchHooks, algorithm: str
) -> set[Edge] | None:
    if not side.frontier:
        return None
    current = side.frontier.popleft()
    node_id = trail[current].node_id
    hooks.expand(
        node_id, algorithm=algorithm, frontier=len(side.frontier), visited=len(side.visited)
    )

    for edge in steps(node_id):
        dest = edge.destination
        child = trail.extend(current, edge)
        if dest == other.root:
            return trail.walk_back_set(child)
        if dest in other.visited:
            return trail.walk_back_set(child) | trail.walk_back_set(other.visited[dest])
        if dest not in side.visited:
            side.frontier.append(child)

    # recorded only after the scan, so a self-loop never counts as visited
    side.visited[node_id] = current
    return None


def _bi_probe(
    source: int, target: int, steps: Steps, hooks: SearchHooks, algorithm: str
) -> Graph:
    trail = Trail()
    forward = _Side(source, deque([trail.origin(source)]))
    backward = _Side(target, deque([trail.origin(target)]))

    while forward.frontier or backward.frontier:
        for side, other in ((forward, backward), (backward, forward)):
            found = _advance(trail, side, other, steps, hooks, algorithm)
            if found is not None:
                return Graph(sorted(found, key=attrgetter("index")))

    return Graph()


def bi_probe_graph(
    source: int,
    target: int,
    graph: Graph,
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "bibfs",
) -> Graph:
    return _bi_probe(
        source, target, lambda n: graph.nodes_lookup[n].edges, hooks or NoopHooks(), algorithm
    )


def bi_probe_grid(
    source: Coord,
    target: Coord,
    grid: Grid,
    directions: Sequence[Direction],
    *,
    hooks: SearchHooks | None = None,
    algorithm: str = "bibfs",
) -> Graph:
    return _bi_probe(
        grid.node_id(source),
        grid.node_id(target),
        lambda n: grid.steps(n, directions),
        hooks or NoopHooks(),
        algorithm,
    )
