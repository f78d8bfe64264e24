# pathkit/domain/search/search_core.py
import time
from collections.abc import Callable, Sequence

from pathkit.app.protocols import PathFinding
from pathkit.domain.entities.grid import COMPASS, Coord, Direction, Grid
from pathkit.domain.entities.network import Graph, Node
from pathkit.domain.errors import NotFound, PathkitError
from pathkit.domain.spanning.kruskal import minimum_spanning
from pathkit.engine.hooks import NoopHooks, SearchHooks


def _node(graph: Graph, node_id: int, what: str) -> Node:
    try:
        return graph.nodes_lookup[node_id]
    except KeyError:
        raise NotFound(what, node_id) from None


def _cell(grid: Grid, coord: Coord, what: str) -> Coord:
    if grid.outside(coord):
        raise NotFound(what, coord)
    return coord


def _run(
    algorithm: str, source, target, hooks: SearchHooks, body: Callable[[], Graph]
) -> Graph:
    hooks.run_start(algorithm=algorithm, source=source, target=target)
    t0 = time.perf_counter()
    try:
        result = body()
    except PathkitError as exc:
        hooks.error(algorithm=algorithm, exc=exc, source=source, target=target)
        raise
    hooks.run_end(
        algorithm=algorithm,
        found=bool(result.edges),
        edges=len(result.edges),
        cost=result.total_weight(),
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return result


def search(
    source_id: int,
    target_id: int,
    graph: Graph,
    path_finding: PathFinding,
    *,
    hooks: SearchHooks | None = None,
) -> Graph:
    """Path from ``source_id`` to ``target_id``; empty Graph if either is unknown or unreachable."""
    hooks = hooks or NoopHooks()
    try:
        source = _node(graph, source_id, "source node")
        target = _node(graph, target_id, "target node")
    except NotFound as exc:
        hooks.not_found(algorithm=path_finding.name, what=exc.what, key=exc.key)
        return Graph()
    if source_id == target_id:
        return Graph()

    return _run(
        path_finding.name,
        source_id,
        target_id,
        hooks,
        lambda: path_finding.graph(source, target, graph, hooks),
    )


def search_grid(
    source: Coord,
    target: Coord,
    grid: Grid,
    path_finding: PathFinding,
    directions: Sequence[Direction] = COMPASS,
    *,
    hooks: SearchHooks | None = None,
) -> Graph:
    """Grid analogue of ``search``; empty Graph if either cell lies outside the grid."""
    hooks = hooks or NoopHooks()
    try:
        source = _cell(grid, tuple(source), "source cell")
        target = _cell(grid, tuple(target), "target cell")
    except NotFound as exc:
        hooks.not_found(algorithm=path_finding.name, what=exc.what, key=exc.key)
        return Graph()
    if source == target:
        return Graph()

    return _run(
        path_finding.name,
        source,
        target,
        hooks,
        lambda: path_finding.grid(source, target, grid, directions, hooks),
    )


def spanning_tree(graph: Graph, *, hooks: SearchHooks | None = None) -> Graph:
    return _run("kruskal", None, None, hooks or NoopHooks(), lambda: minimum_spanning(graph))
