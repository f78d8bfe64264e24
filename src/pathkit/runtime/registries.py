# runtime/registries.py
from collections.abc import Callable
from typing import Any

from pathkit.app.protocols import GridHeuristic, Heuristic, PathFinding
from pathkit.config.models import (
    AStarModel,
    BiBreadthFirstModel,
    BreadthFirstModel,
    DepthFirstModel,
    DijkstraModel,
    GridModel,
    SearchUnion,
)
from pathkit.domain.entities.grid import CARDINAL, COMPASS, Direction
from pathkit.domain.search.search_heuristics import (
    euclidean_distance,
    grid_chebyshev,
    grid_euclidean,
    grid_manhattan,
    grid_zero,
    manhattan_distance,
    zero,
)
from pathkit.domain.search.search_strategies import (
    AStar,
    BiBreadthFirstSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    Dijkstra,
)

SearchFactory = Callable[[SearchUnion, Any], PathFinding]

_search_registry: dict[str, SearchFactory] = {}
_heuristic_registry: dict[str, Heuristic] = {
    "zero": zero,
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
}
_grid_heuristic_registry: dict[str, GridHeuristic] = {
    "zero": grid_zero,
    "manhattan": grid_manhattan,
    "chebyshev": grid_chebyshev,
    "euclidean": grid_euclidean,
}
_directions_registry: dict[str, tuple[Direction, ...]] = {
    "cardinal": CARDINAL,
    "compass": COMPASS,
}


# ------------------- Search strategies ---------------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion, *, deps: dict | None = None) -> PathFinding:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_search("dfs")
def _make_dfs(cfg: DepthFirstModel, deps):
    return DepthFirstSearch()


@register_search("bfs")
def _make_bfs(cfg: BreadthFirstModel, deps):
    return BreadthFirstSearch()


@register_search("bibfs")
def _make_bibfs(cfg: BiBreadthFirstModel, deps):
    return BiBreadthFirstSearch()


@register_search("dijkstra")
def _make_dijkstra(cfg: DijkstraModel, deps):
    return Dijkstra()


@register_search("astar")
def _make_astar(cfg: AStarModel, deps):
    return AStar(
        heuristic=resolve_heuristic(cfg.heuristic),
        grid_heuristic=resolve_grid_heuristic(cfg.grid_heuristic),
    )


# --------------------- Heuristics & directions ---------------------


def register_heuristic(name: str, *, grid: bool = False):
    """Add a named heuristic so configs can select it by name."""

    def deco(fn):
        (_grid_heuristic_registry if grid else _heuristic_registry)[name] = fn
        return fn

    return deco


def resolve_heuristic(name: str) -> Heuristic:
    try:
        return _heuristic_registry[name]
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}") from None


def resolve_grid_heuristic(name: str) -> GridHeuristic:
    try:
        return _grid_heuristic_registry[name]
    except KeyError:
        raise ValueError(f"Unknown grid heuristic {name!r}") from None


def make_directions(cfg: GridModel) -> tuple[Direction, ...]:
    try:
        return _directions_registry[cfg.directions]
    except KeyError:
        raise ValueError(f"Unknown direction set {cfg.directions!r}") from None
