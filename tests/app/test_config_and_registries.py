import pytest
from pydantic import ValidationError

from pathkit.config.models import (
    AStarModel,
    BiBreadthFirstModel,
    DepthFirstModel,
    GridModel,
    LogModel,
    ToolkitModel,
)
from pathkit.domain.entities.grid import CARDINAL, COMPASS, Grid
from pathkit.domain.entities.network import Graph
from pathkit.domain.search.search_core import search_grid
from pathkit.domain.search.search_heuristics import (
    euclidean_distance,
    grid_chebyshev,
    grid_manhattan,
    zero,
)
from pathkit.domain.search.search_strategies import (
    AStar,
    BiBreadthFirstSearch,
    DepthFirstSearch,
)
from pathkit.runtime.registries import (
    make_directions,
    make_search,
    register_heuristic,
    register_search,
    resolve_grid_heuristic,
    resolve_heuristic,
)

# ------------- Config models ------------------


def test_search_union_discriminates_on_kind():
    m = ToolkitModel.model_validate({"search": {"kind": "bibfs"}})
    assert isinstance(m.search, BiBreadthFirstModel)
    m = ToolkitModel.model_validate({"search": {"kind": "dfs"}})
    assert isinstance(m.search, DepthFirstModel)


def test_astar_model_defaults():
    m = AStarModel()
    assert (m.heuristic, m.grid_heuristic) == ("euclidean", "chebyshev")


def test_models_forbid_extra_fields():
    with pytest.raises(ValidationError):
        ToolkitModel.model_validate({"search": {"kind": "bfs", "depth": 3}})
    with pytest.raises(ValidationError):
        ToolkitModel.model_validate({"unknown": True})


def test_log_sample_every_must_be_positive():
    with pytest.raises(ValidationError):
        LogModel(sample_every=0)


def test_grid_model_rejects_unknown_direction_set():
    with pytest.raises(ValidationError):
        GridModel(directions="hex")


# ------------- Registries ------------------


def test_make_search_per_kind():
    assert isinstance(make_search(DepthFirstModel()), DepthFirstSearch)
    assert isinstance(make_search(BiBreadthFirstModel()), BiBreadthFirstSearch)
    astar = make_search(AStarModel(heuristic="zero", grid_heuristic="manhattan"))
    assert isinstance(astar, AStar)
    assert astar.heuristic is zero
    assert astar.grid_heuristic is grid_manhattan


def test_make_search_unknown_kind():
    class Teleport:
        kind = "teleport"

    with pytest.raises(ValueError, match="Unknown search kind 'teleport'"):
        make_search(Teleport())


def test_register_search_overrides_factory():
    calls = []

    @register_search("bibfs")
    def _spy(cfg, deps):
        calls.append(deps)
        return BiBreadthFirstSearch()

    try:
        make_search(BiBreadthFirstModel(), deps={"x": 1})
        assert calls == [{"x": 1}]
    finally:
        register_search("bibfs")(lambda cfg, deps: BiBreadthFirstSearch())


def test_resolve_builtin_heuristics():
    assert resolve_heuristic("euclidean") is euclidean_distance
    assert resolve_grid_heuristic("chebyshev") is grid_chebyshev
    with pytest.raises(ValueError, match="Unknown grid heuristic"):
        resolve_grid_heuristic("nope")


def test_registered_heuristic_is_selectable():
    @register_heuristic("half_manhattan", grid=True)
    def half_manhattan(candidate, target, grid: Grid) -> float:
        return grid_manhattan(candidate, target, grid) / 2

    strategy = make_search(AStarModel(grid_heuristic="half_manhattan"))
    grid = Grid.from_rows([[1, 1, 1]])
    path = search_grid((0, 0), (0, 2), grid, strategy, CARDINAL)
    assert path.total_weight() == 2.0

    with pytest.raises(ValueError):
        resolve_heuristic("half_manhattan")  # graph table untouched


def test_make_directions():
    assert make_directions(GridModel()) == COMPASS
    assert make_directions(GridModel(directions="cardinal")) == CARDINAL


def test_graph_heuristic_protocol_shape():
    graph = Graph.from_tuples([(0, 0, 1, 1.0)])
    assert resolve_heuristic("zero")(0, 1, graph) == 0.0
