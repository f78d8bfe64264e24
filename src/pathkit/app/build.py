# pathkit/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pathkit.app.protocols import PathFinding
from pathkit.config.models import ToolkitModel
from pathkit.domain.entities.grid import Coord, Direction, Grid
from pathkit.domain.entities.network import Graph
from pathkit.domain.search.search_core import search, search_grid, spanning_tree
from pathkit.engine.hooks import NoopHooks, SearchHooks
from pathkit.io.search_logging import SearchLogging
from pathkit.runtime.registries import make_directions, make_search


@dataclass
class Toolkit:
    path_finding: PathFinding
    directions: tuple[Direction, ...]
    hooks: SearchHooks

    def search(self, source_id: int, target_id: int, graph: Graph) -> Graph:
        return search(source_id, target_id, graph, self.path_finding, hooks=self.hooks)

    def search_grid(self, source: Coord, target: Coord, grid: Grid) -> Graph:
        return search_grid(
            source, target, grid, self.path_finding, self.directions, hooks=self.hooks
        )

    def spanning_tree(self, graph: Graph) -> Graph:
        return spanning_tree(graph, hooks=self.hooks)


def build(cfg: ToolkitModel | Mapping, *, use_logging: bool = True) -> Toolkit:
    # 0) Validate config
    model = cfg if isinstance(cfg, ToolkitModel) else ToolkitModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(
            run_id=model.name,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Strategy & grid neighbourhood
    path_finding = make_search(model.search)
    directions = make_directions(model.grid)

    return Toolkit(path_finding, directions, hooks)
