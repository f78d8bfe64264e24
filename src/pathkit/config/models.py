from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1000

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- SEARCH STRATEGIES ---------------------


class DepthFirstModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dfs"] = "dfs"


class BreadthFirstModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class BiBreadthFirstModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bibfs"] = "bibfs"


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    # names resolved by runtime.registries; position-based graph heuristics
    # need positions offered to the graph beforehand
    heuristic: str = "euclidean"
    grid_heuristic: str = "chebyshev"


SearchUnion = Annotated[
    DepthFirstModel | BreadthFirstModel | BiBreadthFirstModel | DijkstraModel | AStarModel,
    Field(discriminator="kind"),
]


# ----------------- GRID ---------------------


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    directions: Literal["cardinal", "compass"] = "compass"


# ------------------------------------------------------------------


class ToolkitModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "pathkit"
    search: SearchUnion = Field(default_factory=BreadthFirstModel)
    grid: GridModel = GridModel()
    log: LogModel = LogModel()
