# engine/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, algorithm, source, target): ...
    def run_end(self, *, algorithm, found, edges, cost, wall_ms): ...
    def expand(self, node_id, *, algorithm, frontier, visited): ...
    def not_found(self, *, algorithm, what, key): ...
    def error(self, *, algorithm, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def not_found(self, **_):
        pass

    def error(self, *_, **__):
        pass
