# io/search_logging.py
import json
import logging
import sys

from pathkit.engine.hooks import NoopHooks


def _default_json_logger(name="pathkit", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for search runs: one record per run start/end, sampled
    expansion records in debug mode, and endpoint/error reports.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._expanded = 0

    @property
    def expanded(self) -> int:
        return self._expanded

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------- run lifecycle -------------------

    def run_start(self, *, algorithm, source, target):
        self._expanded = 0
        self._emit("INFO", "search_start", algorithm=algorithm, source=source, target=target)

    def run_end(self, *, algorithm, found, edges, cost, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            found=found,
            edges=edges,
            cost=cost,
            expanded=self._expanded,
            wall_ms=wall_ms,
        )

    def expand(self, node_id, *, algorithm, frontier, visited):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                algorithm=algorithm,
                node_id=node_id,
                frontier=frontier,
                visited=visited,
                expanded=self._expanded,
            )

    def not_found(self, *, algorithm, what, key):
        self._emit("DEBUG", "endpoint_not_found", algorithm=algorithm, what=what, key=key)

    def error(self, *, algorithm, exc: BaseException, **extra):
        self._emit("ERROR", "search_error", algorithm=algorithm, error=str(exc), **extra)
