# pathkit/domain/errors.py


class PathkitError(Exception):
    """Base class for every error raised by the toolkit."""


class NotFound(PathkitError, LookupError):
    """Unknown node id or out-of-grid coordinate at a search entry point.

    Entry points recover this into an empty result; it never escapes them.
    """

    def __init__(self, what: str, key) -> None:
        super().__init__(f"{what} not found: {key!r}")
        self.what = what
        self.key = key


class ConfigurationError(PathkitError):
    """A heuristic needs node positions that were never offered to the graph."""


class MissingPosition(PathkitError, LookupError):
    """The position table exists but lacks the queried node id."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Node position missing for given node id: {node_id}")
        self.node_id = node_id


class OutOfBounds(PathkitError, IndexError):
    """Grid coordinate or node id beyond the grid extents."""
