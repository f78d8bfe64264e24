from dataclasses import dataclass

from pathkit.domain.entities.network import Edge


@dataclass(frozen=True)
class Waypoint:
    node_id: int
    leg: Edge | None = None  # None at the origin
    previous: int | None = None  # index into the owning Trail


class Trail:
    """Arena of waypoints addressed by index.

    Each entry points back at its parent's index, so chains share prefixes
    without copying and handing a waypoint around is just passing an int.
    """

    def __init__(self):
        self._waypoints: list[Waypoint] = []

    def __len__(self) -> int:
        return len(self._waypoints)

    def __getitem__(self, index: int) -> Waypoint:
        return self._waypoints[index]

    def add(self, node_id: int, leg: Edge | None = None, previous: int | None = None) -> int:
        self._waypoints.append(Waypoint(node_id, leg, previous))
        return len(self._waypoints) - 1

    def origin(self, node_id: int) -> int:
        return self.add(node_id)

    def extend(self, previous: int, leg: Edge) -> int:
        return self.add(leg.destination, leg, previous)

    def _legs(self, index: int | None):
        while index is not None:
            wp = self._waypoints[index]
            if wp.leg is not None:
                yield wp.leg
            index = wp.previous

    def walk_back(self, index: int) -> list[Edge]:
        """Edge sequence from the origin to ``index``, in traversal order."""
        legs = list(self._legs(index))
        legs.reverse()
        return legs

    def walk_back_set(self, index: int) -> set[Edge]:
        """Edges on the chain ending at ``index``; order is irrelevant."""
        return set(self._legs(index))
