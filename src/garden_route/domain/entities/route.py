import math
from dataclasses import dataclass
from enum import Enum

from garden_route.domain.entities.geography import GraphNode, Point


class NoRouteReason(Enum):
    EMPTY_GRAPH = "empty_graph"
    UNREACHABLE_TARGET = "unreachable_target"


@dataclass
class RouteResult:
    path: list[GraphNode] | None
    score: float
    length_m: float = 0.0
    reason: NoRouteReason | None = None

    @classmethod
    def no_route(cls, reason: NoRouteReason) -> "RouteResult":
        return cls(path=None, score=-math.inf, reason=reason)

    @property
    def ok(self) -> bool:
        return self.path is not None

    @property
    def start(self) -> GraphNode | None:
        return self.path[0] if self.path else None

    @property
    def end(self) -> GraphNode | None:
        return self.path[-1] if self.path else None

    def points(self) -> list[Point]:
        """Plain coordinates for the rendering layer; empty when there is no route."""
        return [Point(n.x, n.y) for n in self.path or ()]
