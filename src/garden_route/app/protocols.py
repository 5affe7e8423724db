from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from garden_route.domain.entities.geography import (
    GardenFeatures,
    GraphEdge,
    GraphNode,
    Point,
)
from garden_route.domain.entities.route import RouteResult


@runtime_checkable
class RoadGraph(Protocol):
    """
    Read-only view of a connected road network.
    Node ids are dense, 0..len(nodes)-1; edges are undirected.
    """

    nodes: list[GraphNode]
    edges: list[GraphEdge]

    def neighbors(self, node_id: int) -> Iterable[tuple[int, float]]: ...


@runtime_checkable
class RouteScorer(Protocol):
    """
    Responsibilities:
      • Rate an ordered walk through the garden against its scenic features.
    Higher is better; the scale is scorer-specific.
    """

    def score(self, path: Sequence[Point], features: GardenFeatures) -> float: ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Choose a route through a road graph and score it.
      • Report "no route" through the result, never by raising.
    """

    def plan(self, graph: RoadGraph, features: GardenFeatures) -> RouteResult: ...
