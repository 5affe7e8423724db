from typing import Protocol

from garden_route.domain.entities.geography import GraphEdge, GraphNode
from garden_route.domain.entities.route import NoRouteReason


class PlannerHooks(Protocol):
    def graph_built(self, *, nodes: int, edges: int, bridges: int, components: int): ...
    def bridge_added(self, edge: GraphEdge, *, remaining: int): ...
    def endpoints_selected(self, start: GraphNode, end: GraphNode, *, spread: float): ...
    def route_planned(self, *, nodes: int, length_m: float, score: float): ...
    def no_route(self, *, reason: NoRouteReason): ...


class NoopHooks:
    def graph_built(self, **_):
        pass

    def bridge_added(self, *_, **__):
        pass

    def endpoints_selected(self, *_, **__):
        pass

    def route_planned(self, **_):
        pass

    def no_route(self, **_):
        pass
