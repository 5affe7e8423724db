import heapq
import math
from collections import deque

from garden_route.app.hooks import NoopHooks, PlannerHooks
from garden_route.app.protocols import RoadGraph, RoutePlanner, RouteScorer
from garden_route.domain.entities.geography import GardenFeatures
from garden_route.domain.entities.route import NoRouteReason, RouteResult


def sweep_distances(graph: RoadGraph, start: int) -> dict[int, float]:
    """
    FIFO sweep with additive edge lengths; each node keeps the distance of the
    first edge that reached it. Not Dijkstra: endpoint selection depends on
    exactly this visiting order.
    """
    dist = {start: 0.0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nb, length in graph.neighbors(cur):
            if nb not in dist:
                dist[nb] = dist[cur] + length
                queue.append(nb)
    return dist


def farthest(dist: dict[int, float], default: int) -> int:
    best, best_d = default, 0.0
    for nid in sorted(dist):
        if dist[nid] > best_d:
            best, best_d = nid, dist[nid]
    return best


def shortest_path(graph: RoadGraph, source: int, target: int) -> list[int] | None:
    dist = {source: 0.0}
    prev: dict[int, int] = {}
    settled: set[int] = set()
    heap = [(0.0, source)]  # (distance, node id): equal distances settle lower ids first
    while heap:
        d, cur = heapq.heappop(heap)
        if cur in settled:
            continue
        if cur == target:
            break
        settled.add(cur)
        for nb, length in graph.neighbors(cur):
            if nb in settled:
                continue
            alt = d + length
            if alt < dist.get(nb, math.inf):
                dist[nb], prev[nb] = alt, cur
                heapq.heappush(heap, (alt, nb))

    if target != source and target not in prev:
        return None
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path


class DiameterRoutePlanner(RoutePlanner):
    """
    Route between the two ends of the network's approximate diameter.

    Two FIFO sweeps pick the endpoints (exact on trees, close enough on road
    graphs with few cycles); Dijkstra then finds the walk between them.
    """

    def __init__(
        self, scorer: RouteScorer, *, start_node: int = 0, hooks: PlannerHooks | None = None
    ):
        self.scorer = scorer
        self.start_node = start_node
        self._hooks = hooks or NoopHooks()

    def endpoints(self, graph: RoadGraph) -> tuple[int, int]:
        start = self.start_node if self.start_node < len(graph.nodes) else 0
        far1 = farthest(sweep_distances(graph, start), default=start)
        dist2 = sweep_distances(graph, far1)
        far2 = farthest(dist2, default=far1)
        self._hooks.endpoints_selected(graph.nodes[far1], graph.nodes[far2], spread=dist2[far2])
        return far1, far2

    def plan(self, graph: RoadGraph, features: GardenFeatures) -> RouteResult:
        if not graph.nodes or not graph.edges:
            return self._no_route(NoRouteReason.EMPTY_GRAPH)

        source, target = self.endpoints(graph)
        ids = shortest_path(graph, source, target)
        if ids is None:
            return self._no_route(NoRouteReason.UNREACHABLE_TARGET)

        path = [graph.nodes[i] for i in ids]
        length_m = sum(_edge_length(graph, u, v) for u, v in zip(ids, ids[1:]))
        score = self.scorer.score(path, features)
        self._hooks.route_planned(nodes=len(path), length_m=length_m, score=score)
        return RouteResult(path=path, score=score, length_m=length_m)

    def _no_route(self, reason: NoRouteReason) -> RouteResult:
        self._hooks.no_route(reason=reason)
        return RouteResult.no_route(reason)


def _edge_length(graph: RoadGraph, u: int, v: int) -> float:
    # shortest among parallel edges, which is the one Dijkstra relaxed through
    return min(length for nb, length in graph.neighbors(u) if nb == v)
