from collections.abc import Iterable

import numpy as np

from garden_route.app.hooks import NoopHooks, PlannerHooks
from garden_route.domain.entities.geography import GraphEdge, GraphNode, Point, RoadSegment
from garden_route.domain.geometry import as_xy, distance, pairwise_distances


class PathGraph:
    """
    Road network built from surveyed polylines.

    Input points closer than ``tolerance`` to an existing node collapse onto
    that node (first match in insertion order). Edge lengths come from the raw
    input points, so they may differ from node-to-node distance by up to
    ``tolerance``; that approximation is kept on purpose.

    After :meth:`build` the graph is a single connected component (or empty).
    """

    def __init__(self, tolerance: float = 2.0, hooks: PlannerHooks | None = None):
        self.tolerance = tolerance
        self.nodes: list[GraphNode] = []
        self.edges: list[GraphEdge] = []
        self._adj: dict[int, list[tuple[int, float]]] = {}
        self._hooks = hooks or NoopHooks()

    @classmethod
    def build(
        cls,
        roads: Iterable[RoadSegment],
        tolerance: float = 2.0,
        hooks: PlannerHooks | None = None,
    ) -> "PathGraph":
        g = cls(tolerance=tolerance, hooks=hooks)
        for seg in roads:
            g.add_segment(seg)
        components = len(g.connected_components())
        bridges = g.auto_connect()
        g._hooks.graph_built(
            nodes=len(g.nodes), edges=len(g.edges), bridges=len(bridges), components=components
        )
        return g

    # --------------- construction -----------------------------

    def add_node(self, p: Point) -> int:
        for n in self.nodes:
            if distance(n, p) < self.tolerance:
                return n.id
        nid = len(self.nodes)
        self.nodes.append(GraphNode(nid, float(p.x), float(p.y)))
        self._adj[nid] = []
        return nid

    def add_edge(
        self, source: int, target: int, length: float, *, synthetic: bool = False
    ) -> GraphEdge:
        e = GraphEdge(source, target, float(length), synthetic)
        self.edges.append(e)
        self._adj[source].append((target, e.length))
        self._adj[target].append((source, e.length))
        return e

    def add_segment(self, segment: RoadSegment) -> None:
        prev_pt, prev_id = None, None
        for p in segment.points:
            nid = self.add_node(p)
            if prev_pt is not None:
                self.add_edge(prev_id, nid, distance(prev_pt, p))
            prev_pt, prev_id = p, nid

    # --------------- queries ----------------------------------

    def neighbors(self, node_id: int) -> list[tuple[int, float]]:
        return self._adj.get(node_id, [])

    def node_point(self, node_id: int) -> Point:
        n = self.nodes[node_id]
        return Point(n.x, n.y)

    @property
    def bridges(self) -> list[GraphEdge]:
        return [e for e in self.edges if e.synthetic]

    def connected_components(self) -> list[list[int]]:
        seen: set[int] = set()
        comps: list[list[int]] = []
        for n in self.nodes:
            if n.id in seen:
                continue
            seen.add(n.id)
            group, stack = [], [n.id]
            while stack:
                cur = stack.pop()
                group.append(cur)
                for nb, _ in self._adj[cur]:
                    if nb not in seen:
                        seen.add(nb)
                        stack.append(nb)
            comps.append(sorted(group))
        return comps

    # --------------- connectivity repair ----------------------

    def auto_connect(self) -> list[GraphEdge]:
        """Bridge components pairwise at their closest nodes until one remains."""
        comps = self.connected_components()
        added: list[GraphEdge] = []
        xy = as_xy(self.nodes)
        while len(comps) > 1:
            best = (np.inf, -1, -1, 0, 0)  # dist, a, b, comp i, comp j
            for i in range(len(comps)):
                for j in range(i + 1, len(comps)):
                    d = pairwise_distances(xy[comps[i]], xy[comps[j]])
                    k = int(np.argmin(d))  # first minimum in row-major scan order
                    ia, ib = divmod(k, d.shape[1])
                    if d[ia, ib] < best[0]:
                        best = (float(d[ia, ib]), comps[i][ia], comps[j][ib], i, j)
            dist, a, b, i, j = best
            added.append(self.add_edge(a, b, dist, synthetic=True))
            comps[i] = comps[i] + comps[j]
            del comps[j]
            self._hooks.bridge_added(added[-1], remaining=len(comps))
        return added
