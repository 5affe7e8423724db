# io/route_logging.py
import json
import logging
import sys

from garden_route.app.hooks import NoopHooks
from garden_route.domain.entities.geography import GraphEdge, GraphNode
from garden_route.domain.entities.route import NoRouteReason


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
        return json.dumps(payload)


def _default_json_logger(name="garden_route", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class RouteLogging(NoopHooks):
    """
    Structured JSON logs for graph construction and route planning.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    @staticmethod
    def _xy(n: GraphNode) -> list[float]:
        return [round(n.x, 3), round(n.y, 3)]

    # --------------------------------------------------------

    def graph_built(self, *, nodes: int, edges: int, bridges: int, components: int):
        self._emit(
            "INFO", "graph_built", nodes=nodes, edges=edges, bridges=bridges, components=components
        )

    def bridge_added(self, edge: GraphEdge, *, remaining: int):
        if self.debug:
            self._emit(
                "DEBUG",
                "bridge_added",
                source=edge.source,
                target=edge.target,
                length=edge.length,
                remaining=remaining,
            )

    def endpoints_selected(self, start: GraphNode, end: GraphNode, *, spread: float):
        self._emit(
            "INFO",
            "endpoints_selected",
            start=start.id,
            end=end.id,
            start_xy=self._xy(start),
            end_xy=self._xy(end),
            spread=spread,
        )

    def route_planned(self, *, nodes: int, length_m: float, score: float):
        self._emit("INFO", "route_planned", nodes=nodes, length_m=length_m, score=score)

    def no_route(self, *, reason: NoRouteReason):
        self._emit("WARNING", "no_route", reason=reason.value)
