# garden_route/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from garden_route.app.hooks import NoopHooks, PlannerHooks
from garden_route.app.protocols import RoutePlanner, RouteScorer
from garden_route.config.models import PlannerModel
from garden_route.domain.entities.geography import GardenData
from garden_route.domain.entities.route import RouteResult
from garden_route.domain.graph.path_graph import PathGraph
from garden_route.io.garden_payload import GardenPayload
from garden_route.io.route_logging import RouteLogging  # JSON logs
from garden_route.runtime.registries import make_route_planner, make_scorer


@dataclass
class App:
    garden: GardenData
    graph: PathGraph
    scorer: RouteScorer
    planner: RoutePlanner
    hooks: PlannerHooks

    def plan(self) -> RouteResult:
        return self.planner.plan(self.graph, self.garden.features)


def build(
    garden: GardenData | Mapping,
    cfg: PlannerModel | Mapping | None = None,
    *,
    use_logging: bool = True,
) -> App:
    # 0) Validate inputs
    model = cfg if isinstance(cfg, PlannerModel) else PlannerModel.model_validate(cfg or {})
    data = garden if isinstance(garden, GardenData) else GardenPayload.model_validate(garden).to_domain()

    # 1) Hooks
    hooks = (
        RouteLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Scorer & planner
    scorer = make_scorer(model.scorer)
    planner = make_route_planner(model.route_planner, scorer=scorer, hooks=hooks)

    # 3) Connected road graph
    graph = PathGraph.build(data.roads, tolerance=model.graph.tolerance, hooks=hooks)

    return App(data, graph, scorer, planner, hooks)


def plan_optimal_route(
    garden: GardenData | Mapping, cfg: PlannerModel | Mapping | None = None, **kw
) -> RouteResult:
    """Best sightseeing route for a garden; check ``result.ok`` before drawing it."""
    return build(garden, cfg, **kw).plan()
