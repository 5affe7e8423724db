# runtime/registries.py
from collections.abc import Callable
from typing import Any

from garden_route.app.hooks import PlannerHooks
from garden_route.app.protocols import RoutePlanner, RouteScorer
from garden_route.config.models import (
    RoutePlannerDiameterModel,
    RoutePlannerUnion,
    ScorerScenicDiversityModel,
    ScorerUnion,
)
from garden_route.domain.routing.route_planners import DiameterRoutePlanner
from garden_route.domain.scoring.scenic_diversity import ScenicDiversityScorer

ScorerFactory = Callable[[ScorerUnion, dict[str, Any]], RouteScorer]
RoutePlannerFactory = Callable[[RoutePlannerUnion, dict[str, Any]], RoutePlanner]

_scorer_registry: dict[str, ScorerFactory] = {}
_route_planner_registry: dict[str, RoutePlannerFactory] = {}


# ------------------- Scorer registries ---------------------------


def register_scorer(kind: str):
    def deco(fn: ScorerFactory):
        _scorer_registry[kind] = fn
        return fn

    return deco


def make_scorer(cfg: ScorerUnion) -> RouteScorer:
    try:
        factory = _scorer_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown scorer kind {cfg.kind!r}")
    return factory(cfg, {})


@register_scorer("scenic_diversity")
def _make_scenic_diversity(cfg: ScorerScenicDiversityModel, deps):
    if not isinstance(cfg, ScorerScenicDiversityModel):
        raise TypeError(cfg)
    return ScenicDiversityScorer(near_m=cfg.near_m, plant_margin_m=cfg.plant_margin_m)


# ------------------- Route planner registries ---------------------------


def register_route_planner(kind: str):
    def deco(fn: RoutePlannerFactory):
        _route_planner_registry[kind] = fn
        return fn

    return deco


def make_route_planner(
    cfg: RoutePlannerUnion, *, scorer: RouteScorer, hooks: PlannerHooks | None = None
) -> RoutePlanner:
    try:
        factory = _route_planner_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown route planner kind {cfg.kind!r}")
    return factory(cfg, {"scorer": scorer, "hooks": hooks})


@register_route_planner("diameter")
def _make_diameter(cfg: RoutePlannerDiameterModel, deps):
    if not isinstance(cfg, RoutePlannerDiameterModel):
        raise TypeError(cfg)
    return DiameterRoutePlanner(deps["scorer"], start_node=cfg.start_node, hooks=deps["hooks"])
