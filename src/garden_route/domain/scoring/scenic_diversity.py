from collections.abc import Sequence
from enum import Enum

import numpy as np

from garden_route.app.protocols import RouteScorer
from garden_route.domain.entities.geography import GardenFeatures, Point
from garden_route.domain.geometry import as_xy, near_chain


class SceneType(Enum):
    WATER = "water"
    ROCK = "rock"
    BUILDING = "building"
    PLANT = "plant"
    PLAIN = "plain"


class ScenicDiversityScorer(RouteScorer):
    """
    Score = fraction of consecutive path points whose scene type differs.

    Each point gets exactly one scene type, checked in priority order
    water > rock > building > plant > plain. A route that keeps switching
    scenery scores close to 1; one that never leaves a single scene type
    scores 0.
    """

    def __init__(self, near_m: float = 2.0, plant_margin_m: float = 1.0):
        self.near_m = near_m
        self.plant_margin_m = plant_margin_m

    def classify(self, p: Point, features: GardenFeatures) -> SceneType:
        if any(near_chain(p, w.outer, self.near_m) for w in features.waters):
            return SceneType.WATER
        if any(near_chain(p, r.points, self.near_m) for r in features.rocks):
            return SceneType.ROCK
        if any(near_chain(p, b.points, self.near_m) for b in features.buildings):
            return SceneType.BUILDING
        if self._near_plant(p, features):
            return SceneType.PLANT
        return SceneType.PLAIN

    def _near_plant(self, p: Point, features: GardenFeatures) -> bool:
        if not features.plants:
            return False
        centers = as_xy(features.plants)
        radii = np.array([pl.radius for pl in features.plants], dtype=float)
        d = np.hypot(centers[:, 0] - p.x, centers[:, 1] - p.y)
        return bool((d < radii + self.plant_margin_m).any())

    def scenes(self, path: Sequence[Point], features: GardenFeatures) -> list[SceneType]:
        return [self.classify(p, features) for p in path]

    def score(self, path: Sequence[Point], features: GardenFeatures) -> float:
        kinds = self.scenes(path, features)
        changes = sum(1 for prev, cur in zip(kinds, kinds[1:]) if cur is not prev)
        return changes / max(1, len(kinds) - 1)
