import numpy as np
import pytest

from garden_route.domain.entities.geography import (
    GardenFeatures,
    Plant,
    Point,
    Polyline,
    WaterBody,
)
from garden_route.domain.scoring.scenic_diversity import SceneType, ScenicDiversityScorer


def chain(*pts) -> tuple[Point, ...]:
    return tuple(Point(float(x), float(y)) for x, y in pts)


# ---------- Fixtures


@pytest.fixture
def scorer() -> ScenicDiversityScorer:
    return ScenicDiversityScorer()


@pytest.fixture
def features() -> GardenFeatures:
    # a pond edge along y=0 from x=0..10, a rock chain at x=20,
    # a pavilion wall at x=40, one tree at (60, 0)
    return GardenFeatures(
        waters=[WaterBody(outer=chain((0, 0), (10, 0)))],
        rocks=[Polyline(chain((20, -5), (20, 5)))],
        solid_buildings=[],
        semi_open_buildings=[Polyline(chain((40, -5), (40, 5)))],
        plants=[Plant(60.0, 0.0, 1.0)],
    )


# ---------- Classification


def test_each_category_is_detected(scorer, features):
    assert scorer.classify(Point(5.0, 1.0), features) is SceneType.WATER
    assert scorer.classify(Point(21.0, 0.0), features) is SceneType.ROCK
    assert scorer.classify(Point(39.0, 3.0), features) is SceneType.BUILDING
    assert scorer.classify(Point(61.5, 0.0), features) is SceneType.PLANT
    assert scorer.classify(Point(30.0, 0.0), features) is SceneType.PLAIN


def test_water_outranks_rock():
    f = GardenFeatures(
        waters=[WaterBody(outer=chain((0, 0), (10, 0)))],
        rocks=[Polyline(chain((0, 1), (10, 1)))],
    )
    assert ScenicDiversityScorer().classify(Point(5.0, 0.5), f) is SceneType.WATER


def test_water_holes_do_not_count():
    f = GardenFeatures(
        waters=[WaterBody(outer=chain((0, 0), (100, 0)), holes=(chain((50, 50), (60, 50)),))]
    )
    assert ScenicDiversityScorer().classify(Point(55.0, 50.5), f) is SceneType.PLAIN


def test_segment_distance_is_clamped_at_chain_ends(scorer, features):
    assert scorer.classify(Point(11.5, 0.0), features) is SceneType.WATER
    assert scorer.classify(Point(12.0, 0.0), features) is SceneType.PLAIN


def test_plant_reach_is_radius_plus_margin(scorer, features):
    assert scorer.classify(Point(61.9, 0.0), features) is SceneType.PLANT
    assert scorer.classify(Point(62.0, 0.0), features) is SceneType.PLAIN


def test_thresholds_are_configurable(features):
    wide = ScenicDiversityScorer(near_m=5.0, plant_margin_m=3.0)
    assert wide.classify(Point(5.0, 4.0), features) is SceneType.WATER
    assert wide.classify(Point(63.5, 0.0), features) is SceneType.PLANT


# ---------- Scoring


def test_score_counts_transitions(scorer, features):
    path = [
        Point(30.0, 0.0),  # plain
        Point(5.0, 1.0),  # water
        Point(6.0, 1.0),  # water
        Point(30.0, 1.0),  # plain
        Point(20.5, 0.0),  # rock
    ]
    assert scorer.scenes(path, features) == [
        SceneType.PLAIN,
        SceneType.WATER,
        SceneType.WATER,
        SceneType.PLAIN,
        SceneType.ROCK,
    ]
    assert scorer.score(path, features) == pytest.approx(3 / 4)


def test_single_category_path_scores_zero(scorer, features):
    path = [Point(30.0, y) for y in range(-20, 21, 5)]
    assert scorer.score(path, features) == 0.0


@pytest.mark.parametrize("path", [[], [Point(5.0, 1.0)]])
def test_degenerate_paths_score_zero(scorer, features, path):
    assert scorer.score(path, features) == 0.0


def test_score_stays_in_unit_interval(scorer, features):
    rng = np.random.default_rng(11)
    for _ in range(25):
        n = int(rng.integers(0, 40))
        path = [Point(*xy) for xy in rng.uniform(-10, 70, size=(n, 2))]
        s = scorer.score(path, features)
        assert 0.0 <= s <= 1.0


def test_alternating_path_scores_one(scorer, features):
    path = [Point(5.0, 0.0), Point(30.0, 0.0)] * 3
    assert scorer.score(path, features) == 1.0
