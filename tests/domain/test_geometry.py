import math

import numpy as np
import pytest

from garden_route.domain.entities.geography import Point
from garden_route.domain.geometry import (
    distance,
    near_chain,
    pairwise_distances,
    point_segment_distance,
    segment_distances,
)


def test_distance_is_euclidean():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)


def test_point_segment_distance_projects_inside_segment():
    a, b = Point(0.0, 0.0), Point(10.0, 0.0)
    assert point_segment_distance(Point(5.0, 3.0), a, b) == pytest.approx(3.0)


def test_point_segment_distance_clamps_to_endpoints():
    # beyond b the distance is to b, not to the infinite line
    a, b = Point(0.0, 0.0), Point(10.0, 0.0)
    assert point_segment_distance(Point(13.0, 4.0), a, b) == pytest.approx(5.0)
    assert point_segment_distance(Point(-3.0, 0.0), a, b) == pytest.approx(3.0)


def test_zero_length_segment_degrades_to_point_distance():
    a = Point(1.0, 1.0)
    assert point_segment_distance(Point(4.0, 5.0), a, a) == pytest.approx(5.0)


def test_segment_distances_match_scalar_version():
    rng = np.random.default_rng(7)
    chain = [Point(*xy) for xy in rng.uniform(-50, 50, size=(6, 2))]
    chain.insert(3, chain[2])  # zero-length piece in the middle
    for xy in rng.uniform(-60, 60, size=(20, 2)):
        p = Point(*xy)
        expected = [point_segment_distance(p, a, b) for a, b in zip(chain, chain[1:])]
        assert np.allclose(segment_distances(p, chain), expected)


def test_short_chains_are_never_near():
    p = Point(0.0, 0.0)
    assert segment_distances(p, [p]).size == 0
    assert segment_distances(p, []).size == 0
    assert not near_chain(p, [p], 2.0)


def test_near_chain_threshold_is_strict():
    chain = [Point(0.0, 0.0), Point(10.0, 0.0)]
    assert near_chain(Point(5.0, 1.99), chain, 2.0)
    assert not near_chain(Point(5.0, 2.0), chain, 2.0)


def test_pairwise_distances_shape_and_values():
    a = np.array([[0.0, 0.0], [1.0, 0.0]])
    b = np.array([[0.0, 3.0], [4.0, 0.0], [1.0, 1.0]])
    d = pairwise_distances(a, b)
    assert d.shape == (2, 3)
    assert d[0, 0] == pytest.approx(3.0)
    assert d[1, 1] == pytest.approx(3.0)
    assert d[1, 2] == pytest.approx(1.0)
    assert d[0, 2] == pytest.approx(math.sqrt(2))
