import math
from collections.abc import Sequence

import numpy as np

from garden_route.domain.entities.geography import Point


def distance(a, b) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def point_segment_distance(p, a, b) -> float:
    """Distance from p to the closed segment ab (projection clamped to [0, 1])."""
    cx, cy = b.x - a.x, b.y - a.y
    seg_len2 = cx * cx + cy * cy
    t = ((p.x - a.x) * cx + (p.y - a.y) * cy) / seg_len2 if seg_len2 else 0.0
    t = max(0.0, min(1.0, t))
    return math.hypot(p.x - (a.x + t * cx), p.y - (a.y + t * cy))


def as_xy(points: Sequence[Point]) -> np.ndarray:
    """(n, 2) float array of point coordinates."""
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def segment_distances(p, chain: Sequence[Point]) -> np.ndarray:
    """Vectorized point_segment_distance over every consecutive pair of chain."""
    xy = as_xy(chain)
    if len(xy) < 2:
        return np.empty(0)
    a, b = xy[:-1], xy[1:]
    d = b - a
    rel = np.array([p.x, p.y]) - a
    seg_len2 = np.einsum("ij,ij->i", d, d)
    dot = np.einsum("ij,ij->i", rel, d)
    t = np.divide(dot, seg_len2, out=np.zeros_like(dot), where=seg_len2 > 0)
    t = np.clip(t, 0.0, 1.0)
    closest = a + t[:, None] * d
    return np.hypot(p.x - closest[:, 0], p.y - closest[:, 1])


def near_chain(p, chain: Sequence[Point], threshold: float) -> bool:
    return bool((segment_distances(p, chain) < threshold).any())


def pairwise_distances(xy_a: np.ndarray, xy_b: np.ndarray) -> np.ndarray:
    """(len(a), len(b)) Euclidean distance matrix."""
    diff = xy_a[:, None, :] - xy_b[None, :, :]
    return np.hypot(diff[..., 0], diff[..., 1])
