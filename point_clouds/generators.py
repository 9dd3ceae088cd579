"""
Synthetic point-cloud generators for dimensionality-reduction demos.

Each generator returns a list of ``Point`` objects. Randomized generators take
a keyword-only ``rng`` (seed, ``np.random.Generator`` or None) and never use
the global NumPy random state.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from .points import Point, angle_color, make_points
from .vectors import InvalidInputError, RandomState, check_count, check_dim, resolve_rng

logger = logging.getLogger(__name__)

CLUSTER_COLORS = ('#039', '#f90', '#6a3')

# Points per angle group in random_circle_cluster_data
CIRCLE_CLUSTER_SIZE = 20

RING_TILT = 0.4


def _interleave(*groups: Tuple[np.ndarray, Sequence[str]]) -> List[Point]:
    """
    Emit points round-robin across equally sized groups.

    Each group is a (coords, colors) pair where coords has shape (n, dim).
    """
    n = len(groups[0][0])
    points = []
    for i in range(n):
        for coords, colors in groups:
            points.append(Point(coords[i], colors[i]))
    return points


def _same(color: str, n: int) -> List[str]:
    return [color] * n


# ---------------------------------------------------------------------------
# Grids, clouds and cubes
# ---------------------------------------------------------------------------

def grid_data(size: int) -> List[Point]:
    """Square grid of integer points, colored by position."""
    size = check_count("size", size)
    points = make_points((x, y) for x in range(size) for y in range(size))
    logger.debug(f"grid_data(size={size}) -> {len(points)} points")
    return points


def gaussian_data(n: int, dim: int, *, rng: RandomState = None) -> List[Point]:
    """Symmetric standard normal cloud."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    X = rng.standard_normal((n, dim))
    logger.debug(f"gaussian_data(n={n}, dim={dim}) -> {n} points")
    return [Point(row) for row in X]


def long_gaussian_data(n: int, dim: int, *, rng: RandomState = None) -> List[Point]:
    """Elongated Gaussian ellipsoid: coordinate j is scaled by 1 / (1 + j)."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    X = rng.standard_normal((n, dim)) / (1 + np.arange(dim))
    logger.debug(f"long_gaussian_data(n={n}, dim={dim}) -> {n} points")
    return [Point(row) for row in X]


def cube_data(n: int, dim: int, *, rng: RandomState = None) -> List[Point]:
    """Uniform points from the unit cube."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    X = rng.random((n, dim))
    logger.debug(f"cube_data(n={n}, dim={dim}) -> {n} points")
    return [Point(row) for row in X]


def simplex_data(n: int, noise: float = 0.5, *, rng: RandomState = None) -> List[Point]:
    """
    Points near the vertices of a simplex: all pairwise distances are roughly equal.

    Point i has coordinate i equal to ``1 + noise * normal()`` and zeros
    elsewhere. With ``noise=0`` the output is exactly the standard basis.
    """
    n = check_count("n", n)
    if noise < 0:
        raise InvalidInputError(f"noise must be non-negative, got {noise}")

    X = np.zeros((n, n))
    if noise > 0:
        rng = resolve_rng(rng)
        X[np.diag_indices(n)] = 1 + noise * rng.standard_normal(n)
    else:
        X[np.diag_indices(n)] = 1.0

    logger.debug(f"simplex_data(n={n}, noise={noise}) -> {n} points")
    return [Point(row) for row in X]


# ---------------------------------------------------------------------------
# Circles
# ---------------------------------------------------------------------------

def _circle_points(t: Sequence[float]) -> List[Point]:
    return [Point((math.cos(a), math.sin(a)), angle_color(a)) for a in t]


def circle_data(num_points: int) -> List[Point]:
    """Evenly spaced points on the unit circle, hue by angle."""
    num_points = check_count("num_points", num_points)
    t = [2 * math.pi * i / num_points for i in range(num_points)]
    logger.debug(f"circle_data(num_points={num_points})")
    return _circle_points(t)


def random_circle_data(num_points: int, *, rng: RandomState = None) -> List[Point]:
    """Uniformly random points on the unit circle, hue by angle."""
    num_points = check_count("num_points", num_points)
    rng = resolve_rng(rng)
    t = 2 * math.pi * rng.random(num_points)
    logger.debug(f"random_circle_data(num_points={num_points})")
    return _circle_points(t)


def random_circle_cluster_data(num_points: int, *, rng: RandomState = None) -> List[Point]:
    """Small tight clusters placed at evenly spaced angles around the unit circle."""
    num_points = check_count("num_points", num_points)
    rng = resolve_rng(rng)

    points = []
    for i in range(num_points):
        t = 2 * math.pi * i / num_points
        color = angle_color(t)
        jitter = 0.01 * rng.standard_normal((CIRCLE_CLUSTER_SIZE, 2))
        for dx, dy in jitter:
            points.append(Point((math.cos(t) + dx, math.sin(t) + dy), color))

    logger.debug(f"random_circle_cluster_data(num_points={num_points}) -> {len(points)} points")
    return points


# ---------------------------------------------------------------------------
# Clusters
# ---------------------------------------------------------------------------

def two_different_clusters_data_2d(n: int, *, rng: RandomState = None) -> List[Point]:
    """A wide 2D cluster and a narrow one far to its right."""
    n = check_count("n", n)
    rng = resolve_rng(rng)
    wide = 10 * rng.standard_normal((n, 2))
    narrow = rng.standard_normal((n, 2))
    narrow[:, 0] += 100
    return _interleave(
        (wide, _same(CLUSTER_COLORS[0], n)),
        (narrow, _same(CLUSTER_COLORS[1], n)),
    )


def two_clusters_data(n: int, dim: int = 50, *, rng: RandomState = None) -> List[Point]:
    """Two equal unit-variance clusters, offset by 10 on axis 0."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    a = rng.standard_normal((n, dim))
    b = rng.standard_normal((n, dim))
    b[:, 0] += 10
    logger.debug(f"two_clusters_data(n={n}, dim={dim}) -> {2 * n} points")
    return _interleave(
        (a, _same(CLUSTER_COLORS[0], n)),
        (b, _same(CLUSTER_COLORS[1], n)),
    )


def two_different_clusters_data(
    n: int,
    dim: int = 50,
    scale: float = 10,
    *,
    rng: RandomState = None
) -> List[Point]:
    """
    Two clusters with different spreads.

    The second cluster has its standard deviation divided by ``scale`` and is
    shifted by 20 on axis 0.
    """
    n, dim = check_count("n", n), check_dim("dim", dim)
    if scale <= 0:
        raise InvalidInputError(f"scale must be positive, got {scale}")
    rng = resolve_rng(rng)
    a = rng.standard_normal((n, dim))
    b = rng.standard_normal((n, dim)) / scale
    b[:, 0] += 20
    logger.debug(f"two_different_clusters_data(n={n}, dim={dim}, scale={scale}) -> {2 * n} points")
    return _interleave(
        (a, _same(CLUSTER_COLORS[0], n)),
        (b, _same(CLUSTER_COLORS[1], n)),
    )


def _three_clusters(n: int, dim: int, rng: np.random.Generator) -> List[Point]:
    groups = []
    for offset, color in zip((0, 10, 50), CLUSTER_COLORS):
        X = rng.standard_normal((n, dim))
        X[:, 0] += offset
        groups.append((X, _same(color, n)))
    return _interleave(*groups)


def three_clusters_data_2d(n: int, *, rng: RandomState = None) -> List[Point]:
    """Three 2D clusters at offsets 0, 10 and 50 on the x axis."""
    n = check_count("n", n)
    return _three_clusters(n, 2, resolve_rng(rng))


def three_clusters_data(n: int, dim: int = 50, *, rng: RandomState = None) -> List[Point]:
    """Three clusters at offsets 0, 10 and 50 on axis 0, in any dimension."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    logger.debug(f"three_clusters_data(n={n}, dim={dim}) -> {3 * n} points")
    return _three_clusters(n, dim, resolve_rng(rng))


def subset_clusters_data(n: int, dim: int = 2, *, rng: RandomState = None) -> List[Point]:
    """A tight unit cluster inside a sparse cluster 50 times wider."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    tight = rng.standard_normal((n, dim))
    wide = 50 * rng.standard_normal((n, dim))
    logger.debug(f"subset_clusters_data(n={n}, dim={dim}) -> {2 * n} points")
    return _interleave(
        (tight, _same(CLUSTER_COLORS[0], n)),
        (wide, _same(CLUSTER_COLORS[1], n)),
    )


def long_cluster_data(n: int, *, rng: RandomState = None) -> List[Point]:
    """Two long parallel diagonal clusters close to each other."""
    n = check_count("n", n)
    rng = resolve_rng(rng)
    s = 0.03 * n
    i = np.arange(n, dtype=float)[:, None]
    a = i + s * rng.standard_normal((n, 2))
    b = i + s * rng.standard_normal((n, 2)) + np.array([n / 5, -n / 5])
    logger.debug(f"long_cluster_data(n={n}) -> {2 * n} points")
    return _interleave(
        (a, _same(CLUSTER_COLORS[0], n)),
        (b, _same(CLUSTER_COLORS[1], n)),
    )


# ---------------------------------------------------------------------------
# Rings and knots in 3D
# ---------------------------------------------------------------------------

def _tilt(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Rotate about axis 0 by RING_TILT radians."""
    cos, sin = math.cos(RING_TILT), math.sin(RING_TILT)
    return (x, cos * y + sin * z, -sin * y + cos * z)


def _rings(n: int, offset: float) -> List[Point]:
    points = []
    for i in range(n):
        t = 2 * math.pi * i / n
        sin, cos = math.sin(t), math.cos(t)
        points.append(Point(_tilt(cos, sin, 0), CLUSTER_COLORS[1]))
        points.append(Point(_tilt(offset + cos, 0, sin), CLUSTER_COLORS[0]))
    return points


def unlink_data(n: int) -> List[Point]:
    """Two unlinked rings in 3D, 3 units apart."""
    n = check_count("n", n)
    logger.debug(f"unlink_data(n={n}) -> {2 * n} points")
    return _rings(n, 3)


def link_data(n: int) -> List[Point]:
    """Two linked rings in 3D."""
    n = check_count("n", n)
    logger.debug(f"link_data(n={n}) -> {2 * n} points")
    return _rings(n, 1)


def trefoil_data(n: int) -> List[Point]:
    """Points along a trefoil knot, hue by curve parameter."""
    n = check_count("n", n)
    points = []
    for i in range(n):
        t = 2 * math.pi * i / n
        x = math.sin(t) + 2 * math.sin(2 * t)
        y = math.cos(t) - 2 * math.cos(2 * t)
        z = -math.sin(3 * t)
        points.append(Point((x, y, z), angle_color(t)))
    logger.debug(f"trefoil_data(n={n}) -> {n} points")
    return points


# ---------------------------------------------------------------------------
# Walks and steps
# ---------------------------------------------------------------------------

def _walk_colors(n: int) -> List[str]:
    return [angle_color(1.5 * math.pi * i / n) for i in range(n)]


def ortho_curve(n: int) -> List[Point]:
    """Mutually orthogonal unit steps: point i has its first i coordinates set to 1."""
    n = check_count("n", n)
    X = np.tril(np.ones((n, n)), k=-1)
    logger.debug(f"ortho_curve(n={n}) -> {n} points")
    return [Point(row, color) for row, color in zip(X, _walk_colors(n))]


def random_walk(n: int, dim: int, *, rng: RandomState = None) -> List[Point]:
    """Gaussian random walk from the origin; the first point is one step in."""
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    X = np.cumsum(rng.standard_normal((n, dim)), axis=0)
    logger.debug(f"random_walk(n={n}, dim={dim}) -> {n} points")
    return [Point(row, color) for row, color in zip(X, _walk_colors(n))]


def random_jump(n: int, dim: int, *, rng: RandomState = None) -> List[Point]:
    """
    Random walk with extra per-step noise.

    Each emitted point is the walk position plus independent normal noise
    scaled by ``sqrt(dim)``. The noise does not feed back into the walk.
    """
    n, dim = check_count("n", n), check_dim("dim", dim)
    rng = resolve_rng(rng)
    walk = np.cumsum(rng.standard_normal((n, dim)), axis=0)
    jumps = math.sqrt(dim) * rng.standard_normal((n, dim))
    X = walk + jumps
    logger.debug(f"random_jump(n={n}, dim={dim}) -> {n} points")
    return [Point(row, color) for row, color in zip(X, _walk_colors(n))]
