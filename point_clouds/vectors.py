"""
Small vector helpers shared by the point-cloud generators.
"""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import List, Sequence, Union

import numpy as np
from scipy.spatial.distance import pdist, squareform

logger = logging.getLogger(__name__)

RandomState = Union[None, int, np.random.Generator]


class InvalidInputError(ValueError):
    """Raised when vector lengths mismatch or a generator parameter is invalid."""


def check_count(name: str, value) -> int:
    """Validate a non-negative integer count; integral floats are accepted."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not isinstance(value, Integral):
        if not float(value).is_integer():
            raise InvalidInputError(f"{name} must be an integer, got {value}")
    value = int(value)
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def check_dim(name: str, value) -> int:
    """Validate a dimension: an integer count of at least 1."""
    value = check_count(name, value)
    if value < 1:
        raise InvalidInputError(f"{name} must be at least 1, got {value}")
    return value


def resolve_rng(rng: RandomState = None) -> np.random.Generator:
    """
    Return a local NumPy Generator.

    Parameters
    ----------
    rng : None | int | np.random.Generator
        An existing Generator is returned unchanged; a seed or None builds a
        fresh one.

    Notes
    -----
    Never touches the global ``np.random`` state.
    """
    return np.random.default_rng(rng)


def _as_vector(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float).ravel()


def _check_same_length(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[0] != b.shape[0]:
        raise InvalidInputError(f"vector lengths differ: {a.shape[0]} != {b.shape[0]}")


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two equal-length vectors."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return float(np.sqrt(np.sum((a - b) ** 2)))


def normal_vector(dim: int, rng: RandomState = None) -> np.ndarray:
    """Draw ``dim`` independent standard normal values."""
    dim = check_count("dim", dim)
    return resolve_rng(rng).standard_normal(dim)


def scale(vector: Sequence[float], a: float) -> np.ndarray:
    """Return ``vector`` multiplied by ``a``; the input is left untouched."""
    return _as_vector(vector) * a


def add(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Element-wise sum of two equal-length vectors."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a + b


def distance_matrix(points: Sequence) -> List[float]:
    """
    Flattened pairwise Euclidean distance matrix.

    Parameters
    ----------
    points : sequence of Point or coordinate sequences
        Items may be ``Point`` objects (their ``coords`` are used) or raw
        coordinate rows.

    Returns
    -------
    list[float]
        Row-major, length ``n**2``; entry ``i*n + j`` is the distance between
        points i and j in input order.

    Raises
    ------
    InvalidInputError
        If points have differing dimensionality.

    Notes
    -----
    Built from ``pdist`` + ``squareform`` so the diagonal is exactly zero and
    the matrix is exactly symmetric.
    """
    n = len(points)
    if n == 0:
        return []

    rows = [getattr(p, 'coords', p) for p in points]
    dims = {len(r) for r in rows}
    if len(dims) != 1:
        raise InvalidInputError(f"points have mixed dimensionality: {sorted(dims)}")

    X = np.asarray(rows, dtype=float)
    D = squareform(pdist(X, metric='euclidean'))

    logger.debug(f"Computed {n}x{n} distance matrix over {X.shape[1]} dimensions")

    return D.ravel().tolist()
