"""
Point model and color helpers.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .vectors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_COLOR = '#039'


@dataclass(frozen=True)
class Point:
    """
    A data point with a display color.

    Parameters
    ----------
    coords : sequence of float
        Coordinates; coerced to a tuple of floats. Must be non-empty.
    color : str
        CSS color string; defaults to '#039'.
    """
    coords: Tuple[float, ...]
    color: str = DEFAULT_COLOR

    def __post_init__(self):
        coords = tuple(float(c) for c in self.coords)
        if not coords:
            raise InvalidInputError("Point coords must be non-empty")
        object.__setattr__(self, 'coords', coords)

    @property
    def dim(self) -> int:
        return len(self.coords)


def _linear_scale(values: np.ndarray, lo: float = 0.0, hi: float = 255.0) -> np.ndarray:
    """Map values linearly from their extent onto [lo, hi]; a flat extent maps to the midpoint."""
    vmin, vmax = values.min(), values.max()
    if vmax == vmin:
        return np.full(values.shape, (lo + hi) / 2)
    return lo + (values - vmin) / (vmax - vmin) * (hi - lo)


def add_spatial_colors(points: Sequence[Point]) -> List[Point]:
    """
    Color points by their position on the first two axes.

    Parameters
    ----------
    points : sequence of Point
        Points with at least two coordinates.

    Returns
    -------
    list[Point]
        New points with color 'rgb(20,g,b)', where g and b are axis 0 and
        axis 1 mapped onto [0, 255] and truncated to integers.
    """
    if len(points) == 0:
        return []

    if any(p.dim < 2 for p in points):
        raise InvalidInputError("spatial coloring needs points with at least 2 coordinates")

    xy = np.array([p.coords[:2] for p in points], dtype=float)
    g = _linear_scale(xy[:, 0])
    b = _linear_scale(xy[:, 1])

    return [
        dataclasses.replace(p, color=f"rgb(20,{int(c1)},{int(c2)})")
        for p, c1, c2 in zip(points, g, b)
    ]


def angle_color(t: float) -> str:
    """
    HSL color for an angle in radians.

    The hue is ``trunc(300 * t / 2pi)`` and is not wrapped, so angles outside
    [0, 2pi) give hues outside [0, 300). Non-finite angles give hue 0.
    """
    h = 300 * t / (2 * math.pi)
    hue = int(h) if math.isfinite(h) else 0
    return f"hsl({hue},50%,50%)"


def make_points(originals: Iterable[Sequence[float]]) -> List[Point]:
    """Wrap raw coordinate rows as points colored by 2D location."""
    return add_spatial_colors([Point(p) for p in originals])


def points_to_frame(points: Sequence[Point], coord_prefix: str = "x") -> pd.DataFrame:
    """
    Tabulate points as a DataFrame.

    Returns
    -------
    pd.DataFrame
        Columns x0..x{d-1} followed by 'color', one row per point in order.
    """
    if len(points) == 0:
        return pd.DataFrame({'color': pd.Series([], dtype=object)})

    dims = {p.dim for p in points}
    if len(dims) != 1:
        raise InvalidInputError(f"points have mixed dimensionality: {sorted(dims)}")

    coords = np.array([p.coords for p in points], dtype=float)
    df = pd.DataFrame(coords, columns=[f'{coord_prefix}{j}' for j in range(coords.shape[1])])
    df['color'] = [p.color for p in points]
    return df
