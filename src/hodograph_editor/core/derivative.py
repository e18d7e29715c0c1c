"""Hodograph (first-difference) construction."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .points import points_array


def derive(points: Iterable[Sequence[float]]) -> np.ndarray:
    """Return the difference vectors ``points[i + 1] - points[i]``.

    The result has shape ``(max(0, n - 1), 2)``; zero or one input point
    gives an empty hodograph.
    """
    array = points_array(points)
    if array.shape[0] < 2:
        return np.empty((0, 2), dtype=np.float64)
    return np.diff(array, axis=0)
