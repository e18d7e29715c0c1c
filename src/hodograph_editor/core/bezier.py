"""De Casteljau evaluation of Bézier curves.

The same evaluator serves the primary curve (control points) and the
hodograph's own curve (difference vectors). All parameter samples are
evaluated together: the working array has shape ``(samples, k, 2)`` and
each pass of the recurrence replaces it with the linear interpolations of
consecutive pairs until a single point per sample remains.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Sequence, Tuple

import numpy as np

from .points import points_array

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 10000
CHUNK_SAMPLES = 512


class RoundingPolicy(str, Enum):
    """How intermediate and final coordinates are rounded.

    ``TRUNCATE`` truncates toward zero after every interpolation level,
    reproducing integer pixel arithmetic exactly. ``ROUND`` keeps full
    precision and rounds once at the end. ``EXACT`` never rounds.
    """

    TRUNCATE = "truncate"
    ROUND = "round"
    EXACT = "exact"


def parameter_values(steps: int) -> np.ndarray:
    """Return the ``steps + 1`` evenly spaced values of ``t`` in ``[0, 1]``."""
    if steps < 1:
        raise ValueError(f"steps must be a positive integer, got {steps}")
    # i / steps rather than linspace so every t matches the scalar division
    return np.arange(steps + 1, dtype=np.float64) / steps


def _de_casteljau_chunk(control: np.ndarray, t_values: np.ndarray, rounding: RoundingPolicy) -> np.ndarray:
    working = np.broadcast_to(control, (t_values.shape[0],) + control.shape).copy()
    t = t_values[:, None, None]
    u = 1.0 - t
    while working.shape[1] > 1:
        working = u * working[:, :-1, :] + t * working[:, 1:, :]
        if rounding is RoundingPolicy.TRUNCATE:
            working = np.trunc(working)
    return working[:, 0, :]


def _de_casteljau(control: np.ndarray, t_values: np.ndarray, rounding: RoundingPolicy) -> np.ndarray:
    # Working memory is bounded by CHUNK_SAMPLES * k rather than growing with steps
    result = np.empty((t_values.shape[0], 2), dtype=np.float64)
    for start in range(0, t_values.shape[0], CHUNK_SAMPLES):
        stop = start + CHUNK_SAMPLES
        result[start:stop] = _de_casteljau_chunk(control, t_values[start:stop], rounding)
    if rounding is RoundingPolicy.ROUND:
        result = np.rint(result)
    return result


def evaluate(
    control_points: Iterable[Sequence[float]],
    steps: int = DEFAULT_STEPS,
    rounding: RoundingPolicy = RoundingPolicy.ROUND,
) -> np.ndarray:
    """Sample the Bézier curve defined by ``control_points``.

    Parameters
    ----------
    control_points:
        Ordered ``(x, y)`` points; two or more are needed for a curve.
    steps:
        Number of parameter intervals; the polyline has ``steps + 1`` points.
    rounding:
        Rounding policy applied to the samples (see ``RoundingPolicy``).

    Returns
    -------
    np.ndarray
        Array of shape ``(steps + 1, 2)``, or ``(0, 2)`` when fewer than two
        control points are given.
    """
    rounding = RoundingPolicy(rounding)
    t_values = parameter_values(steps)
    control = points_array(control_points)
    if control.shape[0] < 2:
        return np.empty((0, 2), dtype=np.float64)

    curve = _de_casteljau(control, t_values, rounding)
    logger.debug(
        "Evaluated degree-%d curve with %d samples (%s)",
        control.shape[0] - 1,
        curve.shape[0],
        rounding.value,
    )
    return curve


def point_at(
    control_points: Iterable[Sequence[float]],
    t: float,
    rounding: RoundingPolicy = RoundingPolicy.EXACT,
) -> Tuple[float, float]:
    """Evaluate a single curve point at parameter ``t``."""
    control = points_array(control_points)
    if control.shape[0] == 0:
        raise ValueError("At least one control point is required")
    sample = _de_casteljau(control, np.array([float(t)]), RoundingPolicy(rounding))[0]
    return (float(sample[0]), float(sample[1]))
