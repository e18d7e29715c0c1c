"""Hit testing of pointer positions against control points."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from .points import points_array

DEFAULT_HIT_TOLERANCE = 10.0


def closest_within_tolerance(
    query: Sequence[float],
    points: Iterable[Sequence[float]],
    tolerance: float = DEFAULT_HIT_TOLERANCE,
) -> Optional[int]:
    """Return the index of the point nearest to ``query`` within ``tolerance``.

    A point qualifies only when its distance is strictly below ``tolerance``.
    Equal distances resolve to the lowest index. Returns ``None`` when the
    sequence is empty or no point is close enough.

    Args:
        query: Pointer position ``(x, y)``.
        points: Candidate points, in store order.
        tolerance: Hit radius in the same units as the points.

    Returns:
        Index into ``points`` or ``None``.
    """
    candidates = points_array(points)
    if candidates.shape[0] == 0:
        return None

    qx, qy = float(query[0]), float(query[1])
    distances = np.hypot(candidates[:, 0] - qx, candidates[:, 1] - qy)
    distances[distances >= tolerance] = np.inf

    # argmin picks the first occurrence of the minimum
    index = int(np.argmin(distances))
    if not np.isfinite(distances[index]):
        return None
    return index
