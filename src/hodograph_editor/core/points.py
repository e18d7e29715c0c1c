"""Ordered control-point storage for the curve being edited."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

logger = logging.getLogger(__name__)


def as_point(value: Sequence[float]) -> Point:
    """Coerce an ``(x, y)`` pair into a ``Point`` tuple of floats."""
    x, y = value
    return (float(x), float(y))


def points_array(points: Iterable[Sequence[float]]) -> np.ndarray:
    """Return ``points`` as a float array of shape ``(n, 2)``.

    An empty input yields a ``(0, 2)`` array so downstream slicing keeps
    working without special cases.
    """
    array = np.asarray(list(points), dtype=np.float64)
    return array.reshape(-1, 2)


class PointStore:
    """Owns the ordered sequence of control points.

    Identity is positional: removing a point shifts every later index down
    by one. Out-of-range access raises ``IndexError``; the edit controller
    only touches indices returned by hit testing.
    """

    def __init__(self, points: Optional[Iterable[Sequence[float]]] = None) -> None:
        self._points: List[Point] = [as_point(p) for p in (points if points is not None else ())]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self) -> str:
        return f"PointStore({self._points!r})"

    def size(self) -> int:
        return len(self._points)

    def add(self, point: Sequence[float]) -> None:
        point = as_point(point)
        self._points.append(point)
        logger.debug("Added point %d at %s", len(self._points) - 1, point)

    def remove_at(self, index: int) -> Point:
        """Delete the point at ``index`` and return it."""
        self._check_index(index)
        removed = self._points.pop(index)
        logger.debug("Removed point %d at %s", index, removed)
        return removed

    def set(self, index: int, point: Sequence[float]) -> None:
        self._check_index(index)
        self._points[index] = as_point(point)

    def get(self, index: int) -> Point:
        self._check_index(index)
        return self._points[index]

    def all(self) -> Tuple[Point, ...]:
        """Read-only ordered view of the current points."""
        return tuple(self._points)

    def as_array(self) -> np.ndarray:
        return points_array(self._points)

    def contains_index(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._points)

    def _check_index(self, index: int) -> None:
        # Negative indices would silently wrap on a list
        if not 0 <= index < len(self._points):
            raise IndexError(
                f"Point index {index} out of range for {len(self._points)} point(s)"
            )
