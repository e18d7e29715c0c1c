"""Assembly of the per-redraw render payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from .bezier import DEFAULT_STEPS, RoundingPolicy, evaluate
from .derivative import derive
from .points import points_array


@dataclass(frozen=True)
class CurveView:
    """What the primary panel draws."""

    points: np.ndarray
    selected_index: Optional[int]
    control_polygon: Optional[np.ndarray]
    curve: Optional[np.ndarray]


@dataclass(frozen=True)
class HodographView:
    """What the derivative panel draws."""

    vectors: np.ndarray
    curve: Optional[np.ndarray]


@dataclass(frozen=True)
class RenderFrame:
    curve: CurveView
    hodograph: HodographView


def build_frame(
    points: Iterable[Sequence[float]],
    selected_index: Optional[int] = None,
    *,
    steps: int = DEFAULT_STEPS,
    rounding: RoundingPolicy = RoundingPolicy.ROUND,
) -> RenderFrame:
    """Compute everything both panels need from the current control points.

    Layers that cannot be drawn (fewer than two points or vectors) come back
    as ``None``; a selection index outside the points reads as no selection.
    """
    array = points_array(points)
    count = array.shape[0]

    if selected_index is not None and not 0 <= selected_index < count:
        selected_index = None

    if count >= 2:
        polygon: Optional[np.ndarray] = array
        curve: Optional[np.ndarray] = evaluate(array, steps, rounding)
    else:
        polygon = None
        curve = None

    vectors = derive(array)
    hodograph_curve = evaluate(vectors, steps, rounding) if vectors.shape[0] >= 2 else None

    return RenderFrame(
        curve=CurveView(
            points=array,
            selected_index=selected_index,
            control_polygon=polygon,
            curve=curve,
        ),
        hodograph=HodographView(vectors=vectors, curve=hodograph_curve),
    )
