"""Geometry core: point storage, hit testing, hodograph and curve evaluation."""

from .bezier import DEFAULT_STEPS, RoundingPolicy, evaluate, parameter_values, point_at
from .derivative import derive
from .editing import EditController, EditState, PointerButton, PointerEvent, PointerKind
from .frame import CurveView, HodographView, RenderFrame, build_frame
from .picking import DEFAULT_HIT_TOLERANCE, closest_within_tolerance
from .points import Point, PointStore

__all__ = [
    "DEFAULT_STEPS",
    "RoundingPolicy",
    "evaluate",
    "parameter_values",
    "point_at",
    "derive",
    "EditController",
    "EditState",
    "PointerButton",
    "PointerEvent",
    "PointerKind",
    "CurveView",
    "HodographView",
    "RenderFrame",
    "build_frame",
    "DEFAULT_HIT_TOLERANCE",
    "closest_within_tolerance",
    "Point",
    "PointStore",
]
