"""
Interactive Bézier curve editor with a live hodograph view.

The geometry core (point store, hit testing, hodograph and de Casteljau
evaluation, edit state machine) has no Qt dependency; the ``gui`` package
hosts it in a PySide6/PyQtGraph window.
"""

from .config import EditorConfig, load_editor_config, resolve_editor_config
from .core import (
    DEFAULT_HIT_TOLERANCE,
    DEFAULT_STEPS,
    EditController,
    EditState,
    PointerButton,
    PointerEvent,
    PointerKind,
    PointStore,
    RenderFrame,
    RoundingPolicy,
    build_frame,
    closest_within_tolerance,
    derive,
    evaluate,
)
from .settings import get_settings, reset_settings_cache

__all__ = [
    "EditorConfig",
    "load_editor_config",
    "resolve_editor_config",
    "DEFAULT_HIT_TOLERANCE",
    "DEFAULT_STEPS",
    "EditController",
    "EditState",
    "PointerButton",
    "PointerEvent",
    "PointerKind",
    "PointStore",
    "RenderFrame",
    "RoundingPolicy",
    "build_frame",
    "closest_within_tolerance",
    "derive",
    "evaluate",
    "get_settings",
    "reset_settings_cache",
]
