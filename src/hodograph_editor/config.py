"""
Configuration models and loader for the editor.

Every tunable constant (hit tolerance, curve resolution, marker sizes,
hodograph display offset, window geometry) lives here. Values come from
defaults, optionally overridden by a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, PositiveFloat, PositiveInt, field_validator, model_validator

from .core.bezier import DEFAULT_STEPS, RoundingPolicy
from .core.picking import DEFAULT_HIT_TOLERANCE
from .settings import get_settings


class CurveConfig(BaseModel):
    """Sampling parameters shared by the curve and the hodograph curve."""

    steps: PositiveInt = Field(
        default=DEFAULT_STEPS, description="Parameter intervals per curve (samples = steps + 1)"
    )
    rounding: RoundingPolicy = Field(
        default=RoundingPolicy.ROUND,
        description="truncate (every interpolation level), round (once at the end) or exact",
    )


class PickingConfig(BaseModel):
    """Pointer hit testing."""

    hit_tolerance_px: PositiveFloat = Field(
        default=DEFAULT_HIT_TOLERANCE, description="Screen radius in pixels that targets a point"
    )


class MarkerConfig(BaseModel):
    """Control point marker appearance."""

    point_size: PositiveInt = Field(default=8, description="Marker diameter in pixels")
    selected_size: PositiveInt = Field(
        default=10, description="Marker diameter in pixels for the point being dragged"
    )

    @model_validator(mode="after")
    def _selected_not_smaller(self) -> "MarkerConfig":
        if self.selected_size < self.point_size:
            raise ValueError("selected_size must be at least point_size")
        return self


class HodographConfig(BaseModel):
    """Display placement of the hodograph panel contents."""

    offset: Tuple[float, float] = Field(
        default=(300.0, 300.0), description="Translation applied to hodograph vectors for display"
    )


class WindowConfig(BaseModel):
    """Main window geometry and styling."""

    width: PositiveInt = Field(default=800)
    height: PositiveInt = Field(default=400)
    title: str = Field(default="Bezier Curve")
    stroke_width: PositiveFloat = Field(default=3.0, description="Line width in pixels")

    @field_validator("title")
    @classmethod
    def _validate_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Window title must not be empty")
        return value


class EditorConfig(BaseModel):
    """Top-level configuration object for an editing session."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    picking: PickingConfig = Field(default_factory=PickingConfig)
    markers: MarkerConfig = Field(default_factory=MarkerConfig)
    hodograph: HodographConfig = Field(default_factory=HodographConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)


def load_editor_config(path: Union[str, Path]) -> EditorConfig:
    """
    Load and validate editor configuration from a YAML file.

    Parameters
    ----------
    path:
        Path to the YAML file. Missing sections fall back to defaults.

    Returns
    -------
    EditorConfig
        Parsed and validated configuration object.
    """

    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle) or {}

    if not isinstance(raw_data, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")
    return EditorConfig.model_validate(raw_data)


def resolve_editor_config(path: Optional[Union[str, Path]] = None) -> EditorConfig:
    """Load ``path``, else the file named by ``HODOGRAPH_CONFIG_PATH``, else defaults."""
    if path is None:
        path = get_settings().config_path
    if path is None:
        return EditorConfig()
    return load_editor_config(path)
