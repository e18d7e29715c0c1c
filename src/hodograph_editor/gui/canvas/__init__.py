"""Canvas components for curve and hodograph display and editing."""

from .layers import CurveLayers, HodographLayers
from .pointer_view import PixelViewBox, PointerViewBox

__all__ = ["CurveLayers", "HodographLayers", "PixelViewBox", "PointerViewBox"]
