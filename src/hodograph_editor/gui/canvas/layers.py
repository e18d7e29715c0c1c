"""Plot items for the curve panel and the hodograph panel."""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import pyqtgraph as pg

from ...config import EditorConfig
from ...core import CurveView, HodographView

POINT_COLOR = (0, 0, 0)
SELECTED_COLOR = (255, 0, 0)
POLYGON_COLOR = (255, 175, 175)
CURVE_COLOR = (0, 0, 255)
VECTOR_COLOR = (255, 255, 255)
VECTOR_LINE_COLOR = (0, 255, 0)
HODOGRAPH_CURVE_COLOR = (255, 200, 0)


def _set_polyline(item: pg.PlotCurveItem, points: Optional[np.ndarray]) -> None:
    """Show ``points`` as a connected line, or nothing when there are fewer than two."""
    if points is None or points.shape[0] < 2:
        item.setData([], [])
        return
    item.setData(points[:, 0], points[:, 1])


class CurveLayers:
    """Owns the plot items of the primary panel.

    Draw order, bottom to top: control polygon, Bézier curve, control points.

    Attributes:
        plot_item: PyQtGraph plot item the layers are added to
    """

    def __init__(self, plot_item: pg.PlotItem, config: EditorConfig):
        self.plot_item = plot_item
        self._markers = config.markers
        width = config.window.stroke_width

        self.control_polygon = pg.PlotCurveItem(pen=pg.mkPen(POLYGON_COLOR, width=width))
        self.curve = pg.PlotCurveItem(pen=pg.mkPen(CURVE_COLOR, width=width))
        self.points = pg.ScatterPlotItem(pxMode=True, pen=None)

        for z_value, item in enumerate((self.control_polygon, self.curve, self.points)):
            item.setZValue(z_value)
            self.plot_item.addItem(item)

    def update(self, view: CurveView) -> None:
        _set_polyline(self.control_polygon, view.control_polygon)
        _set_polyline(self.curve, view.curve)

        count = view.points.shape[0]
        sizes = np.full(count, self._markers.point_size, dtype=float)
        brushes: List[object] = [pg.mkBrush(POINT_COLOR)] * count
        if view.selected_index is not None:
            sizes[view.selected_index] = self._markers.selected_size
            brushes[view.selected_index] = pg.mkBrush(SELECTED_COLOR)
        self.points.setData(
            x=view.points[:, 0],
            y=view.points[:, 1],
            size=sizes,
            brush=brushes,
        )


class HodographLayers:
    """Owns the plot items of the hodograph panel.

    Vectors are drawn translated by the configured offset so the hodograph's
    origin sits inside the panel.
    """

    def __init__(self, plot_item: pg.PlotItem, config: EditorConfig):
        self.plot_item = plot_item
        self._offset = np.asarray(config.hodograph.offset, dtype=np.float64)
        width = config.window.stroke_width

        self.plot_item.getViewBox().setBackgroundColor("k")
        self.vector_lines = pg.PlotCurveItem(pen=pg.mkPen(VECTOR_LINE_COLOR, width=width))
        self.curve = pg.PlotCurveItem(pen=pg.mkPen(HODOGRAPH_CURVE_COLOR, width=width))
        self.vectors = pg.ScatterPlotItem(
            pxMode=True,
            pen=None,
            brush=pg.mkBrush(VECTOR_COLOR),
            size=config.markers.point_size,
        )

        for z_value, item in enumerate((self.vector_lines, self.curve, self.vectors)):
            item.setZValue(z_value)
            self.plot_item.addItem(item)

    def update(self, view: HodographView) -> None:
        vectors = view.vectors + self._offset
        self.vectors.setData(x=vectors[:, 0], y=vectors[:, 1])
        _set_polyline(self.vector_lines, vectors)
        curve = None if view.curve is None else view.curve + self._offset
        _set_polyline(self.curve, curve)
