"""PySide6/PyQtGraph window hosting the curve and hodograph panels."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QSplitter, QVBoxLayout, QWidget

from ..config import EditorConfig, resolve_editor_config
from ..core import EditController, PointStore, build_frame
from .canvas import CurveLayers, HodographLayers, PixelViewBox, PointerViewBox

LABEL_FONT_SIZE = 14
PANEL_BACKGROUND = (238, 238, 238)

logger = logging.getLogger(__name__)


class HodographWindow(QMainWindow):
    """Side-by-side editor: Bézier curve on the left, its hodograph on the right."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config or EditorConfig()
        self.store = PointStore()
        self.controller = EditController(
            self.store,
            hit_tolerance=self.config.picking.hit_tolerance_px,
            on_change=self.refresh,
        )

        self.setWindowTitle(self.config.window.title)
        self.resize(self.config.window.width, self.config.window.height)

        curve_box = PointerViewBox(self.controller, self.config.picking.hit_tolerance_px)
        curve_panel, self.curve_plot = self._build_panel("Bezier curve", curve_box)
        hodograph_panel, self.hodograph_plot = self._build_panel("Hodograph", PixelViewBox())

        self._curve_layers = CurveLayers(self.curve_plot.getPlotItem(), self.config)
        self._hodograph_layers = HodographLayers(self.hodograph_plot.getPlotItem(), self.config)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(curve_panel)
        splitter.addWidget(hodograph_panel)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 1)
        splitter.setChildrenCollapsible(False)
        splitter.setHandleWidth(1)
        splitter.handle(1).setEnabled(False)
        self.setCentralWidget(splitter)

        self.refresh()

    def _build_panel(self, title: str, view_box: pg.ViewBox) -> Tuple[QWidget, pg.PlotWidget]:
        """Create a titled panel holding a pixel-space plot."""
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        label = QLabel(title)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFont(QFont("Arial", LABEL_FONT_SIZE, QFont.Weight.Bold))
        label.setStyleSheet("background-color: lightgray;")
        layout.addWidget(label)

        plot = pg.PlotWidget(viewBox=view_box)
        plot.setBackground(PANEL_BACKGROUND)
        plot_item = plot.getPlotItem()
        plot_item.hideAxis("left")
        plot_item.hideAxis("bottom")
        plot_item.hideButtons()
        plot_item.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(plot, 1)
        return panel, plot

    def refresh(self) -> None:
        """Recompute the render frame from the store and redraw both panels."""
        frame = build_frame(
            self.store.all(),
            self.controller.selected_index,
            steps=self.config.curve.steps,
            rounding=self.config.curve.rounding,
        )
        self._curve_layers.update(frame.curve)
        self._hodograph_layers.update(frame.hodograph)


def run(config_path: Optional[Path] = None) -> None:
    config = resolve_editor_config(config_path)
    app = QApplication.instance() or QApplication([])
    pg.setConfigOptions(antialias=True)

    window = HodographWindow(config)
    window.show()
    logger.debug("Editor window opened (%dx%d)", config.window.width, config.window.height)
    app.exec()
